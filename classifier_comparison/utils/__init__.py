"""
Formatting helpers and Streamlit UI components
"""

from .formatting import format_percentage, format_signed, format_count
