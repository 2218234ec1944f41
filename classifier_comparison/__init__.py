"""
Classifier Comparison Dashboard - Interactive comparison of binary text classifiers
"""

__version__ = "1.0.0"

# Make key modules available at the package level
from . import data
from . import analysis
from . import state
