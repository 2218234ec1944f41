from setuptools import setup, find_packages

setup(
    name="classifier-comparison-dashboard",
    version="1.0.0",
    description="Interactive dashboard for comparing binary text classifiers",
    author="AI Model Evaluator",
    packages=find_packages(exclude=["tests", "tests.*"]),
    py_modules=["app", "plot_model_comparison"],
    install_requires=[
        "streamlit>=1.29.0",
        "plotly>=5.14.0",
        "pandas>=1.5.0",
        "numpy>=1.22.0",
        "seaborn>=0.12.0",
        "matplotlib>=3.7.0"
    ],
    extras_require={
        "test": ["pytest>=7.0.0"],
    },
    python_requires=">=3.8",
)
