"""
Setup script for the categorical package.
"""

from setuptools import setup, find_packages

setup(
    name="categorical",
    version="0.1.0",
    description="Categorical probability distributions with independent combination",
    packages=find_packages(include=["categorical", "categorical.*"]),
    install_requires=[
        "numpy>=1.24.0",
    ],
    extras_require={
        "test": [
            "pytest>=7.0",
        ],
    },
    python_requires=">=3.8",
)
