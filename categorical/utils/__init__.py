"""
Utility functions for the categorical library.
"""

from categorical.utils.iterate import iterate, accumulate

__all__ = [
    'iterate',
    'accumulate'
]
