"""
Distribution module for the categorical library.

This module provides categorical probability distributions that can be
queried, normalized and combined under independence.
"""

from categorical.distribution.base import Distribution
from categorical.distribution.errors import CategoricalError, EmptyInputError, InvalidWeightError
from categorical.distribution.categorical import Categorical, DEFAULT_TOLERANCE
from categorical.distribution.hashed import CategoricalHash
from categorical.distribution.ordered import CategoricalOrd
from categorical.distribution.sequence import CategoricalVec
from categorical.distribution.discrete import choose, constant, unit_categorical

__all__ = [
    'Distribution',
    'Categorical',
    'CategoricalHash',
    'CategoricalOrd',
    'CategoricalVec',
    'CategoricalError',
    'EmptyInputError',
    'InvalidWeightError',
    'DEFAULT_TOLERANCE',
    'choose',
    'constant',
    'unit_categorical'
]
