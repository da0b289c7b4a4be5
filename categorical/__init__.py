"""
Categorical probability distributions.

This library provides a type representing a discrete categorical probability
distribution: a finite collection of outcomes, each tagged with a probability.
Two distributions can be combined to compute the probability of each
combination of outcomes, assuming they are sampled independently.

    >>> from categorical import CategoricalHash
    >>> die = CategoricalHash.uniform([1, 2, 3, 4, 5, 6])
    >>> max_of_two = die.combine(die, max)
    >>> double_wins = max_of_two.combine(die, lambda a, b: a > b).probability_of(True)
"""

import logging

__version__ = '0.1.0'

# Library logger stays silent until the application configures it
logging.getLogger(__name__).addHandler(logging.NullHandler())

from categorical import distribution
from categorical import utils
from categorical.distribution import (
    Distribution,
    Categorical,
    CategoricalHash,
    CategoricalOrd,
    CategoricalVec,
    CategoricalError,
    EmptyInputError,
    InvalidWeightError,
    choose,
    constant,
    unit_categorical,
)

__all__ = [
    'distribution',
    'utils',
    'Distribution',
    'Categorical',
    'CategoricalHash',
    'CategoricalOrd',
    'CategoricalVec',
    'CategoricalError',
    'EmptyInputError',
    'InvalidWeightError',
    'choose',
    'constant',
    'unit_categorical'
]
