"""
Exceptions raised when a categorical distribution cannot be constructed.
"""


class CategoricalError(ValueError):
    """Base class for errors raised by the categorical library."""


class EmptyInputError(CategoricalError):
    """
    Raised when a distribution is requested over zero outcomes.

    There is no meaningful uniform or weighted distribution over an empty
    collection, so construction is rejected instead of returning an empty
    distribution.
    """


class InvalidWeightError(CategoricalError):
    """
    Raised when weights cannot form a probability distribution.

    This covers negative (or NaN) weights and weights that sum to zero,
    for which normalization is undefined.
    """
