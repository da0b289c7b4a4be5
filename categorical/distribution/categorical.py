"""
Categorical probability distributions.

A categorical distribution assigns a probability weight to each of a finite
number of outcomes. Two independent categoricals can be combined into a joint
distribution over outcomes derived from each pair of input outcomes.

Weights are never coerced to float: ints, floats, fractions, decimals and
numpy scalars all work, and exact types stay exact.
"""

import math
from abc import abstractmethod
from collections.abc import Mapping
from itertools import islice
from typing import Any, Callable, Iterable, Iterator, Tuple, Type, TypeVar

from categorical.distribution.base import Distribution
from categorical.distribution.errors import EmptyInputError, InvalidWeightError
from categorical.logging import log_combination, log_construction, log_rejection
from categorical.utils import accumulate, iterate

# Type variables for outcomes
T = TypeVar('T')
T1 = TypeVar('T1')
T2 = TypeVar('T2')
C = TypeVar('C', bound='Categorical')

# Default tolerance when checking that weights sum to one
DEFAULT_TOLERANCE = 1e-9


class Categorical(Distribution[T]):
    """
    Base class for categorical distributions over outcomes of type T.

    Subclasses decide how equal outcomes are detected and stored: by hashing,
    by ordering, or not at all. Every subclass accepts an iterable of
    (outcome, weight) pairs in its constructor and never changes its contents
    afterwards; operations that produce a different distribution return a new
    instance.

    Constructing directly from pairs performs no validation and no
    normalization. Use `uniform` or `weighted` to obtain a checked,
    normalized distribution.
    """

    @abstractmethod
    def __init__(self, pairs: Iterable[Tuple[T, Any]] = ()):
        pass

    @abstractmethod
    def items(self) -> Iterator[Tuple[T, Any]]:
        """
        Return an iterator over (outcome, weight) pairs.

        Returns:
            Iterator of (outcome, weight) pairs in storage order
        """
        pass

    @abstractmethod
    def probability_of(self, outcome: T) -> Any:
        """
        Return the probability of an outcome.

        Outcomes that are not part of the distribution have probability zero;
        asking for them is not an error.

        Args:
            outcome: The outcome to look up

        Returns:
            The weight of the outcome, or zero if absent
        """
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    # Construction

    @classmethod
    def from_pairs(cls: Type[C], pairs: Iterable[Tuple[T, Any]]) -> C:
        """
        Build a distribution from raw (outcome, weight) pairs.

        Weights are taken as given: they are neither checked nor normalized.

        Args:
            pairs: Iterable of (outcome, weight) pairs

        Returns:
            New distribution
        """
        return cls(pairs)

    @classmethod
    def uniform(cls: Type[C], outcomes: Iterable[T], one: Any = 1) -> C:
        """
        Build a distribution giving the same probability to each outcome.

        An outcome listed k times receives k shares, so `[a, a, b]` yields
        2/3 for `a` and 1/3 for `b`.

        Args:
            outcomes: Outcomes to choose from
            one: The unit weight, e.g. `Fraction(1)` for exact probabilities

        Returns:
            New normalized distribution

        Raises:
            EmptyInputError: If no outcomes are given
        """
        pairs = [(outcome, one) for outcome in outcomes]
        if not pairs:
            log_rejection("uniform", "empty_input", distribution=cls.__name__)
            raise EmptyInputError(f"{cls.__name__}.uniform requires at least one outcome")

        result = cls(pairs).normalized()
        log_construction("uniform", result)
        return result

    @classmethod
    def weighted(cls: Type[C], pairs: Any) -> C:
        """
        Build a normalized distribution from (outcome, weight) pairs.

        Weights of equal outcomes are summed, then all weights are scaled so
        that they add up to one.

        Args:
            pairs: Iterable of (outcome, weight) pairs, or a mapping from
                outcome to weight

        Returns:
            New normalized distribution

        Raises:
            EmptyInputError: If no pairs are given
            InvalidWeightError: If a weight is negative or infinite, or the
                weights do not have a positive finite sum
        """
        if isinstance(pairs, Mapping):
            pairs = pairs.items()
        pairs = list(pairs)

        if not pairs:
            log_rejection("weighted", "empty_input", distribution=cls.__name__)
            raise EmptyInputError(f"{cls.__name__}.weighted requires at least one outcome")

        for outcome, weight in pairs:
            # Written so that NaN fails as well
            if not 0 <= weight < math.inf:
                log_rejection("weighted", "invalid_weight",
                              distribution=cls.__name__, outcome=outcome, weight=weight)
                raise InvalidWeightError(
                    f"Weight of outcome {outcome!r} must be non-negative and finite, got {weight!r}"
                )

        result = cls(pairs).normalized()
        log_construction("weighted", result)
        return result

    # Combination

    @classmethod
    def combined(
        cls: Type[C],
        first: 'Categorical[T1]',
        second: 'Categorical[T2]',
        merge: Callable[[T1, T2], T]
    ) -> C:
        """
        Combine two independent distributions into a distribution of `cls`.

        Every pair of outcomes (a, b) contributes the probability p(a) * p(b)
        to the outcome merge(a, b). The inputs may be of any categorical
        type; the result is always an instance of `cls`.

        Args:
            first: Distribution supplying the first argument of `merge`
            second: Distribution supplying the second argument of `merge`
            merge: Function mapping a pair of outcomes to a new outcome

        Returns:
            New distribution over merged outcomes
        """
        result = cls(
            (merge(a, b), pa * pb)
            for a, pa in first.items()
            for b, pb in second.items()
        )
        log_combination(first, second, result)
        return result

    def combine(self, other: 'Categorical[T2]', merge: Callable[[T, T2], Any]) -> 'Categorical[Any]':
        """
        Combine with an independent distribution using a merge function.

        The result has the same categorical type as self. Neither input
        is modified.

        Args:
            other: The other distribution
            merge: Function mapping (outcome of self, outcome of other) to a new outcome

        Returns:
            New distribution over merged outcomes
        """
        return type(self).combined(self, other, merge)

    def repeated(self, times: int, merge: Callable[[Any, T], Any]) -> 'Categorical[Any]':
        """
        Combine this distribution with itself `times` times in total.

        For example `die.repeated(3, operator.add)` is the distribution of the
        sum of three independent rolls.

        Args:
            times: Number of independent copies, at least 1
            merge: Function folding the accumulated outcome with a new outcome

        Returns:
            New distribution over folded outcomes

        Raises:
            ValueError: If times is less than 1
        """
        if times < 1:
            raise ValueError(f"times must be at least 1, got {times}")

        steps = iterate(lambda acc: acc.combine(self, merge), self)
        return next(islice(steps, times - 1, None))

    @classmethod
    def folded(
        cls,
        distributions: Iterable['Categorical[Any]'],
        merge: Callable[[Any, Any], Any],
        initial: 'Categorical[Any]' = None
    ) -> 'Categorical[Any]':
        """
        Combine a sequence of independent distributions from left to right.

        Each step combines the accumulated distribution with the next one
        into an instance of `cls`. A single distribution without `initial`
        is returned as is.

        Args:
            distributions: Independent distributions to fold
            merge: Function mapping (accumulated outcome, next outcome) to a new outcome
            initial: Optional distribution to start from

        Returns:
            Distribution over folded outcomes

        Raises:
            EmptyInputError: If there is nothing to fold
        """
        result = None
        for result in accumulate(distributions, lambda acc, d: cls.combined(acc, d, merge),
                                 initial=initial):
            pass

        if result is None:
            log_rejection("folded", "empty_input", distribution=cls.__name__)
            raise EmptyInputError(f"{cls.__name__}.folded requires at least one distribution")
        return result

    # Normalization and queries

    def normalized(self: C) -> C:
        """
        Return a copy whose weights are scaled to sum to one.

        Returns:
            New normalized distribution of the same type

        Raises:
            InvalidWeightError: If the total is zero, negative, infinite or NaN
        """
        total = self.total()
        if not 0 < total < math.inf:
            log_rejection("normalize", "invalid_total",
                          distribution=type(self).__name__, size=len(self), total=total)
            raise InvalidWeightError(
                f"Cannot normalize a distribution whose weights sum to {total!r}"
            )

        return type(self)((outcome, weight / total) for outcome, weight in self.items())

    def total(self) -> Any:
        """Return the sum of all weights."""
        return sum(self.probabilities, self._zero)

    def is_normalized(self, tolerance: float = DEFAULT_TOLERANCE) -> bool:
        """Check whether the weights sum to one within `tolerance`."""
        return abs(self.total() - 1) <= tolerance

    def expectation(self, f: Callable[[T], Any]) -> Any:
        """
        Calculate the expectation of f(X) as the weighted sum over outcomes.

        Args:
            f: Function to apply to each outcome

        Returns:
            Expected value of f(X)
        """
        return sum((weight * f(outcome) for outcome, weight in self.items()), self._zero)

    @property
    def outcomes(self) -> Tuple[T, ...]:
        return tuple(outcome for outcome, _ in self.items())

    @property
    def probabilities(self) -> Tuple[Any, ...]:
        return tuple(weight for _, weight in self.items())

    @property
    def _zero(self) -> Any:
        # Zero in the weights' own numeric type, taken from the first finite weight
        for _, weight in self.items():
            zero = weight * 0
            # inf * 0 is NaN, which never equals itself
            if zero == zero:
                return zero
        return 0

    def __iter__(self) -> Iterator[T]:
        return (outcome for outcome, _ in self.items())

    def __contains__(self, outcome: Any) -> bool:
        return any(candidate == outcome for candidate in self)

    def __repr__(self) -> str:
        """
        Return a string representation of the distribution.

        Returns:
            String representation
        """
        entries = [f"{outcome!r}: {weight!r}" for outcome, weight in self.items()]
        if len(entries) > 5:
            entries = entries[:3] + ["...", entries[-1]]
        return f"{type(self).__name__}({{{', '.join(entries)}}})"
