"""
Categorical distribution that performs no deduplication.
"""

from typing import Any, Iterable, Iterator, List, Tuple, TypeVar

from categorical.distribution.categorical import Categorical

# Type variable for distribution outcomes
T = TypeVar('T')

class CategoricalVec(Categorical[T]):
    """
    Categorical distribution backed by plain lists.
    
    Equal outcomes are kept as separate entries, so `len` counts entries
    rather than distinct outcomes. Outcomes only need to support `==`.
    The probability of an outcome is the sum over all of its entries, which
    makes lookups linear in the number of entries.
    
    If duplicates are expected and outcomes are hashable or ordered, prefer
    CategoricalHash or CategoricalOrd.
    """
    
    def __init__(self, pairs: Iterable[Tuple[T, Any]] = ()):
        outcomes: List[T] = []
        weights: List[Any] = []
        for outcome, weight in pairs:
            outcomes.append(outcome)
            weights.append(weight)
        self._outcomes = outcomes
        self._weights = weights
    
    def items(self) -> Iterator[Tuple[T, Any]]:
        return zip(self._outcomes, self._weights)
    
    def probability_of(self, outcome: T) -> Any:
        return sum(
            (weight for candidate, weight in self.items() if candidate == outcome),
            self._zero
        )
    
    def __len__(self) -> int:
        return len(self._outcomes)
