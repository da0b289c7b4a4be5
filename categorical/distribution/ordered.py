"""
Categorical distribution that deduplicates outcomes with an ordering.
"""

from bisect import bisect_left
from operator import itemgetter
from typing import Any, Iterable, Iterator, List, Tuple, TypeVar

from categorical.distribution.categorical import Categorical

# Type variable for distribution outcomes
T = TypeVar('T')

class CategoricalOrd(Categorical[T]):
    """
    Categorical distribution backed by sorted parallel lists.
    
    Outcomes only need a total ordering, not a hash, which makes this the
    variant to use for lists and other unhashable values. Outcomes are kept
    in ascending order, so iteration is sorted. Lookup uses binary search.
    """
    
    def __init__(self, pairs: Iterable[Tuple[T, Any]] = ()):
        """
        Initialize the distribution from (outcome, weight) pairs.
        
        Args:
            pairs: Iterable of (outcome, weight) pairs; weights of equal
                outcomes are added together
        """
        keys: List[T] = []
        weights: List[Any] = []
        
        # Equal outcomes end up next to each other once sorted
        for outcome, weight in sorted(pairs, key=itemgetter(0)):
            if keys and keys[-1] == outcome:
                weights[-1] = weights[-1] + weight
            else:
                keys.append(outcome)
                weights.append(weight)
        
        self._keys = keys
        self._weights = weights
    
    def items(self) -> Iterator[Tuple[T, Any]]:
        return zip(self._keys, self._weights)
    
    def _index_of(self, outcome: T) -> int:
        """Return the position of outcome, or -1 if absent."""
        try:
            i = bisect_left(self._keys, outcome)
        except TypeError:
            # Not comparable with the stored keys, so not one of them
            return -1
        if i < len(self._keys) and self._keys[i] == outcome:
            return i
        return -1
    
    def probability_of(self, outcome: T) -> Any:
        i = self._index_of(outcome)
        if i < 0:
            return self._zero
        return self._weights[i]
    
    def __len__(self) -> int:
        return len(self._keys)
    
    def __contains__(self, outcome: Any) -> bool:
        return self._index_of(outcome) >= 0
