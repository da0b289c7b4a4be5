"""
Categorical distribution that deduplicates outcomes with a hash table.
"""

from typing import Any, Dict, Iterable, Iterator, Tuple, TypeVar

from categorical.distribution.categorical import Categorical

# Type variable for distribution outcomes
T = TypeVar('T')

class CategoricalHash(Categorical[T]):
    """
    Categorical distribution backed by a dict.
    
    Outcomes must be hashable. Weights of equal outcomes are summed on
    construction, and probability lookup takes constant time.
    """
    
    def __init__(self, pairs: Iterable[Tuple[T, Any]] = ()):
        """
        Initialize the distribution from (outcome, weight) pairs.
        
        Args:
            pairs: Iterable of (outcome, weight) pairs; weights of equal
                outcomes are added together
        """
        weights: Dict[T, Any] = {}
        for outcome, weight in pairs:
            if outcome in weights:
                weights[outcome] = weights[outcome] + weight
            else:
                weights[outcome] = weight
        self._weights = weights
    
    def items(self) -> Iterator[Tuple[T, Any]]:
        return iter(self._weights.items())
    
    def probability_of(self, outcome: T) -> Any:
        return self._weights.get(outcome, self._zero)
    
    def __len__(self) -> int:
        return len(self._weights)
    
    def __contains__(self, outcome: Any) -> bool:
        return outcome in self._weights
