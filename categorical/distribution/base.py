"""
Base class for probability distributions.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Generic, TypeVar

# Type variable for distribution outcomes
T = TypeVar('T')

class Distribution(ABC, Generic[T]):
    """
    Base class for probability distributions.
    
    This abstract class defines the interface shared by all distributions
    in the library. Distributions are read-only once constructed and can be
    used to compute expectations.
    """
    
    @abstractmethod
    def expectation(self, f: Callable[[T], Any]) -> Any:
        """
        Return the expectation of f(X) where X is the random variable.
        
        Args:
            f: Function to apply to each outcome
            
        Returns:
            Expected value of f(X)
        """
        pass
