"""
Convenience constructors for common discrete distributions.
"""

from typing import Any, Iterable, Tuple, Type, TypeVar

from categorical.distribution.categorical import Categorical
from categorical.distribution.hashed import CategoricalHash

# Type variable for distribution outcomes
T = TypeVar('T')

def choose(options: Iterable[T], cls: Type[Categorical] = CategoricalHash, one: Any = 1) -> Categorical[T]:
    """
    Uniform distribution over a finite set of options.
    
    Args:
        options: Collection of items to choose from with equal probability
        cls: Categorical type of the result
        one: The unit weight
        
    Returns:
        Uniform distribution over the options
        
    Raises:
        EmptyInputError: If options is empty
    """
    return cls.uniform(options, one=one)


def constant(value: T, cls: Type[Categorical] = CategoricalHash, one: Any = 1) -> Categorical[T]:
    """
    A distribution with a single outcome that has probability 1.
    
    Combining with a constant distribution applies the merge function with
    a fixed second argument.
    
    Args:
        value: The only outcome
        cls: Categorical type of the result
        one: The unit weight
        
    Returns:
        Point mass at value
    """
    return cls([(value, one)])


def unit_categorical(cls: Type[Categorical] = CategoricalHash, one: Any = 1) -> Categorical[Tuple[()]]:
    """Distribution with the single outcome () at probability one."""
    return constant((), cls=cls, one=one)
