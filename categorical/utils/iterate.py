"""
Iteration utilities.

This module provides small helpers for building sequences by repeated
application of a function, such as folding a distribution with itself.
"""

import itertools
from typing import TypeVar, Callable, Iterator, Optional, Iterable

# Type variable for values
T = TypeVar('T')
U = TypeVar('U')

def iterate(step_func: Callable[[T], T], start_value: T) -> Iterator[T]:
    """
    Generate a sequence by repeatedly applying a function to its own result.
    
    This function creates an iterator that yields:
    start_value, step_func(start_value), step_func(step_func(start_value)), ...
    
    Args:
        step_func: Function to apply repeatedly
        start_value: Initial value
        
    Returns:
        Iterator yielding values in sequence
    """
    state = start_value
    while True:
        yield state
        state = step_func(state)


def accumulate(
    iterable: Iterable[T],
    func: Callable[[U, T], U],
    *,
    initial: Optional[U] = None
) -> Iterator[U]:
    """
    Yield every partial fold of `iterable` under `func`.
    
    `Categorical.folded` uses this to combine a list of distributions one at
    a time; the last value yielded is the joint distribution of all of them.
    A given `initial` is yielded first and seeds the fold.
    
    Args:
        iterable: Values to fold
        func: Function of (accumulated value, next value)
        initial: Optional starting value
        
    Returns:
        Iterator of partial folds
    """
    values = iter(iterable) if initial is None else itertools.chain([initial], iterable)
    return itertools.accumulate(values, func)
