from collections import abc
from functools import wraps
from typing import TypeVar


# Borrowed from: funcy
def collecting(func):
    """ Convert a generator to a list-returning function

    Example:
        @collecting
        def count():
            yield 1
            yield 2
            yield 3
    """
    @wraps(func)
    def wrapper(*args, **kwargs):
        return list(
            func(*args, **kwargs)
        )
    return wrapper


T = TypeVar('T')


# Borrowed from: funcy
def distinct(seq: abc.Iterable[T]) -> abc.Iterator[T]:
    """ Iterate over unique items, keeping the order they were first seen in

    Example:
        list(distinct(['id', 'name', 'id'])) #-> ['id', 'name']
    """
    seen = set()
    for item in seq:
        if item not in seen:
            seen.add(item)
            yield item
