from typing import TypeVar, Any, Callable, Sequence

import builtins

from ..types import Array
from ..types.na import NA, is_na

T = TypeVar('T')
U = TypeVar('U')

__all__ = [
    'all',
    'any',
    'filter_map',
    'indexed_map_to_list',
    'map_to_list',
    'remove_when',
]


# noinspection PyShadowingBuiltins
def all(predicate: Callable[[T], Any], id: Sequence[T]) -> bool:
    """
    Returns true if every element satisfies the predicate. True for an empty array.

    :param predicate: Test for each element
    :param id: Input array
    :return: True if no element fails the predicate
    """
    return builtins.all(predicate(v) for v in id)


# noinspection PyShadowingBuiltins
def any(predicate: Callable[[T], Any], id: Sequence[T]) -> bool:
    """
    Returns true if at least one element satisfies the predicate. False for an empty array.

    :param predicate: Test for each element
    :param id: Input array
    :return: True if some element passes the predicate
    """
    return builtins.any(predicate(v) for v in id)


# noinspection PyShadowingBuiltins
def remove_when(predicate: Callable[[T], Any], id: Sequence[T]) -> Array[T]:
    """
    Drops the elements that satisfy the predicate, keeping the order of the rest.

    :param predicate: Test for each element
    :param id: Input array
    :return: New array of the elements for which the predicate is false
    """
    return tuple(v for v in id if not predicate(v))


# noinspection PyShadowingBuiltins
def filter_map(fn: Callable[[T], U | None | NA[Any]], id: Sequence[T]) -> Array[U]:
    """
    Applies ``fn`` to every element and keeps the present results.
    A result is absent if it is ``None`` or NA.

    :param fn: Transform, returns an absent value to drop the element
    :param id: Input array
    :return: New array of the present results, in order
    """
    results = (fn(v) for v in id)
    return tuple(r for r in results if not is_na(r))


# noinspection PyShadowingBuiltins
def map_to_list(fn: Callable[[T], U], id: Sequence[T]) -> list[U]:
    """
    Applies ``fn`` to every element and collects the results into a list.

    :param fn: Transform
    :param id: Input array
    :return: New list
    """
    return [fn(v) for v in id]


# noinspection PyShadowingBuiltins
def indexed_map_to_list(fn: Callable[[int, T], U], id: Sequence[T]) -> list[U]:
    """
    Applies ``fn`` to every element and its index and collects the results into a list.

    :param fn: Transform, called as ``fn(index, element)``
    :param id: Input array
    :return: New list
    """
    return [fn(i, v) for i, v in enumerate(id)]
