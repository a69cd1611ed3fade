"""
Array primitives

Arrays are tuples. Every function accepts any sequence and returns a new tuple,
the input is never modified.
"""
from typing import TypeVar, Any, Callable, Iterable, Sequence

import builtins

from typing_extensions import SupportsIndex

from ..types import Array
from ..types.na import NA
from ..core.index import to_index, in_bounds
from . import log as _log

T = TypeVar('T')
U = TypeVar('U')
A = TypeVar('A')

__all__ = [
    'append',
    'empty',
    'filter',
    'foldl',
    'foldr',
    'from_items',
    'from_list',
    'get',
    'indexed_map',
    'initialize',
    'is_empty',
    'length',
    'map',
    'member',
    'push',
    'repeat',
    'set',
    'slice',
    'to_indexed_list',
    'to_list',
]


def empty() -> Array[Any]:
    """
    Returns an array with no elements.

    :return: Empty array
    """
    return ()


def initialize(size: SupportsIndex, fn: Callable[[int], T]) -> Array[T]:
    """
    Creates an array of the given size, element ``i`` is ``fn(i)``.

    :param size: Number of elements, zero or negative gives an empty array
    :param fn: Function called with the index of each element
    :return: New array
    """
    return tuple(fn(i) for i in builtins.range(to_index(size)))


def repeat(size: SupportsIndex, value: T) -> Array[T]:
    """
    Creates an array with ``size`` copies of ``value``.

    :param size: Number of elements, zero or negative gives an empty array
    :param value: Value of every element
    :return: New array
    """
    return (value,) * builtins.max(to_index(size), 0)


def from_items(*items: T) -> Array[T]:
    """
    Returns an array containing the specified elements.

    :param items: Elements to include in the array
    :return: Array containing the specified elements
    """
    return items


def from_list(items: Iterable[T]) -> Array[T]:
    """
    Returns an array with the elements of any iterable, in iteration order.

    :param items: Source elements
    :return: New array
    """
    return tuple(items)


# noinspection PyShadowingBuiltins
def to_list(id: Sequence[T]) -> list[T]:
    """
    Returns the elements of the array as a list.

    :param id: Input array
    :return: New list
    """
    return list(id)


# noinspection PyShadowingBuiltins
def to_indexed_list(id: Sequence[T]) -> list[tuple[int, T]]:
    """
    Returns a list of ``(index, element)`` pairs.

    :param id: Input array
    :return: New list of pairs
    """
    return list(enumerate(id))


# noinspection PyShadowingBuiltins
def length(id: Sequence[Any]) -> int:
    """
    Returns the number of elements in the array.

    :param id: Input array
    :return: Number of elements
    """
    return len(id)


# noinspection PyShadowingBuiltins
def is_empty(id: Sequence[Any]) -> bool:
    """
    Returns true if the array has no elements.

    :param id: Input array
    :return: True if the array is empty
    """
    return len(id) == 0


# noinspection PyShadowingBuiltins
def get(index: SupportsIndex, id: Sequence[T]) -> T | NA[Any]:
    """
    Returns the element at the specified index in the array.
    Negative indices are not counted from the end, they are out of range like any other.

    :param index: Index of the element to return
    :param id: Input array
    :return: Element at the specified index, or NA if the index is out of range
    """
    index = to_index(index)
    if not in_bounds(index, len(id)):
        return NA(None)
    return id[index]


# noinspection PyShadowingBuiltins
def set(index: SupportsIndex, value: T, id: Sequence[T]) -> Array[T]:
    """
    Returns a copy of the array with the element at ``index`` replaced by ``value``.

    :param index: Index of the element to replace
    :param value: New value
    :param id: Input array
    :return: New array, or the input unchanged if the index is out of range
    """
    index = to_index(index)
    size = len(id)
    if not in_bounds(index, size):
        _log.fallback('set', index, size)
        return tuple(id)
    return (*id[:index], value, *id[index + 1:])


# noinspection PyShadowingBuiltins
def push(value: T, id: Sequence[T]) -> Array[T]:
    """
    Returns a copy of the array with ``value`` added to the end.

    :param value: Value to add
    :param id: Input array
    :return: New array
    """
    return (*id, value)


def append(first: Sequence[T], second: Sequence[T]) -> Array[T]:
    """
    Concatenates two arrays into a single array.

    :param first: First array
    :param second: Second array, its elements come after the elements of ``first``
    :return: Array containing the elements of both input arrays
    """
    return (*first, *second)


# noinspection PyShadowingBuiltins
def slice(start: SupportsIndex, end: SupportsIndex, id: Sequence[T]) -> Array[T]:
    """
    Returns the elements from ``start`` (inclusive) to ``end`` (exclusive).

    Negative indices are counted from the end of the array, indices beyond the bounds are
    clamped, so the result may be shorter than ``end - start`` or empty.

    :param start: Start index
    :param end: End index
    :param id: Input array
    :return: New array
    """
    return tuple(id[to_index(start):to_index(end)])


# noinspection PyShadowingBuiltins
def map(fn: Callable[[T], U], id: Sequence[T]) -> Array[U]:
    """
    Applies a function to every element.

    :param fn: Transform
    :param id: Input array
    :return: New array of the results
    """
    return tuple(fn(v) for v in id)


# noinspection PyShadowingBuiltins
def indexed_map(fn: Callable[[int, T], U], id: Sequence[T]) -> Array[U]:
    """
    Applies a function to every element and its index.

    :param fn: Transform, called as ``fn(index, element)``
    :param id: Input array
    :return: New array of the results
    """
    return tuple(fn(i, v) for i, v in enumerate(id))


# noinspection PyShadowingBuiltins
def filter(predicate: Callable[[T], Any], id: Sequence[T]) -> Array[T]:
    """
    Keeps the elements that satisfy the predicate.

    :param predicate: Test for each element
    :param id: Input array
    :return: New array of the kept elements, in order
    """
    return tuple(v for v in id if predicate(v))


# noinspection PyShadowingBuiltins
def foldl(fn: Callable[[T, A], A], initial: A, id: Sequence[T]) -> A:
    """
    Reduces the array from the left.

    :param fn: Called as ``fn(element, accumulator)``
    :param initial: Starting accumulator
    :param id: Input array
    :return: Final accumulator
    """
    acc = initial
    for v in id:
        acc = fn(v, acc)
    return acc


# noinspection PyShadowingBuiltins
def foldr(fn: Callable[[T, A], A], initial: A, id: Sequence[T]) -> A:
    """
    Reduces the array from the right.

    :param fn: Called as ``fn(element, accumulator)``
    :param initial: Starting accumulator
    :param id: Input array
    :return: Final accumulator
    """
    acc = initial
    for v in reversed(id):
        acc = fn(v, acc)
    return acc


# noinspection PyShadowingBuiltins
def member(value: Any, id: Sequence[Any]) -> bool:
    """
    Returns true if the array contains the specified value, false otherwise.

    :param value: Value to search for
    :param id: Input array
    :return: True if the array contains the specified value
    """
    return value in id
