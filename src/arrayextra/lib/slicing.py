"""
Index and slice operations

Two index conventions live side by side here:

- ``slice_from`` and ``slice_until`` count negative offsets from the end of the array.
- ``update``, ``split_at``, ``remove_at`` and ``insert_at`` treat a negative index as out of
  range and return the input unchanged (``split_at`` returns ``((), input)``).

None of them raise for an index that is out of range.
"""
from typing import TypeVar, Callable, Sequence

from typing_extensions import SupportsIndex

from ..types import Array
from ..core.index import to_index, in_bounds, in_insert_bounds
from . import log as _log

T = TypeVar('T')

__all__ = [
    'insert_at',
    'pop',
    'remove_at',
    'resizel_indexed',
    'resizel_repeat',
    'resizer_indexed',
    'resizer_repeat',
    'slice_from',
    'slice_until',
    'split_at',
    'update',
]


# noinspection PyShadowingBuiltins
def update(index: SupportsIndex, fn: Callable[[T], T], id: Sequence[T]) -> Array[T]:
    """
    Replaces the element at ``index`` with ``fn`` applied to it.

    :param index: Index of the element to update
    :param fn: Function called with the current element
    :param id: Input array
    :return: New array, or the input unchanged if the index is out of range
    """
    index = to_index(index)
    size = len(id)
    if not in_bounds(index, size):
        _log.fallback('update', index, size)
        return tuple(id)
    return (*id[:index], fn(id[index]), *id[index + 1:])


# noinspection PyShadowingBuiltins
def slice_from(index: SupportsIndex, id: Sequence[T]) -> Array[T]:
    """
    Keeps the elements from ``index`` to the end.

    A negative index is counted from the end, so ``slice_from(-2, id)`` keeps the last two
    elements. Offsets past either end give the full or the empty array.

    :param index: Start offset
    :param id: Input array
    :return: New array
    """
    return tuple(id[to_index(index):])


# noinspection PyShadowingBuiltins
def slice_until(index: SupportsIndex, id: Sequence[T]) -> Array[T]:
    """
    Keeps the elements before ``index``.

    A negative index is counted from the end, so ``slice_until(-1, id)`` drops the last element.

    :param index: End offset (exclusive)
    :param id: Input array
    :return: New array
    """
    return tuple(id[:to_index(index)])


# noinspection PyShadowingBuiltins
def split_at(index: SupportsIndex, id: Sequence[T]) -> tuple[Array[T], Array[T]]:
    """
    Splits the array into the elements before ``index`` and the rest.

    Unlike ``slice_until``/``slice_from``, an index of zero or below is not counted from the
    end: the result is then the empty array and the whole input.

    :param index: Split position
    :param id: Input array
    :return: ``(left, right)`` pair
    """
    index = to_index(index)
    if index <= 0:
        if index < 0:
            _log.fallback('split_at', index, len(id), "split before the first element")
        return (), tuple(id)
    return slice_until(index, id), slice_from(index, id)


# noinspection PyShadowingBuiltins
def pop(id: Sequence[T]) -> Array[T]:
    """
    Removes the last element. An empty array stays empty.

    :param id: Input array
    :return: New array
    """
    return tuple(id[:-1])


# noinspection PyShadowingBuiltins
def remove_at(index: SupportsIndex, id: Sequence[T]) -> Array[T]:
    """
    Removes the element at ``index``.

    :param index: Index of the element to remove
    :param id: Input array
    :return: New array, or the input unchanged if the index is out of range
    """
    index = to_index(index)
    size = len(id)
    if not in_bounds(index, size):
        _log.fallback('remove_at', index, size)
        return tuple(id)
    return (*id[:index], *id[index + 1:])


# noinspection PyShadowingBuiltins
def insert_at(index: SupportsIndex, value: T, id: Sequence[T]) -> Array[T]:
    """
    Inserts ``value`` so that it becomes the element at ``index``, shifting the tail right.
    Inserting at ``len(id)`` appends.

    :param index: Position of the new element
    :param value: Value to insert
    :param id: Input array
    :return: New array, or the input unchanged if the index is out of range
    """
    index = to_index(index)
    size = len(id)
    if not in_insert_bounds(index, size):
        _log.fallback('insert_at', index, size)
        return tuple(id)
    return (*id[:index], value, *id[index:])


#
# Resizing
#
# The "l" variants keep the start of the array in place and grow or shrink at the end,
# the "r" variants keep the end in place and grow or shrink at the start.
#

# noinspection PyShadowingBuiltins
def resizel_repeat(new_length: SupportsIndex, default: T, id: Sequence[T]) -> Array[T]:
    """
    Resizes the array to ``new_length``, padding or truncating at the end.

    :param new_length: Length of the result, zero or negative gives an empty array
    :param default: Padding value for new elements
    :param id: Input array
    :return: New array of exactly ``max(new_length, 0)`` elements
    """
    new_length = to_index(new_length)
    if new_length <= 0:
        return ()
    missing = new_length - len(id)
    if missing > 0:
        return (*id, *((default,) * missing))
    return slice_until(new_length, id)


# noinspection PyShadowingBuiltins
def resizer_repeat(new_length: SupportsIndex, default: T, id: Sequence[T]) -> Array[T]:
    """
    Resizes the array to ``new_length``, padding or truncating at the start.

    :param new_length: Length of the result, zero or negative gives an empty array
    :param default: Padding value for new elements
    :param id: Input array
    :return: New array of exactly ``max(new_length, 0)`` elements
    """
    new_length = to_index(new_length)
    if new_length <= 0:
        return ()
    missing = new_length - len(id)
    if missing > 0:
        return (*((default,) * missing), *id)
    return slice_from(-new_length, id)


# noinspection PyShadowingBuiltins
def resizel_indexed(new_length: SupportsIndex, fn: Callable[[int], T], id: Sequence[T]) -> Array[T]:
    """
    Resizes the array to ``new_length``, padding or truncating at the end.
    New elements are ``fn(i)`` where ``i`` is their index in the result.

    :param new_length: Length of the result, zero or negative gives an empty array
    :param fn: Called with the index of each new element
    :param id: Input array
    :return: New array of exactly ``max(new_length, 0)`` elements
    """
    new_length = to_index(new_length)
    if new_length <= 0:
        return ()
    size = len(id)
    if new_length > size:
        return (*id, *(fn(i) for i in range(size, new_length)))
    return slice_until(new_length, id)


# noinspection PyShadowingBuiltins
def resizer_indexed(new_length: SupportsIndex, fn: Callable[[int], T], id: Sequence[T]) -> Array[T]:
    """
    Resizes the array to ``new_length``, padding or truncating at the start.
    New elements are ``fn(i)`` where ``i`` is their index in the result, so the padding
    is ``fn(0), fn(1), ...`` followed by the original elements.

    >>> resizer_indexed(5, lambda i: i * 2, (10, 25, 36))
    (0, 2, 10, 25, 36)

    :param new_length: Length of the result, zero or negative gives an empty array
    :param fn: Called with the index of each new element
    :param id: Input array
    :return: New array of exactly ``max(new_length, 0)`` elements
    """
    new_length = to_index(new_length)
    if new_length <= 0:
        return ()
    missing = new_length - len(id)
    if missing > 0:
        return (*(fn(i) for i in range(missing)), *id)
    return slice_from(-new_length, id)
