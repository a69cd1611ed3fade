"""
Index helpers shared by the array operations.

Indices are accepted from anything implementing ``__index__`` (ints, bools, numpy integers).
Out of range indices are never an error here, the callers decide the fallback.
"""
import operator

from typing_extensions import SupportsIndex

__all__ = ['to_index', 'in_bounds', 'in_insert_bounds']


def to_index(index: SupportsIndex) -> int:
    """
    Coerce an index argument to a plain int.

    :param index: Index argument
    :return: The index as int
    :raises TypeError: If the argument is not an integer (e.g. a float)
    """
    return operator.index(index)


def in_bounds(index: int, size: int) -> bool:
    """
    Check if an index addresses an existing element.

    :param index: Index, negative values are out of range
    :param size: Length of the array
    :return: True if ``0 <= index < size``
    """
    return 0 <= index < size


def in_insert_bounds(index: int, size: int) -> bool:
    """
    Check if an index is a valid insertion point, the end of the array included.

    :param index: Index, negative values are out of range
    :param size: Length of the array
    :return: True if ``0 <= index <= size``
    """
    return 0 <= index <= size
