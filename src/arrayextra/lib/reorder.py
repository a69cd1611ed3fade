from typing import TypeVar, Sequence

from ..types import Array

T = TypeVar('T')

__all__ = ['intersperse', 'reverse']


# noinspection PyShadowingBuiltins
def reverse(id: Sequence[T]) -> Array[T]:
    """
    Returns the elements in the opposite order.

    :param id: Input array
    :return: New array
    """
    return tuple(reversed(id))


# noinspection PyShadowingBuiltins
def intersperse(separator: T, id: Sequence[T]) -> Array[T]:
    """
    Places ``separator`` between every two adjacent elements.

    :param separator: Value to insert
    :param id: Input array
    :return: New array, ``2 * len(id) - 1`` long for a non-empty input
    """
    if len(id) <= 1:
        return tuple(id)
    result = [id[0]]
    for v in id[1:]:
        result.append(separator)
        result.append(v)
    return tuple(result)
