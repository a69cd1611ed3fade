"""
Combining several arrays position by position

All functions except ``interweave`` are truncating: the result is as long as the shortest
input and the extra elements of longer inputs are dropped.
"""
from typing import TypeVar, Any, Callable, Sequence

import builtins

from ..types import Array

T = TypeVar('T')
T2 = TypeVar('T2')
T3 = TypeVar('T3')
T4 = TypeVar('T4')
T5 = TypeVar('T5')
R = TypeVar('R')

__all__ = [
    'apply',
    'interweave',
    'map2',
    'map3',
    'map4',
    'map5',
    'unzip',
    'zip',
    'zip3',
]


def map2(fn: Callable[[T, T2], R], first: Sequence[T], second: Sequence[T2]) -> Array[R]:
    """
    Combines two arrays element by element.

    :param fn: Called as ``fn(first[i], second[i])``
    :param first: First array
    :param second: Second array
    :return: New array, as long as the shorter input
    """
    return tuple(fn(a, b) for a, b in builtins.zip(first, second))


def apply(fns: Sequence[Callable[[T], R]], args: Sequence[T]) -> Array[R]:
    """
    Applies each function to the argument at the same position.

    :param fns: Array of functions
    :param args: Array of arguments
    :return: ``fns[i](args[i])`` for every position present in both arrays
    """
    return map2(lambda fn, arg: fn(arg), fns, args)


def map3(fn: Callable[[T, T2, T3], R],
         first: Sequence[T], second: Sequence[T2], third: Sequence[T3]) -> Array[R]:
    """
    Combines three arrays element by element, truncated to the shortest.
    """
    partials = map2(lambda a, b: lambda c: fn(a, b, c), first, second)
    return apply(partials, third)


def map4(fn: Callable[[T, T2, T3, T4], R],
         first: Sequence[T], second: Sequence[T2], third: Sequence[T3], fourth: Sequence[T4]) -> Array[R]:
    """
    Combines four arrays element by element, truncated to the shortest.
    """
    partials = map3(lambda a, b, c: lambda d: fn(a, b, c, d), first, second, third)
    return apply(partials, fourth)


def map5(fn: Callable[[T, T2, T3, T4, T5], R],
         first: Sequence[T], second: Sequence[T2], third: Sequence[T3], fourth: Sequence[T4],
         fifth: Sequence[T5]) -> Array[R]:
    """
    Combines five arrays element by element, truncated to the shortest.
    """
    partials = map4(lambda a, b, c, d: lambda e: fn(a, b, c, d, e), first, second, third, fourth)
    return apply(partials, fifth)


# noinspection PyShadowingBuiltins
def zip(first: Sequence[T], second: Sequence[T2]) -> Array[tuple[T, T2]]:
    """
    Pairs up the elements of two arrays.

    :param first: First array
    :param second: Second array
    :return: Array of ``(first[i], second[i])`` pairs, as long as the shorter input
    """
    return map2(lambda a, b: (a, b), first, second)


def zip3(first: Sequence[T], second: Sequence[T2], third: Sequence[T3]) -> Array[tuple[T, T2, T3]]:
    """
    Groups the elements of three arrays into triples.

    :param first: First array
    :param second: Second array
    :param third: Third array
    :return: Array of triples, as long as the shortest input
    """
    return map3(lambda a, b, c: (a, b, c), first, second, third)


def unzip(pairs: Sequence[tuple[T, T2]]) -> tuple[Array[T], Array[T2]]:
    """
    Splits an array of pairs into the array of first and the array of second components.

    :param pairs: Array of 2-tuples
    :return: ``(firsts, seconds)``, both as long as the input
    """
    firsts: list[T] = []
    seconds: list[T2] = []
    for a, b in pairs:
        firsts.append(a)
        seconds.append(b)
    return tuple(firsts), tuple(seconds)


# noinspection PyShadowingBuiltins
def interweave(to_interweave: Sequence[T], id: Sequence[T]) -> Array[T]:
    """
    Places the elements of ``to_interweave`` between the elements of ``id``.

    After every element of ``id`` the next unused element of ``to_interweave`` follows, as long
    as there is one. Whatever is left of ``to_interweave`` once ``id`` runs out is added at the
    end. Nothing is dropped, and the arguments are not interchangeable:

    >>> interweave(('on', 'on'), ('t', 't', 't'))
    ('t', 'on', 't', 'on', 't')

    :param to_interweave: Elements to insert
    :param id: Input array
    :return: New array with ``len(id) + len(to_interweave)`` elements
    """
    result: list[Any] = []
    extra = len(to_interweave)
    for i, v in enumerate(id):
        result.append(v)
        if i < extra:
            result.append(to_interweave[i])
    result.extend(to_interweave[len(id):])
    return tuple(result)
