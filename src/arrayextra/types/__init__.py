from typing import TypeVar, TypeAlias

from .na import NA, is_na, na_any

__all__ = ['Array', 'NA', 'is_na', 'na_any']

T = TypeVar('T')

# The result type of every array operation, inputs may be any Sequence
Array: TypeAlias = tuple[T, ...]
