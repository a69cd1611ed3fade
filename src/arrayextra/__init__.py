"""
Pure operations over immutable arrays (tuples)

Every function returns a new tuple and accepts any sequence as input. Index arguments that
are negative or out of range never raise, each function documents what it returns instead.

    >>> import arrayextra as ax
    >>> ax.insert_at(1, 'b', ['a', 'c'])
    ('a', 'b', 'c')
"""
from .types import Array, NA, is_na
from .lib import log
from .lib.array import (append, empty, filter, foldl, foldr, from_items, from_list, get, indexed_map,
                        initialize, is_empty, length, map, member, push, repeat, set, slice,
                        to_indexed_list, to_list)
from .lib.slicing import (insert_at, pop, remove_at, resizel_indexed, resizel_repeat, resizer_indexed,
                          resizer_repeat, slice_from, slice_until, split_at, update)
from .lib.combine import apply, interweave, map2, map3, map4, map5, unzip, zip, zip3
from .lib.traverse import all, any, filter_map, indexed_map_to_list, map_to_list, remove_when
from .lib.reorder import intersperse, reverse

__version__ = "0.1.0"

__all__ = [
    # Types
    'Array', 'NA', 'is_na',

    # Modules
    'log',

    # Construction and primitives
    'empty', 'initialize', 'repeat', 'from_items', 'from_list', 'to_list', 'to_indexed_list',
    'length', 'is_empty', 'get', 'set', 'push', 'append', 'slice',
    'map', 'indexed_map', 'filter', 'foldl', 'foldr', 'member',

    # Index and slice
    'update', 'slice_from', 'slice_until', 'split_at', 'pop', 'remove_at', 'insert_at',
    'resizel_repeat', 'resizer_repeat', 'resizel_indexed', 'resizer_indexed',

    # Combination
    'map2', 'map3', 'map4', 'map5', 'apply', 'zip', 'zip3', 'unzip', 'interweave',

    # Traversal
    'all', 'any', 'remove_when', 'filter_map', 'map_to_list', 'indexed_map_to_list',

    # Reordering
    'reverse', 'intersperse',
]
