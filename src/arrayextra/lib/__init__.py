"""
Builtin library of arrayextra
"""
from . import log, array, slicing, combine, traverse, reorder

__all__ = ['log', 'array', 'slicing', 'combine', 'traverse', 'reorder']
