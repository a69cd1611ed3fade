from __future__ import annotations
from typing import Any, TypeVar, Generic, Type

__all__ = ['NA', 'is_na', 'na_any']

T = TypeVar('T')


class NA(Generic[T]):
    """
    Class representing NA (Not Available) values.

    An NA is the absent result of a lookup, e.g. ``get`` outside the bounds of an array.
    Instances are cached per type tag, so ``NA(int) is NA(int)``.
    """
    __slots__ = ('type',)

    _type_cache: dict[Any, NA] = {}

    # noinspection PyShadowingBuiltins
    def __new__(cls, type: Type[T] | T | None = None) -> NA[T]:
        try:
            # Use the cached instance if it exists
            return cls._type_cache[type]
        except KeyError:
            na = super().__new__(cls)
            cls._type_cache[type] = na
            return na
        except TypeError:
            # Unhashable type tag, nothing to cache
            return super().__new__(cls)

    # noinspection PyShadowingBuiltins
    def __init__(self, type: Type[T] | T | None = None) -> None:
        """
        Initialize a new NA value with an optional type parameter.
        The default type is None, meaning "untyped".
        """
        self.type = type

    def __repr__(self) -> str:
        if self.type is None:
            return "NA"
        return f"NA[{getattr(self.type, '__name__', repr(self.type))}]"

    def __str__(self) -> str:
        return ""

    def __hash__(self) -> int:
        return hash((NA, self.type))

    def __bool__(self) -> bool:
        return False

    #
    # All comparisons should be false
    #

    def __eq__(self, _: Any) -> bool:
        return False

    def __ne__(self, _: Any) -> bool:
        return True

    def __gt__(self, _: Any) -> bool:
        return False

    def __lt__(self, _: Any) -> bool:
        return False

    def __le__(self, _: Any) -> bool:
        return False

    def __ge__(self, _: Any) -> bool:
        return False

    #
    # In contexts
    #

    def __contains__(self, _: Any) -> bool:
        return False

    def __iter__(self):
        return iter(())

    def __len__(self) -> int:
        return 0


def is_na(value: Any) -> bool:
    """
    Check if a value is absent: ``None`` or an NA instance.

    :param value: The value to check
    :return: True if the value is absent
    """
    return value is None or isinstance(value, NA)


na_any = NA(None)
