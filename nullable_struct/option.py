"""
Two-state optional container used by generated nullable classes.

A value is either ``Present(value)`` or the ``ABSENT`` singleton.
"""

from dataclasses import dataclass
from typing import Any, Callable, Generic, TypeVar, Union

T = TypeVar("T")


@dataclass(frozen=True)
class Present(Generic[T]):
    """A field state holding a value."""

    value: T

    def __repr__(self) -> str:
        return f"Present({self.value!r})"


class Absent:
    """A field state holding nothing. Use the ``ABSENT`` instance."""

    _instance = None
    __slots__ = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "ABSENT"

    def __reduce__(self):
        return (Absent, ())


ABSENT = Absent()

Option = Union[Present[T], Absent]


def is_present(option: Any) -> bool:
    """Return True if ``option`` holds a value."""
    return isinstance(option, Present)


def is_absent(option: Any) -> bool:
    """Return True if ``option`` is the absent state."""
    return option is ABSENT


def unwrap_or_else(option: Any, factory: Callable[[], T]) -> T:
    """
    Return the contained value, or call ``factory`` when absent.

    Args:
        option: A ``Present`` or ``ABSENT``
        factory: Zero-argument callable producing the fallback value

    Returns:
        The contained value or the factory result
    """
    if isinstance(option, Present):
        return option.value
    return factory()


__all__ = [
    "ABSENT",
    "Absent",
    "Option",
    "Present",
    "is_absent",
    "is_present",
    "unwrap_or_else",
]
