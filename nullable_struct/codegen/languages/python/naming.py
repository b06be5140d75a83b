"""
Python-specific naming utilities.

Handles builtin shadowing and local names inside generated method bodies.
"""

from typing import Iterable

# Python built-in types and functions
PYTHON_BUILTIN_TYPES = {
    # Types
    "int",
    "float",
    "str",
    "bool",
    "list",
    "dict",
    "set",
    "tuple",
    "bytes",
    "bytearray",
    "frozenset",
    "range",
    "object",
    "type",
    "complex",
    "memoryview",
    # Special attributes
    "property",
    "staticmethod",
    "classmethod",
    "super",
    # Common functions
    "len",
    "print",
    "input",
    "open",
    "all",
    "any",
    "abs",
    "min",
    "max",
    "sum",
    "sorted",
    "reversed",
    "enumerate",
    "zip",
    "map",
    "filter",
    "isinstance",
    "issubclass",
    "hasattr",
    "getattr",
    "setattr",
    "delattr",
    "dir",
    "vars",
    "id",
    "hash",
    "repr",
    "format",
    "iter",
    "next",
    "slice",
    "callable",
}


def unique_local(base: str, taken: Iterable[str]) -> str:
    """
    Pick a local variable name that does not shadow any of ``taken``.

    Args:
        base: Preferred name
        taken: Names already bound in the same scope

    Returns:
        ``base``, or ``base`` followed by underscores until it is free
    """
    taken = set(taken)
    name = base
    while name in taken:
        name = f"{name}_"
    return name


def shadows_builtin(name: str) -> bool:
    """True if a method named ``name`` would shadow a builtin in the class body."""
    return name in PYTHON_BUILTIN_TYPES
