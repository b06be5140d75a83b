"""
Default-value capability.

A field type is default-capable when calling its origin with no arguments
produces a canonical value, e.g. ``int()`` -> ``0`` or ``list()`` -> ``[]``.
"""

import inspect
from typing import Dict, Mapping, Optional

from .schema import TypeReference

# Builtin and stdlib types known to be constructible with no arguments.
# Typing aliases map to the concrete callable producing their default.
KNOWN_DEFAULTS: Dict[str, str] = {
    "int": "int()",
    "float": "float()",
    "complex": "complex()",
    "bool": "bool()",
    "str": "str()",
    "bytes": "bytes()",
    "bytearray": "bytearray()",
    "list": "list()",
    "dict": "dict()",
    "set": "set()",
    "frozenset": "frozenset()",
    "tuple": "tuple()",
    "List": "list()",
    "Dict": "dict()",
    "Set": "set()",
    "FrozenSet": "frozenset()",
    "Tuple": "tuple()",
    "Sequence": "list()",
    "MutableSequence": "list()",
    "Mapping": "dict()",
    "MutableMapping": "dict()",
    "Iterable": "list()",
    "Collection": "list()",
    "AbstractSet": "frozenset()",
    "MutableSet": "set()",
}

# Stdlib classes whose default is produced by calling the origin itself
KNOWN_CONSTRUCTIBLE: Dict[str, str] = {
    "deque": "from collections import deque",
    "OrderedDict": "from collections import OrderedDict",
    "defaultdict": "from collections import defaultdict",
    "Counter": "from collections import Counter",
    "Decimal": "from decimal import Decimal",
    "Fraction": "from fractions import Fraction",
}

# Never default-capable, regardless of resolution
NEVER_DEFAULT = {"Any", "Callable", "Union", "Literal", "TypeVar", "object", "type"}


def _bare(origin: str) -> str:
    return origin.rsplit(".", 1)[-1]


def _runtime_is_default_capable(runtime: object) -> bool:
    """True if ``runtime`` is a class callable with no arguments."""
    if not inspect.isclass(runtime):
        return False
    try:
        signature = inspect.signature(runtime)
    except (TypeError, ValueError):
        return False
    try:
        signature.bind()
    except TypeError:
        return False
    return True


def default_expression(
    type_ref: TypeReference, extra_defaults: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """
    Return source text producing the default value of a type.

    Args:
        type_ref: Field type
        extra_defaults: Additional name -> expression entries from configuration

    Returns:
        Expression string, or None if no default can be proven
    """
    origin = type_ref.origin
    bare = _bare(origin)

    if extra_defaults:
        for key in (type_ref.expression, origin, bare):
            if key in extra_defaults:
                return extra_defaults[key]

    if bare in NEVER_DEFAULT:
        return None

    if bare in KNOWN_DEFAULTS:
        return KNOWN_DEFAULTS[bare]

    if bare in KNOWN_CONSTRUCTIBLE:
        return f"{origin}()"

    if type_ref.runtime is not None and _runtime_is_default_capable(type_ref.runtime):
        return f"{origin}()"

    return None


def required_import(type_ref: TypeReference, expression: str) -> Optional[str]:
    """Import statement needed to evaluate a default expression, if any."""
    if not expression.startswith(type_ref.origin + "("):
        return None
    if "." in type_ref.origin:
        if type_ref.runtime is not None:
            return None
        return "import " + type_ref.origin.split(".", 1)[0]
    return KNOWN_CONSTRUCTIBLE.get(type_ref.origin)
