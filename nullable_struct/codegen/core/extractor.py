"""
Field extraction.

Turns a front end's TypeDeclaration into a validated StructSpec,
rejecting shapes the optional wrapper cannot represent.
"""

import ast
import keyword
import re
from typing import Optional, Tuple

from ...logging_config import get_logger
from .errors import EmptyStructError, NameCollisionError, UnsupportedFieldKind
from .schema import FieldSpec, StructSpec, TypeDeclaration, TypeReference

logger = get_logger(__name__)

# Markers whose runtime representation an instance slot cannot preserve
_UNREPRESENTABLE_ORIGINS = {
    "ClassVar": "class variables are not instance fields",
    "InitVar": "init-only pseudo-fields are not stored",
    "Final": "final fields cannot be reassigned by a setter",
}

# Types that already carry optionality
_OPTIONAL_ORIGINS = {"Optional", "Option", "Present", "Absent", "None", "NoneType"}

_NONE_UNION = re.compile(r"(^|\|)\s*None\s*($|\|)")


def _strip_module(origin: str) -> str:
    """'typing.ClassVar' -> 'ClassVar'."""
    return origin.rsplit(".", 1)[-1]


def _is_expression(text: str) -> bool:
    """True if ``text`` is a single-line expression that can be spliced into source."""
    # Comments and line breaks would swallow the rest of a generated signature
    if not text.strip() or any(c in text for c in "#\r\n"):
        return False
    try:
        ast.parse(text, mode="eval")
    except (SyntaxError, ValueError):
        return False
    return True


def _unsupported_reason(type_ref: TypeReference) -> Optional[str]:
    """Return why a type cannot be wrapped, or None if it can."""
    if not _is_expression(type_ref.expression):
        return f"type '{type_ref.expression}' is not a valid Python expression"

    origin = _strip_module(type_ref.origin)

    if origin in _UNREPRESENTABLE_ORIGINS:
        return _UNREPRESENTABLE_ORIGINS[origin]

    if origin in _OPTIONAL_ORIGINS:
        return f"type '{type_ref.expression}' is already optional"

    if origin == "Union" and re.search(r"\bNone\b|\bNoneType\b", type_ref.expression):
        return f"type '{type_ref.expression}' is already optional"

    if _NONE_UNION.search(type_ref.expression):
        return f"type '{type_ref.expression}' is already optional"

    return None


def _check_name(struct_name: str, name: Optional[str]) -> str:
    if not name:
        raise UnsupportedFieldKind(
            struct_name, None, "unnamed (positional) fields are not supported"
        )
    if not name.isidentifier() or keyword.iskeyword(name):
        raise UnsupportedFieldKind(
            struct_name, name, "field name is not a valid identifier"
        )
    if name.startswith("__"):
        raise UnsupportedFieldKind(
            struct_name, name, "private (double underscore) names are mangled"
        )
    return name


def extract_struct(declaration: TypeDeclaration) -> StructSpec:
    """
    Extract an ordered, validated field list from a declaration.

    Args:
        declaration: Parsed type declaration from a front end

    Returns:
        StructSpec with fields in declaration order

    Raises:
        EmptyStructError: If the declaration has no fields
        UnsupportedFieldKind: If a field is unnamed or its type cannot be wrapped
        NameCollisionError: If two fields share a name
    """
    struct_name = declaration.name
    if not declaration.fields:
        raise EmptyStructError(struct_name)

    seen = set()
    specs: Tuple[FieldSpec, ...] = ()

    for declared in declaration.fields:
        name = _check_name(struct_name, declared.name)

        reason = _unsupported_reason(declared.type)
        if reason:
            raise UnsupportedFieldKind(struct_name, name, reason)

        if name in seen:
            raise NameCollisionError(name, (f"field '{name}'", f"field '{name}'"))
        seen.add(name)

        specs += (FieldSpec(name=name, type=declared.type),)

    logger.debug(
        "Extracted %d field(s) from %s: %s",
        len(specs),
        struct_name,
        ", ".join(f"{s.name}: {s.type}" for s in specs),
    )

    return StructSpec(
        original_name=struct_name,
        fields=specs,
        visibility=declaration.visibility,
        docstring=declaration.docstring,
    )
