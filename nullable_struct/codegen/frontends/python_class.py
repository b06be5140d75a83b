"""
Front end for live Python classes.

Reads a dataclass, or any class with annotations, into a TypeDeclaration.
"""

import dataclasses
import inspect
import types
import typing
from typing import Any, Dict, Tuple

from ...logging_config import get_logger
from ..core.errors import DeclarationError
from ..core.schema import DeclaredField, TypeDeclaration, TypeReference

logger = get_logger(__name__)

_NONE_TYPE = type(None)


def _type_name(obj: Any) -> str:
    if obj is _NONE_TYPE or obj is None:
        return "None"
    if inspect.isclass(obj):
        # Classes defined inside functions are only reachable by plain name
        if "<locals>" in obj.__qualname__:
            return obj.__name__
        return obj.__qualname__
    # typing special forms: typing.Any, typing.ClassVar, ...
    name = getattr(obj, "_name", None) or getattr(obj, "__name__", None)
    if name:
        return name
    return repr(obj).replace("typing.", "")


def format_annotation(annotation: Any) -> Tuple[str, str, Any]:
    """
    Render an annotation as source text.

    Args:
        annotation: Resolved annotation object, or a string

    Returns:
        Tuple of (expression, origin name, runtime origin object)
    """
    if isinstance(annotation, str):
        return annotation, "", None

    if isinstance(annotation, list):
        inner = ", ".join(format_annotation(arg)[0] for arg in annotation)
        return f"[{inner}]", "", None

    if isinstance(annotation, dataclasses.InitVar):
        inner, _, _ = format_annotation(annotation.type)
        return f"InitVar[{inner}]", "InitVar", None

    origin = typing.get_origin(annotation)
    args = typing.get_args(annotation)

    if origin is typing.Union or origin is types.UnionType:
        parts = [format_annotation(arg)[0] for arg in args]
        return " | ".join(parts), "Union", None

    if origin is not None:
        origin_name = _type_name(origin)
        if origin is typing.Annotated:
            return format_annotation(args[0])
        if args:
            inner = ", ".join(
                "..." if arg is Ellipsis else format_annotation(arg)[0] for arg in args
            )
            expression = f"{origin_name}[{inner}]"
        else:
            expression = origin_name
        return expression, origin_name, origin

    if inspect.isclass(annotation):
        name = _type_name(annotation)
        return name, name, annotation

    name = _type_name(annotation)
    return name, name, None


def _resolve_annotations(cls: type) -> Dict[str, Any]:
    """Resolve annotations in definition order, falling back to raw strings."""
    try:
        return typing.get_type_hints(cls, include_extras=True)
    except (NameError, TypeError) as e:
        logger.debug("Could not resolve annotations of %s: %s", cls.__name__, e)

    annotations: Dict[str, Any] = {}
    for klass in reversed(cls.__mro__):
        annotations.update(getattr(klass, "__annotations__", {}) or {})
    return annotations


def from_class(cls: type) -> TypeDeclaration:
    """
    Build a declaration from a class.

    Args:
        cls: A dataclass or annotated class

    Returns:
        TypeDeclaration with fields in annotation order

    Raises:
        DeclarationError: If ``cls`` is not a class
    """
    if not inspect.isclass(cls):
        raise DeclarationError(f"Expected a class, got {type(cls).__name__}")

    fields = []
    for name, annotation in _resolve_annotations(cls).items():
        expression, origin, runtime = format_annotation(annotation)
        fields.append(
            DeclaredField(
                name=name,
                type=TypeReference(expression=expression, origin=origin, runtime=runtime),
            )
        )

    logger.debug("Read %d annotated field(s) from class %s", len(fields), cls.__name__)

    return TypeDeclaration(
        name=cls.__name__,
        fields=tuple(fields),
        visibility="private" if cls.__name__.startswith("_") else "public",
        module=cls.__module__,
        docstring=inspect.getdoc(cls) if cls.__doc__ else None,
    )
