"""
Front end for Python source text.

Parses class definitions with ``ast`` without importing or executing them.
"""

import ast
from typing import List, Optional

from ...logging_config import get_logger
from ..core.errors import DeclarationError
from ..core.schema import DeclaredField, TypeDeclaration, TypeReference

logger = get_logger(__name__)


def _is_docstring(node: ast.stmt) -> bool:
    return (
        isinstance(node, ast.Expr)
        and isinstance(node.value, ast.Constant)
        and isinstance(node.value.value, str)
    )


def _annotation_text(annotation: ast.expr) -> str:
    # String annotations are forward references; use the quoted text
    if isinstance(annotation, ast.Constant) and isinstance(annotation.value, str):
        return annotation.value.strip()
    return ast.unparse(annotation)


def _field_from_statement(node: ast.stmt) -> Optional[DeclaredField]:
    """Map one class-body statement to a field, or None if it declares none."""
    if isinstance(node, ast.AnnAssign):
        type_ref = TypeReference(expression=_annotation_text(node.annotation))
        if isinstance(node.target, ast.Name):
            return DeclaredField(name=node.target.id, type=type_ref)
        # e.g. ``self.x: int`` or ``items[0]: int``; no usable field name
        return DeclaredField(name=None, type=type_ref)

    # A bare type expression in the body is a positional field
    if isinstance(node, ast.Expr) and isinstance(
        node.value, (ast.Name, ast.Attribute, ast.Subscript)
    ):
        return DeclaredField(
            name=None, type=TypeReference(expression=ast.unparse(node.value))
        )

    return None


def declaration_from_classdef(
    node: ast.ClassDef, module: Optional[str] = None
) -> TypeDeclaration:
    """Build a declaration from a parsed class definition."""
    fields = []
    for statement in node.body:
        if _is_docstring(statement):
            continue
        declared = _field_from_statement(statement)
        if declared is not None:
            fields.append(declared)

    return TypeDeclaration(
        name=node.name,
        fields=tuple(fields),
        visibility="private" if node.name.startswith("_") else "public",
        module=module,
        docstring=ast.get_docstring(node),
    )


def declarations_from_source(
    source: str, name: Optional[str] = None, module: Optional[str] = None
) -> List[TypeDeclaration]:
    """
    Parse every top-level class in a Python module.

    Args:
        source: Python source text
        name: Only return the class with this name
        module: Module name recorded on each declaration

    Returns:
        Declarations in source order

    Raises:
        DeclarationError: On syntax errors, or if ``name`` is not found
    """
    try:
        tree = ast.parse(source)
    except SyntaxError as e:
        raise DeclarationError(f"Invalid Python source (line {e.lineno}): {e.msg}") from e

    declarations = [
        declaration_from_classdef(node, module)
        for node in tree.body
        if isinstance(node, ast.ClassDef)
    ]

    if name is not None:
        declarations = [d for d in declarations if d.name == name]
        if not declarations:
            raise DeclarationError(f"Class '{name}' not found in source")

    logger.debug("Parsed %d class declaration(s) from source", len(declarations))
    return declarations


def from_source(source: str, name: str) -> TypeDeclaration:
    """Parse a single named class from Python source."""
    return declarations_from_source(source, name)[0]
