"""
Front end for JSON declarations.

Accepts either a single object or a list of objects of the form::

    {"name": "Point", "fields": [{"name": "x", "type": "int"}, {"name": "y", "type": "str"}]}

``fields`` may also be an object mapping field name to type. A field object
without a ``name`` is a positional field.
"""

import json
import keyword
from typing import Any, Dict, List

from ...logging_config import get_logger
from ..core.errors import DeclarationError
from ..core.schema import DeclaredField, TypeDeclaration, TypeReference

logger = get_logger(__name__)


def _field_from_item(type_name: str, item: Any) -> DeclaredField:
    if isinstance(item, str):
        # Bare type string inside a list: positional field
        return DeclaredField(name=None, type=TypeReference(expression=item))

    if not isinstance(item, dict):
        raise DeclarationError(f"Field entries of '{type_name}' must be objects")

    field_type = item.get("type")
    if not isinstance(field_type, str) or not field_type.strip():
        raise DeclarationError(f"Field of '{type_name}' is missing a 'type' string")

    field_name = item.get("name")
    if field_name is not None and not isinstance(field_name, str):
        raise DeclarationError(f"Field name in '{type_name}' must be a string")

    return DeclaredField(name=field_name, type=TypeReference(expression=field_type.strip()))


def from_mapping(data: Dict[str, Any]) -> TypeDeclaration:
    """
    Build a declaration from a decoded JSON object.

    Args:
        data: Declaration object

    Returns:
        TypeDeclaration

    Raises:
        DeclarationError: If the object does not have the expected shape
    """
    if not isinstance(data, dict):
        raise DeclarationError("Declaration must be a JSON object")

    type_name = data.get("name")
    if not isinstance(type_name, str) or not type_name:
        raise DeclarationError("Declaration is missing a 'name' string")
    if not type_name.isidentifier() or keyword.iskeyword(type_name):
        raise DeclarationError(f"Declaration name '{type_name}' is not a valid identifier")

    raw_fields = data.get("fields", [])
    if isinstance(raw_fields, dict):
        fields = [
            DeclaredField(name=key, type=TypeReference(expression=str(value)))
            for key, value in raw_fields.items()
        ]
    elif isinstance(raw_fields, list):
        fields = [_field_from_item(type_name, item) for item in raw_fields]
    else:
        raise DeclarationError(f"'fields' of '{type_name}' must be a list or object")

    return TypeDeclaration(
        name=type_name,
        fields=tuple(fields),
        visibility=data.get("visibility", "public"),
        module=data.get("module"),
        docstring=data.get("description"),
    )


def declarations_from_json(text: str) -> List[TypeDeclaration]:
    """Parse one declaration or a list of declarations from JSON text."""
    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise DeclarationError(f"Invalid JSON declaration: {e}") from e

    items = data if isinstance(data, list) else [data]
    declarations = [from_mapping(item) for item in items]
    logger.debug("Parsed %d declaration(s) from JSON", len(declarations))
    return declarations
