"""
Declaration front ends.

Each front end turns host-language syntax into a TypeDeclaration for the core.
"""

from .json_declaration import declarations_from_json, from_mapping
from .python_class import format_annotation, from_class
from .python_source import declarations_from_source, from_source

__all__ = [
    "declarations_from_json",
    "declarations_from_source",
    "format_annotation",
    "from_class",
    "from_mapping",
    "from_source",
]
