"""
Python code emitter module.

Generates nullable companion classes as Python source.
"""

from .generator import PythonEmitter, create_python_emitter
from .naming import PYTHON_BUILTIN_TYPES, shadows_builtin, unique_local

__all__ = [
    "PythonEmitter",
    "create_python_emitter",
    "PYTHON_BUILTIN_TYPES",
    "shadows_builtin",
    "unique_local",
]
