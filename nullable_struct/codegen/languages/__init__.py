"""
Language-specific code emitters.

This module contains emitters for different target languages.
"""

from .python import PythonEmitter, create_python_emitter

__all__ = ["PythonEmitter", "create_python_emitter"]
