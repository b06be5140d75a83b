"""
nullable_struct

Generates nullable companion classes: for each declared class, a sibling
whose fields may individually be present or absent.
"""

__version__ = "0.1.0"

from .codegen import (
    ConfigError,
    DeclarationError,
    EmptyStructError,
    GenerationResult,
    GeneratedArtifact,
    MissingDefaultCapability,
    NameCollisionError,
    NullableConfig,
    NullableError,
    TypeDeclaration,
    UnsupportedFieldKind,
    generate,
    generate_code,
    generate_many,
    load_config,
)
from .derive import build_nullable, load_artifact, nullable
from .option import ABSENT, Absent, Option, Present, is_absent, is_present, unwrap_or_else

__all__ = [
    "__version__",
    # Runtime
    "nullable",
    "build_nullable",
    "load_artifact",
    "ABSENT",
    "Absent",
    "Option",
    "Present",
    "is_absent",
    "is_present",
    "unwrap_or_else",
    # Generation
    "generate",
    "generate_code",
    "generate_many",
    "GenerationResult",
    "GeneratedArtifact",
    "TypeDeclaration",
    "NullableConfig",
    "load_config",
    # Errors
    "NullableError",
    "EmptyStructError",
    "UnsupportedFieldKind",
    "NameCollisionError",
    "MissingDefaultCapability",
    "DeclarationError",
    "ConfigError",
]
