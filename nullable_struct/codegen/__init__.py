"""
Nullable Code Generation Module

Generates nullable companion types from structural type declarations.
"""

from .core.config import ConfigError, ConfigManager, NullableConfig, load_config
from .core.errors import (
    DeclarationError,
    EmptyStructError,
    MissingDefaultCapability,
    NameCollisionError,
    NullableError,
    UnsupportedFieldKind,
)
from .core.extractor import extract_struct
from .core.generator import CodeEmitter, GenerationResult
from .core.naming import synthesize_names
from .core.schema import (
    DeclaredField,
    FieldSpec,
    GeneratedArtifact,
    StructSpec,
    SynthesizedNames,
    TypeDeclaration,
    TypeReference,
)
from .frontends import (
    declarations_from_json,
    declarations_from_source,
    from_class,
    from_mapping,
    from_source,
)
from .languages.python import PythonEmitter
from .orchestrator import Phase, generate, generate_code, generate_many
from .registry import FrontendRegistry, RegistryError, get_frontend, list_frontends

__all__ = [
    # Pipeline
    "generate",
    "generate_code",
    "generate_many",
    "Phase",
    "extract_struct",
    "synthesize_names",
    "PythonEmitter",
    "CodeEmitter",
    "GenerationResult",
    # Data model
    "DeclaredField",
    "FieldSpec",
    "GeneratedArtifact",
    "StructSpec",
    "SynthesizedNames",
    "TypeDeclaration",
    "TypeReference",
    # Errors
    "NullableError",
    "EmptyStructError",
    "UnsupportedFieldKind",
    "NameCollisionError",
    "MissingDefaultCapability",
    "DeclarationError",
    # Front ends
    "from_class",
    "from_source",
    "from_mapping",
    "declarations_from_source",
    "declarations_from_json",
    "FrontendRegistry",
    "RegistryError",
    "get_frontend",
    "list_frontends",
    # Configuration
    "NullableConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
]
