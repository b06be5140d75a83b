"""
Core code generation components.

Provides the pipeline data model, the extraction and naming stages,
and base classes used by target-language emitters.
"""

from .config import ConfigError, ConfigManager, NullableConfig, load_config
from .defaults import default_expression
from .errors import (
    DeclarationError,
    EmptyStructError,
    MissingDefaultCapability,
    NameCollisionError,
    NullableError,
    UnsupportedFieldKind,
)
from .extractor import extract_struct
from .generator import CodeEmitter, GenerationResult
from .naming import synthesize_names
from .schema import (
    DeclaredField,
    FieldNames,
    FieldSpec,
    GeneratedArtifact,
    MethodDefinition,
    StructSpec,
    SynthesizedNames,
    TypeDeclaration,
    TypeReference,
    WrapperDeclaration,
    WrapperField,
)
from .templates import TemplateEngine, TemplateError, create_template_engine

__all__ = [
    # Data model
    "DeclaredField",
    "FieldNames",
    "FieldSpec",
    "GeneratedArtifact",
    "MethodDefinition",
    "StructSpec",
    "SynthesizedNames",
    "TypeDeclaration",
    "TypeReference",
    "WrapperDeclaration",
    "WrapperField",
    # Errors
    "NullableError",
    "EmptyStructError",
    "UnsupportedFieldKind",
    "NameCollisionError",
    "MissingDefaultCapability",
    "DeclarationError",
    # Pipeline stages
    "extract_struct",
    "synthesize_names",
    "default_expression",
    # Base emitter interface
    "CodeEmitter",
    "GenerationResult",
    # Configuration system
    "NullableConfig",
    "ConfigManager",
    "ConfigError",
    "load_config",
    # Template system
    "TemplateEngine",
    "TemplateError",
    "create_template_engine",
]
