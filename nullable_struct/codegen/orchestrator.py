"""
Generation pipeline.

Runs Parse -> Synthesize-Names -> Emit for one declaration at a time. Each
call builds its own emitter and shares no state with any other call.
"""

from enum import Enum
from typing import Iterable, List, Optional

from ..logging_config import get_logger
from .core.config import DEFAULT_CONFIG, NullableConfig
from .core.errors import NullableError
from .core.extractor import extract_struct
from .core.generator import CodeEmitter, GenerationResult
from .core.naming import synthesize_names
from .core.schema import GeneratedArtifact, TypeDeclaration
from .languages.python.generator import PythonEmitter

logger = get_logger(__name__)


class Phase(Enum):
    """Pipeline phases, strictly sequential."""

    PARSE = "parse"
    SYNTHESIZE_NAMES = "synthesize_names"
    EMIT = "emit"
    DONE = "done"
    FAILED = "failed"


def _create_emitter(config: NullableConfig) -> CodeEmitter:
    return PythonEmitter(config)


def generate(
    declaration: TypeDeclaration, config: Optional[NullableConfig] = None
) -> GeneratedArtifact:
    """
    Generate the nullable companion of one declaration.

    Args:
        declaration: Parsed input declaration
        config: Generator configuration

    Returns:
        The finished artifact

    Raises:
        NullableError: The first stage failure; no partial artifact is produced
    """
    config = config or DEFAULT_CONFIG
    phase = Phase.PARSE

    try:
        logger.debug("[%s] %s", phase.value, declaration.name)
        struct = extract_struct(declaration)

        phase = Phase.SYNTHESIZE_NAMES
        logger.debug("[%s] %s", phase.value, declaration.name)
        names = synthesize_names(struct, config)

        phase = Phase.EMIT
        logger.debug("[%s] %s", phase.value, names.wrapper_type_name)
        artifact = _create_emitter(config).emit(struct, names)
    except NullableError as e:
        logger.warning(
            "Generation failed for %s during %s: %s", declaration.name, phase.value, e
        )
        raise

    logger.debug("[%s] %s", Phase.DONE.value, artifact.wrapper_name)
    return artifact


def generate_code(
    declaration: TypeDeclaration, config: Optional[NullableConfig] = None
) -> GenerationResult:
    """
    Generate code with error handling.

    Args:
        declaration: Parsed input declaration
        config: Generator configuration

    Returns:
        GenerationResult with code, warnings, and metadata
    """
    config = config or DEFAULT_CONFIG

    try:
        artifact = generate(declaration, config)
    except NullableError as e:
        return GenerationResult.error(
            f"Code generation failed: {str(e)}",
            exception=e,
            metadata={"type_name": declaration.name, "phase": Phase.FAILED.value},
        )

    emitter = _create_emitter(config)
    warnings = emitter.validate_struct(artifact.struct)

    metadata = {
        "language": emitter.language_name,
        "file_extension": emitter.file_extension,
        "type_name": declaration.name,
        "phase": Phase.DONE.value,
        **artifact.summary(),
    }

    return GenerationResult(artifact.source, artifact, warnings, metadata)


def generate_many(
    declarations: Iterable[TypeDeclaration], config: Optional[NullableConfig] = None
) -> List[GenerationResult]:
    """Generate every declaration independently; one failure does not stop the rest."""
    return [generate_code(declaration, config) for declaration in declarations]
