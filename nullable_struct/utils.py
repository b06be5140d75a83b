"""Utility functions for loading type declarations from files.

This module picks a front end from the file suffix and reads declarations
with proper error handling.
"""

from pathlib import Path

from .codegen.core.errors import DeclarationError
from .codegen.core.schema import TypeDeclaration
from .codegen.registry import FrontendRegistry, RegistryError, create_default_registry
from .logging_config import get_logger

logger = get_logger(__name__)


class DeclarationLoaderError(Exception):
    """Custom exception for declaration loading errors."""

    pass


def load_declarations(
    file_path: str | Path,
    name: str | None = None,
    frontend: str | None = None,
    registry: FrontendRegistry | None = None,
) -> tuple[str, list[TypeDeclaration]]:
    """Load type declarations from a file.

    Args:
        file_path: Path to a .py or .json declaration file.
        name: Only return the declaration with this type name.
        frontend: Front end to use instead of guessing from the suffix.
        registry: Front-end registry (defaults to the built-in front ends).

    Returns:
        Tuple of (source description, declarations in file order).

    Raises:
        FileNotFoundError: If file doesn't exist.
        DeclarationLoaderError: If the file cannot be read or parsed.
    """
    file_path = Path(file_path)
    registry = registry or create_default_registry()
    logger.debug(f"Attempting to load declarations from file: {file_path}")

    if not file_path.exists():
        logger.error(f"File not found: {file_path}")
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        frontend_name = registry.resolve(frontend) if frontend else registry.for_path(file_path)
    except RegistryError as e:
        raise DeclarationLoaderError(str(e)) from e

    try:
        text = file_path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        logger.error(f"Error reading file {file_path}: {e}", exc_info=True)
        raise DeclarationLoaderError(f"Error reading file {file_path}: {e}") from e

    try:
        declarations = registry.get_frontend(frontend_name)(text)
    except DeclarationError as e:
        logger.error(f"Invalid declarations in {file_path}: {e}")
        raise DeclarationLoaderError(f"Invalid declarations in {file_path}: {e}") from e

    if name is not None:
        declarations = [d for d in declarations if d.name == name]
        if not declarations:
            raise DeclarationLoaderError(f"Type '{name}' not found in {file_path}")

    if not declarations:
        logger.warning(f"No declarations found in {file_path}")

    logger.info(f"Loaded {len(declarations)} declaration(s) from {file_path}")
    return f"📄 {file_path}", declarations
