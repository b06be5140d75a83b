"""
Base emitter interface for nullable code generation targets.

Defines the contract that every target-language emitter implements.
"""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Optional

from .config import DEFAULT_CONFIG, NullableConfig
from .schema import GeneratedArtifact, StructSpec, SynthesizedNames
from .templates import TemplateEngine, create_template_engine


class CodeEmitter(ABC):
    """Abstract base class for all code emitters."""

    def __init__(self, config: Optional[NullableConfig] = None):
        """Initialize emitter with optional configuration."""
        self.config = config or DEFAULT_CONFIG
        self._template_engine = None
        self._setup_templates()

    def _setup_templates(self):
        """Setup template engine for this emitter."""
        self._template_engine = create_template_engine(self.get_template_directory())

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.py')."""
        pass

    def get_template_directory(self) -> Optional[Path]:
        """
        Return the directory containing templates for this emitter.

        Subclasses should override this to provide their template directory.
        Return None to use in-memory templates only.

        Returns:
            Path to template directory or None
        """
        return None

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this emitter."""
        if self._template_engine is None:
            self._setup_templates()
        return self._template_engine

    @abstractmethod
    def emit(self, struct: StructSpec, names: SynthesizedNames) -> GeneratedArtifact:
        """
        Emit the wrapper declaration and all method definitions.

        Args:
            struct: Validated struct
            names: Identifiers synthesized for the struct

        Returns:
            The generated artifact
        """
        pass

    def validate_struct(self, struct: StructSpec) -> List[str]:
        """
        Collect non-fatal warnings about a struct.

        Language emitters should override this to add language-specific checks.

        Args:
            struct: Struct to inspect

        Returns:
            List of warning messages (empty if no issues)
        """
        warnings = []
        if len(struct.fields) >= 15:
            warnings.append(
                f"Type '{struct.original_name}' has {len(struct.fields)} fields; "
                f"the generated constructor takes them all positionally"
            )
        return warnings

    def format_code(self, code: str) -> str:
        """
        Apply language-specific formatting to generated code.

        Args:
            code: Raw generated code

        Returns:
            Formatted code
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    # Template helper methods

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        """
        Render a template with context.

        Args:
            template_name: Template file name
            context: Template variables

        Returns:
            Rendered content
        """
        return self.template_engine.render_template(template_name, context)


class GenerationResult:
    """Container for generation results and metadata."""

    def __init__(
        self,
        code: str,
        artifact: Optional[GeneratedArtifact] = None,
        warnings: List[str] = None,
        metadata: Dict[str, Any] = None,
    ):
        """
        Initialize generation result.

        Args:
            code: Generated code
            artifact: The artifact the code was rendered from
            warnings: Any warnings from generation
            metadata: Additional metadata about generation
        """
        self.code = code
        self.artifact = artifact
        self.warnings = warnings or []
        self.metadata = metadata or {}
        self.success = True
        self.error_message: Optional[str] = None
        self.exception: Optional[Exception] = None

    @classmethod
    def error(
        cls, message: str, exception: Exception = None, metadata: Dict[str, Any] = None
    ) -> "GenerationResult":
        """Create a failed generation result."""
        result = cls(code="", metadata=metadata)
        result.success = False
        result.error_message = message
        result.exception = exception
        return result
