"""
Python code emitter implementation.

Generates a nullable companion class, rendered from templates, where every
field is stored as ``Present(value)`` or ``ABSENT``.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Tuple

from .... import __version__
from ....logging_config import get_logger
from ...core.config import NullableConfig
from ...core.defaults import default_expression, required_import
from ...core.errors import MissingDefaultCapability
from ...core.generator import CodeEmitter
from ...core.schema import (
    GeneratedArtifact,
    MethodDefinition,
    StructSpec,
    SynthesizedNames,
    WrapperDeclaration,
    WrapperField,
)
from .naming import shadows_builtin, unique_local

logger = get_logger(__name__)


class PythonEmitter(CodeEmitter):
    """Code emitter for nullable Python classes."""

    @property
    def language_name(self) -> str:
        """Return the language name."""
        return "python"

    @property
    def file_extension(self) -> str:
        """Return Python file extension."""
        return ".py"

    def get_template_directory(self) -> Path:
        """Return the Python templates directory."""
        return Path(__file__).parent / "templates"

    def emit(self, struct: StructSpec, names: SynthesizedNames) -> GeneratedArtifact:
        """Emit the nullable class for one struct."""
        field_data = self._generate_field_data(struct, names)

        declaration = WrapperDeclaration(
            name=names.wrapper_type_name,
            fields=tuple(
                WrapperField(
                    name=data["name"],
                    storage_name=data["storage_name"],
                    type_expression=data["type_expression"],
                    container_expression=data["container_expression"],
                )
                for data in field_data
            ),
        )

        methods = self._generate_methods(struct, names, field_data)
        class_source = self.render_template(
            "class.py.j2",
            {
                "class_name": names.wrapper_type_name,
                "docstring": self._class_docstring(struct),
                "use_slots": self.config.use_slots,
                "fields": field_data,
                "methods": methods,
            },
        ).rstrip("\n")

        imports = self._get_imports(field_data)
        exports = [] if struct.visibility == "private" else [names.wrapper_type_name]
        source = self.format_code(self.render_module([class_source], imports, exports))

        logger.debug(
            "Emitted %s with %d method(s)", names.wrapper_type_name, len(methods)
        )

        return GeneratedArtifact(
            struct=struct,
            names=names,
            declaration=declaration,
            methods=methods,
            source=source,
            declaration_source=class_source + "\n",
            imports=tuple(imports),
        )

    def render_module(
        self,
        class_sources: Sequence[str],
        imports: Sequence[str] = (),
        exports: Sequence[str] = (),
    ) -> str:
        """Render a complete module from class definitions."""
        return self.render_template(
            "module.py.j2",
            {
                "add_comments": self.config.add_comments,
                "version": __version__,
                "imports": sorted(set(imports)),
                "exports": list(exports),
                "classes": list(class_sources),
            },
        )

    def combine(self, artifacts: Sequence[GeneratedArtifact]) -> str:
        """
        Merge several artifacts into a single module.

        Args:
            artifacts: Artifacts in output order

        Returns:
            Formatted module source
        """
        imports: List[str] = []
        exports: List[str] = []
        for artifact in artifacts:
            imports.extend(artifact.imports)
            if artifact.struct.visibility != "private":
                exports.append(artifact.wrapper_name)
        return self.format_code(
            self.render_module(
                [a.declaration_source.rstrip("\n") for a in artifacts], imports, exports
            )
        )

    def _generate_field_data(
        self, struct: StructSpec, names: SynthesizedNames
    ) -> List[Dict[str, Any]]:
        """Generate per-field template data, resolving defaults."""
        fields = []
        for spec in struct.fields:
            expression = default_expression(spec.type, self.config.default_types)
            if expression is None:
                raise MissingDefaultCapability(
                    struct.original_name, spec.name, spec.type.expression
                )

            field_names = names.for_field(spec.name)
            fields.append(
                {
                    "name": spec.name,
                    "storage_name": field_names.storage_name,
                    "getter_name": field_names.getter_name,
                    "optional_getter_name": field_names.optional_getter_name,
                    "setter_name": field_names.setter_name,
                    "type_expression": spec.type.expression,
                    "container_expression": f"Option[{spec.type.expression}]",
                    "default_expression": expression,
                    "type": spec.type,
                }
            )
        return fields

    def _generate_methods(
        self,
        struct: StructSpec,
        names: SynthesizedNames,
        field_data: List[Dict[str, Any]],
    ) -> Tuple[MethodDefinition, ...]:
        """Render every method of the class, in declaration order."""
        field_names = struct.field_names()
        receiver = unique_local("cls", field_names)
        local = unique_local("instance", set(field_names) | {receiver})

        base = {
            "class_name": names.wrapper_type_name,
            "fields": field_data,
            "add_comments": self.config.add_comments,
        }

        methods = [
            self._method("__init__", "initializer", "initializer.py.j2", base),
            self._method(
                names.constructor_name,
                "constructor",
                "constructor.py.j2",
                dict(base, receiver=receiver, local=local),
            ),
            self._method(
                names.default_constructor_name,
                "default_constructor",
                "default_constructor.py.j2",
                base,
            ),
            self._method(
                names.default_initializer_name,
                "default_initializer",
                "default_initializer.py.j2",
                base,
            ),
        ]

        for data in field_data:
            context = dict(base, field=data)
            methods.extend(
                [
                    self._method(
                        data["getter_name"],
                        "getter",
                        "getter.py.j2",
                        context,
                        data["name"],
                    ),
                    self._method(
                        data["optional_getter_name"],
                        "optional_getter",
                        "optional_getter.py.j2",
                        context,
                        data["name"],
                    ),
                    self._method(
                        data["setter_name"],
                        "setter",
                        "setter.py.j2",
                        context,
                        data["name"],
                    ),
                ]
            )

        methods.append(self._method("__eq__", "support", "support.py.j2", base))
        return tuple(methods)

    def _method(
        self,
        name: str,
        kind: str,
        template_name: str,
        context: Dict[str, Any],
        field: Optional[str] = None,
    ) -> MethodDefinition:
        source = self.render_template(template_name, dict(context, name=name))
        return MethodDefinition(
            name=name, kind=kind, source=source.rstrip("\n"), field=field
        )

    def _class_docstring(self, struct: StructSpec) -> str:
        summary = f"Nullable variant of {struct.original_name}."
        if self.config.add_comments and struct.docstring:
            first_line = struct.docstring.strip().splitlines()[0]
            return f"{summary}\n\n    {first_line}\n    "
        return summary

    def _get_imports(self, field_data: List[Dict[str, Any]]) -> List[str]:
        """Get imports needed to evaluate default expressions."""
        imports = set()
        for data in field_data:
            statement = required_import(data["type"], data["default_expression"])
            if statement:
                imports.add(statement)
        return sorted(imports)

    def validate_struct(self, struct: StructSpec) -> List[str]:
        """Validate a struct for Python generation."""
        warnings = super().validate_struct(struct)

        for name in struct.field_names():
            if shadows_builtin(name):
                warnings.append(
                    f"Field {struct.original_name}.{name} shadows the builtin "
                    f"'{name}' inside the generated class body"
                )

        return warnings


def create_python_emitter(config: Optional[NullableConfig] = None) -> PythonEmitter:
    """Create a Python emitter with the given configuration."""
    return PythonEmitter(config)
