"""
Core data model for nullable code generation.

Front ends produce a TypeDeclaration. The pipeline turns it into a
StructSpec, derives SynthesizedNames, and emits a GeneratedArtifact.
Every value here is frozen.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Optional, Tuple


@dataclass(frozen=True)
class TypeReference:
    """A field type as seen by the generator."""

    expression: str  # Source text, e.g. "list[int]"
    origin: str = ""  # Bare callable name, e.g. "list"
    runtime: Any = field(default=None, compare=False, repr=False)

    def __post_init__(self):
        """Derive origin from the expression if not provided."""
        if not self.origin:
            object.__setattr__(self, "origin", origin_of(self.expression))

    def __str__(self) -> str:
        return self.expression


def origin_of(expression: str) -> str:
    """Strip subscripts and whitespace from a type expression."""
    return expression.split("[", 1)[0].strip()


@dataclass(frozen=True)
class DeclaredField:
    """A field exactly as a front end saw it. ``name`` is None when positional."""

    name: Optional[str]
    type: TypeReference


@dataclass(frozen=True)
class TypeDeclaration:
    """Already-parsed input declaration handed over by a front end."""

    name: str
    fields: Tuple[DeclaredField, ...] = ()
    visibility: str = "public"
    module: Optional[str] = None
    docstring: Optional[str] = None


@dataclass(frozen=True)
class FieldSpec:
    """A validated, named field."""

    name: str
    type: TypeReference


@dataclass(frozen=True)
class StructSpec:
    """A validated declaration. Field order is significant."""

    original_name: str
    fields: Tuple[FieldSpec, ...]
    visibility: str = "public"
    docstring: Optional[str] = None

    def field_names(self) -> Tuple[str, ...]:
        """Return field names in declaration order."""
        return tuple(f.name for f in self.fields)

    def get_field(self, name: str) -> Optional[FieldSpec]:
        """Get field by name."""
        for spec in self.fields:
            if spec.name == name:
                return spec
        return None


@dataclass(frozen=True)
class FieldNames:
    """Identifiers synthesized for one field."""

    field: str
    getter_name: str
    optional_getter_name: str
    setter_name: str
    storage_name: str


# Members every generated class defines besides the synthesized methods
RESERVED_MEMBERS = ("__init__", "__eq__", "__hash__", "__repr__", "__slots__", "__fields__")

# Module-level names generated method bodies refer to
RUNTIME_NAMES = ("ABSENT", "Option", "Present")


@dataclass(frozen=True)
class SynthesizedNames:
    """Every identifier the generated class declares."""

    wrapper_type_name: str
    constructor_name: str
    default_constructor_name: str
    default_initializer_name: str
    fields: Tuple[FieldNames, ...]

    def for_field(self, name: str) -> FieldNames:
        """Return the names record for a field."""
        for names in self.fields:
            if names.field == name:
                return names
        raise KeyError(name)

    def all_identifiers(self) -> Iterator[Tuple[str, str]]:
        """
        Yield (identifier, role) pairs for every synthesized identifier.

        Also yields the fixed class members and the runtime names that
        generated method bodies rely on, so fields cannot shadow them.
        """
        yield self.constructor_name, "constructor"
        yield self.default_constructor_name, "default constructor"
        yield self.default_initializer_name, "default initializer"
        for member in RESERVED_MEMBERS:
            yield member, "generated member"
        for runtime_name in RUNTIME_NAMES:
            yield runtime_name, "option runtime"
        for names in self.fields:
            yield names.getter_name, f"getter for '{names.field}'"
            yield names.optional_getter_name, f"optional getter for '{names.field}'"
            yield names.setter_name, f"setter for '{names.field}'"
            yield names.storage_name, f"storage for '{names.field}'"


@dataclass(frozen=True)
class WrapperField:
    """One field of the emitted wrapper type."""

    name: str
    storage_name: str
    type_expression: str
    container_expression: str  # e.g. "Option[int]"


@dataclass(frozen=True)
class WrapperDeclaration:
    """The emitted wrapper type, fields in declaration order."""

    name: str
    fields: Tuple[WrapperField, ...]


METHOD_KINDS = (
    "initializer",
    "constructor",
    "default_constructor",
    "default_initializer",
    "getter",
    "optional_getter",
    "setter",
    "support",
)


@dataclass(frozen=True)
class MethodDefinition:
    """A single emitted method."""

    name: str
    kind: str
    source: str
    field: Optional[str] = None


@dataclass(frozen=True)
class GeneratedArtifact:
    """Final generator output."""

    struct: StructSpec
    names: SynthesizedNames
    declaration: WrapperDeclaration
    methods: Tuple[MethodDefinition, ...]
    source: str  # Complete module text
    declaration_source: str = ""  # The class definition alone
    imports: Tuple[str, ...] = ()

    @property
    def wrapper_name(self) -> str:
        return self.declaration.name

    def get_method(self, name: str) -> Optional[MethodDefinition]:
        """Get method definition by name."""
        for method in self.methods:
            if method.name == name:
                return method
        return None

    def methods_by_kind(self, kind: str) -> Tuple[MethodDefinition, ...]:
        """Return all methods of one kind, in emission order."""
        return tuple(m for m in self.methods if m.kind == kind)

    def summary(self) -> Dict[str, Any]:
        """Get a short description of this artifact."""
        return {
            "original_name": self.struct.original_name,
            "wrapper_name": self.declaration.name,
            "field_count": len(self.declaration.fields),
            "method_count": len(self.methods),
        }
