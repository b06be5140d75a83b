"""
Generation errors.

Each error is fatal to the invocation that raised it. None of them is retried.
"""

from typing import Optional, Tuple


class NullableError(Exception):
    """Base exception for nullable code generation errors."""

    pass


class EmptyStructError(NullableError):
    """Raised when a declaration has no fields."""

    def __init__(self, struct_name: str):
        super().__init__(f"Type '{struct_name}' has no fields")
        self.struct_name = struct_name


class UnsupportedFieldKind(NullableError):
    """Raised for unnamed fields or types the optional wrapper cannot hold."""

    def __init__(self, struct_name: str, field_name: Optional[str], reason: str):
        label = field_name if field_name else "<unnamed>"
        super().__init__(f"Unsupported field {struct_name}.{label}: {reason}")
        self.struct_name = struct_name
        self.field_name = field_name
        self.reason = reason


class NameCollisionError(NullableError):
    """Raised when two identifiers in the generated type coincide."""

    def __init__(self, identifier: str, roles: Tuple[str, ...]):
        super().__init__(
            f"Identifier '{identifier}' is produced by more than one source: "
            f"{', '.join(roles)}"
        )
        self.identifier = identifier
        self.roles = roles


class MissingDefaultCapability(NullableError):
    """Raised when a field type has no provable default value."""

    def __init__(self, struct_name: str, field_name: str, type_expression: str):
        super().__init__(
            f"Cannot prove a default value exists for {struct_name}.{field_name} "
            f"of type '{type_expression}'"
        )
        self.struct_name = struct_name
        self.field_name = field_name
        self.type_expression = type_expression


class DeclarationError(Exception):
    """Raised by front ends when host input cannot be read as a declaration."""

    pass
