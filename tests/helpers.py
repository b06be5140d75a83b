from nullable_struct.codegen import DeclaredField, TypeDeclaration, TypeReference


def make_declaration(name, *fields, **kwargs):
    """Build a declaration from ``(field_name, type_expression)`` pairs."""
    return TypeDeclaration(
        name=name,
        fields=tuple(
            DeclaredField(name=field_name, type=TypeReference(expression=expression))
            for field_name, expression in fields
        ),
        **kwargs,
    )
