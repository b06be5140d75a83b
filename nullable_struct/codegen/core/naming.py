"""
Name synthesis for generated nullable classes.

Derives the wrapper, constructor and per-field accessor identifiers from a
StructSpec and rejects any set of names that would shadow one another.
"""

import keyword
from typing import Dict, List

from ...logging_config import get_logger
from .config import DEFAULT_CONFIG, NullableConfig
from .errors import NameCollisionError
from .schema import FieldNames, StructSpec, SynthesizedNames

logger = get_logger(__name__)


def wrapper_type_name(original_name: str, config: NullableConfig = DEFAULT_CONFIG) -> str:
    """Prefix + original type name."""
    return f"{config.wrapper_prefix}{original_name}"


def field_names_for(field_name: str, config: NullableConfig = DEFAULT_CONFIG) -> FieldNames:
    """Derive getter, optional getter, setter and storage names for one field."""
    return FieldNames(
        field=field_name,
        getter_name=field_name,
        optional_getter_name=f"{config.optional_getter_prefix}{field_name}",
        setter_name=f"{config.setter_prefix}{field_name}",
        storage_name=f"{config.storage_prefix}{field_name}",
    )


def find_collisions(names: SynthesizedNames) -> Dict[str, List[str]]:
    """
    Group synthesized identifiers that coincide.

    Returns:
        Mapping of identifier to every role producing it, only for identifiers
        produced more than once
    """
    roles: Dict[str, List[str]] = {}
    for identifier, role in names.all_identifiers():
        roles.setdefault(identifier, []).append(role)
    return {ident: r for ident, r in roles.items() if len(r) > 1}


def synthesize_names(
    struct: StructSpec, config: NullableConfig = DEFAULT_CONFIG
) -> SynthesizedNames:
    """
    Derive every identifier used by the generated class.

    Args:
        struct: Validated struct
        config: Naming configuration

    Returns:
        SynthesizedNames for this struct

    Raises:
        NameCollisionError: If two identifiers coincide, or the wrapper name
            is unusable
    """
    wrapper = wrapper_type_name(struct.original_name, config)
    if wrapper == struct.original_name:
        raise NameCollisionError(wrapper, ("wrapper type", "original type"))
    if not wrapper.isidentifier() or keyword.iskeyword(wrapper):
        raise NameCollisionError(wrapper, ("wrapper type", "invalid identifier"))

    names = SynthesizedNames(
        wrapper_type_name=wrapper,
        constructor_name=config.constructor_name,
        default_constructor_name=config.default_constructor_name,
        default_initializer_name=config.default_initializer_name,
        fields=tuple(field_names_for(name, config) for name in struct.field_names()),
    )

    collisions = find_collisions(names)
    if collisions:
        # Report the first collision in declaration order
        identifier, roles = next(iter(collisions.items()))
        logger.debug("Name collisions in %s: %s", wrapper, collisions)
        raise NameCollisionError(identifier, tuple(roles))

    for identifier, role in names.all_identifiers():
        if keyword.iskeyword(identifier):
            raise NameCollisionError(identifier, (role, "python keyword"))

    logger.debug(
        "Synthesized %d identifier(s) for %s",
        sum(1 for _ in names.all_identifiers()),
        wrapper,
    )
    return names

