"""
Front-end registry.

Maps input formats to the front ends that read them into declarations.
"""

from pathlib import Path
from typing import Callable, Dict, List, Optional, Union

from .core.schema import TypeDeclaration
from .frontends import declarations_from_json, declarations_from_source

FrontendLoader = Callable[[str], List[TypeDeclaration]]


class RegistryError(Exception):
    """Exception raised for registry-related errors."""

    pass


class FrontendRegistry:
    """Registry for managing declaration front ends."""

    def __init__(self):
        """Initialize empty registry."""
        self._frontends: Dict[str, FrontendLoader] = {}
        self._aliases: Dict[str, str] = {}
        self._suffixes: Dict[str, str] = {}

    def register(
        self,
        name: str,
        loader: FrontendLoader,
        aliases: Optional[List[str]] = None,
        suffixes: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register a front end.

        Args:
            name: Primary front-end name (e.g., 'python', 'json')
            loader: Callable turning input text into declarations
            aliases: Alternative names for this front end
            suffixes: File suffixes handled by this front end
            replace: If True, replace existing registration. If False, skip if exists.

        Raises:
            RegistryError: If the loader is not callable or an alias conflicts
        """
        if not callable(loader):
            raise RegistryError("Front-end loader must be callable")

        key = name.lower()

        if key in self._frontends and not replace:
            return

        self._frontends[key] = loader

        for alias in aliases or []:
            alias_key = alias.lower()
            if alias_key == key:
                continue
            if not replace:
                if alias_key in self._frontends:
                    raise RegistryError(
                        f"Alias '{alias}' conflicts with existing front end"
                    )
                if alias_key in self._aliases and self._aliases[alias_key] != key:
                    raise RegistryError(
                        f"Alias '{alias}' already points to '{self._aliases[alias_key]}'"
                    )
            self._aliases[alias_key] = key

        for suffix in suffixes or []:
            self._suffixes[suffix.lower()] = key

    def unregister(self, name: str):
        """Unregister a front end with its aliases and suffixes."""
        key = name.lower()
        self._frontends.pop(key, None)
        for table in (self._aliases, self._suffixes):
            for alias in [a for a, target in table.items() if target == key]:
                del table[alias]

    def resolve(self, name: str) -> str:
        """
        Resolve a name or alias to the primary front-end name.

        Raises:
            RegistryError: If the name is unknown
        """
        key = name.lower()
        if key in self._frontends:
            return key
        if key in self._aliases:
            return self._aliases[key]

        raise RegistryError(
            f"No front end registered for: {name}. "
            f"Available: {', '.join(self.list_frontends())}"
        )

    def get_frontend(self, name: str) -> FrontendLoader:
        """Get the loader for a front end name or alias."""
        return self._frontends[self.resolve(name)]

    def for_path(self, path: Union[str, Path]) -> str:
        """
        Pick a front end from a file suffix.

        Raises:
            RegistryError: If no front end handles the suffix
        """
        suffix = Path(path).suffix.lower()
        if suffix not in self._suffixes:
            raise RegistryError(f"No front end handles '{suffix or path}' files")
        return self._suffixes[suffix]

    def list_frontends(self) -> List[str]:
        """Get list of registered primary front-end names."""
        return sorted(self._frontends)

    def get_aliases(self, name: str) -> List[str]:
        """Get all aliases for a front end."""
        key = name.lower()
        return sorted(alias for alias, target in self._aliases.items() if target == key)

    def get_suffixes(self, name: str) -> List[str]:
        """Get all file suffixes handled by a front end."""
        key = name.lower()
        return sorted(s for s, target in self._suffixes.items() if target == key)

    def is_supported(self, name: str) -> bool:
        """Check if a front end name or alias is registered."""
        key = name.lower()
        return key in self._frontends or key in self._aliases


def create_default_registry() -> FrontendRegistry:
    """Create a registry holding the built-in front ends."""
    registry = FrontendRegistry()
    registry.register(
        "python", declarations_from_source, aliases=["py"], suffixes=[".py", ".pyi"]
    )
    registry.register("json", declarations_from_json, suffixes=[".json"])
    return registry


def get_frontend(name: str) -> FrontendLoader:
    """Get a built-in front end by name or alias."""
    return create_default_registry().get_frontend(name)


def list_frontends() -> List[str]:
    """List the built-in front ends."""
    return create_default_registry().list_frontends()
