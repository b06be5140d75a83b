"""
Configuration management for nullable code generation.

Handles loading and merging configuration from JSON files,
providing defaults and validation for naming and emission settings.
"""

import json
import keyword
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path
from typing import Any, Dict, List, Optional, Union


class ConfigError(Exception):
    """Exception raised for configuration-related errors."""

    pass


@dataclass(frozen=True)
class NullableConfig:
    """Settings shared by every pipeline stage."""

    # Naming settings
    wrapper_prefix: str = "Nullable"
    constructor_name: str = "new"
    default_constructor_name: str = "new_default"
    default_initializer_name: str = "default"
    optional_getter_prefix: str = "get_"
    setter_prefix: str = "set_"
    storage_prefix: str = "_"

    # Emission settings
    add_comments: bool = True
    use_slots: bool = True

    # Extra default-constructible types: name -> default expression
    default_types: Dict[str, str] = field(default_factory=dict)

    # Anything else found in a config file
    custom: Dict[str, Any] = field(default_factory=dict)


DEFAULT_CONFIG = NullableConfig()


class ConfigManager:
    """Manages configuration loading and merging."""

    def __init__(self):
        """Initialize configuration manager."""
        self._defaults: Dict[str, Any] = asdict(DEFAULT_CONFIG)

    def get_config(
        self,
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> NullableConfig:
        """
        Get complete configuration.

        Args:
            custom_config: Custom configuration overrides
            config_file: Path to JSON configuration file

        Returns:
            Merged configuration
        """
        base_config = dict(self._defaults)

        if config_file:
            file_config = self._load_config_file(config_file)
            base_config.update(file_config)

        if custom_config:
            base_config.update(custom_config)

        return self._dict_to_config(base_config)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        """Load configuration from JSON file."""
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")

        if not path.suffix.lower() == ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                config = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigError(
                f"Invalid JSON in configuration file {path}: {str(e)}"
            ) from e
        except OSError as e:
            raise ConfigError(
                f"Failed to load configuration file {path}: {str(e)}"
            ) from e

        if not isinstance(config, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")

        return config

    def _dict_to_config(self, config_dict: Dict[str, Any]) -> NullableConfig:
        """Convert dictionary to NullableConfig instance."""
        known_fields = {f.name for f in fields(NullableConfig)}

        config_args = {}
        custom_args = {}

        for key, value in config_dict.items():
            if key in known_fields:
                config_args[key] = value
            else:
                custom_args[key] = value

        if custom_args:
            merged_custom = dict(config_args.get("custom", {}))
            merged_custom.update(custom_args)
            config_args["custom"] = merged_custom

        if not isinstance(config_args.get("default_types", {}), dict):
            raise ConfigError("default_types must be a mapping of name to expression")

        return NullableConfig(**config_args)

    def save_config(self, config: NullableConfig, output_path: Union[str, Path]):
        """Save configuration to JSON file."""
        path = Path(output_path)

        config_dict = asdict(config)
        custom = config_dict.pop("custom")
        config_dict.update(custom)

        try:
            with open(path, "w", encoding="utf-8") as f:
                json.dump(config_dict, f, indent=2, ensure_ascii=False)
        except OSError as e:
            raise ConfigError(
                f"Failed to save configuration to {path}: {str(e)}"
            ) from e

    def validate_config(self, config: NullableConfig) -> List[str]:
        """
        Validate configuration.

        Returns:
            List of validation warnings
        """
        warnings = []

        for name in (
            "constructor_name",
            "default_constructor_name",
            "default_initializer_name",
        ):
            value = getattr(config, name)
            if not value.isidentifier() or keyword.iskeyword(value):
                warnings.append(f"Invalid {name}: {value!r}")

        for name in (
            "wrapper_prefix",
            "optional_getter_prefix",
            "setter_prefix",
            "storage_prefix",
        ):
            value = getattr(config, name)
            # A prefix only has to form an identifier once a name is appended
            if value and not (value + "x").isidentifier():
                warnings.append(f"Invalid {name}: {value!r}")

        if not config.optional_getter_prefix:
            warnings.append("Empty optional_getter_prefix collides with getters")
        if not config.setter_prefix:
            warnings.append("Empty setter_prefix collides with getters")

        for type_name, expression in config.default_types.items():
            if not isinstance(expression, str) or not expression.strip():
                warnings.append(f"Invalid default expression for {type_name}")

        return warnings


def load_config(
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> NullableConfig:
    """
    Convenience function to load configuration.

    Args:
        custom_config: Custom configuration overrides
        config_file: Path to JSON configuration file

    Returns:
        Merged configuration
    """
    return ConfigManager().get_config(custom_config, config_file)


EXAMPLE_CONFIG = {
    "wrapper_prefix": "Maybe",
    "default_types": {"Decimal": "Decimal()"},
    "add_comments": False,
}
