import json

import pytest

from nullable_struct.codegen import ConfigError, ConfigManager, NullableConfig, load_config
from nullable_struct.codegen.core.config import DEFAULT_CONFIG, EXAMPLE_CONFIG


def test_defaults():
    config = load_config()

    assert config == DEFAULT_CONFIG
    assert config.wrapper_prefix == "Nullable"
    assert config.optional_getter_prefix == "get_"
    assert ConfigManager().validate_config(config) == []


def test_file_then_overrides(tmp_path):
    path = tmp_path / "nullable.json"
    path.write_text(json.dumps(EXAMPLE_CONFIG), encoding="utf-8")

    config = load_config({"add_comments": True}, config_file=path)

    assert config.wrapper_prefix == "Maybe"
    assert config.default_types == {"Decimal": "Decimal()"}
    assert config.add_comments is True


def test_unknown_keys_go_to_custom():
    config = load_config({"team": "core"})

    assert config.custom == {"team": "core"}


@pytest.mark.parametrize(
    "name, content",
    [
        ("config.json", "{broken"),
        ("config.json", "[1, 2]"),
        ("config.yaml", "wrapper_prefix: Maybe"),
    ],
)
def test_invalid_config_files(tmp_path, name, content):
    path = tmp_path / name
    path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(config_file=path)


def test_missing_config_file(tmp_path):
    with pytest.raises(ConfigError):
        load_config(config_file=tmp_path / "absent.json")


def test_default_types_must_be_mapping():
    with pytest.raises(ConfigError):
        load_config({"default_types": ["Decimal"]})


def test_save_and_reload(tmp_path):
    manager = ConfigManager()
    config = manager.get_config({"wrapper_prefix": "Opt", "team": "core"})
    path = tmp_path / "saved.json"

    manager.save_config(config, path)

    saved = json.loads(path.read_text(encoding="utf-8"))
    assert saved["team"] == "core"
    assert "custom" not in saved
    assert manager.get_config(config_file=path) == config


def test_validation_warnings():
    config = NullableConfig(
        constructor_name="class",
        setter_prefix="",
        storage_prefix="1",
        default_types={"Widget": " "},
    )

    warnings = ConfigManager().validate_config(config)

    assert "Invalid constructor_name: 'class'" in warnings
    assert "Invalid storage_prefix: '1'" in warnings
    assert "Empty setter_prefix collides with getters" in warnings
    assert "Invalid default expression for Widget" in warnings
