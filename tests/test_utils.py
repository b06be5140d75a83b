import json
import logging

import pytest

from nullable_struct.logging_config import LOGGER_NAME, get_logger, setup_logging
from nullable_struct.utils import DeclarationLoaderError, load_declarations


def test_load_python_declarations(tmp_path):
    path = tmp_path / "models.py"
    path.write_text("class A:\n    a: int\n\nclass B:\n    b: str\n", encoding="utf-8")

    source, declarations = load_declarations(path)

    assert str(path) in source
    assert [d.name for d in declarations] == ["A", "B"]


def test_load_by_name(tmp_path):
    path = tmp_path / "types.json"
    path.write_text(
        json.dumps([{"name": "A", "fields": {"a": "int"}}, {"name": "B", "fields": {"b": "str"}}]),
        encoding="utf-8",
    )

    _, declarations = load_declarations(path, name="B")

    assert [d.name for d in declarations] == ["B"]


def test_load_errors(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_declarations(tmp_path / "missing.py")

    broken = tmp_path / "broken.json"
    broken.write_text("{", encoding="utf-8")
    with pytest.raises(DeclarationLoaderError):
        load_declarations(broken)

    unknown = tmp_path / "types.yaml"
    unknown.write_text("", encoding="utf-8")
    with pytest.raises(DeclarationLoaderError):
        load_declarations(unknown)


def test_get_logger_uses_package_namespace():
    assert get_logger("nullable_struct.cli").name == "nullable_struct.cli"
    assert get_logger("plugins.extra").name == "nullable_struct.plugins.extra"


def test_setup_logging_replaces_its_own_handlers(tmp_path):
    log_file = tmp_path / "run.log"

    setup_logging("DEBUG", log_file=log_file, use_rich=False)
    logger = setup_logging("INFO", log_file=log_file, use_rich=False)

    assert logger is logging.getLogger(LOGGER_NAME)
    assert logger.level == logging.INFO
    assert len(logger.handlers) == 2

    get_logger("tests").info("hello from tests")
    for handler in logger.handlers:
        handler.flush()
    assert "hello from tests" in log_file.read_text(encoding="utf-8")


def test_setup_logging_rejects_unknown_level():
    with pytest.raises(ValueError):
        setup_logging("LOUD")


def test_undecodable_file_is_a_loader_error(tmp_path):
    path = tmp_path / "latin.py"
    path.write_bytes(b"\xff\xfeclass A:\n    a: int\n")

    with pytest.raises(DeclarationLoaderError):
        load_declarations(path)
