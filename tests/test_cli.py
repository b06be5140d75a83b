import ast
import json

import pytest

from nullable_struct.cli import create_parser, main

MODELS = '''
class Point:
    x: int
    y: str


class Money:
    amount: Decimal
'''


@pytest.fixture
def models_file(tmp_path):
    path = tmp_path / "models.py"
    path.write_text(MODELS, encoding="utf-8")
    return path


def test_writes_all_classes_to_output(models_file, tmp_path):
    output = tmp_path / "nullable_models.py"

    assert main([str(models_file), "-o", str(output)]) == 0

    tree = ast.parse(output.read_text(encoding="utf-8"))
    classes = [n.name for n in tree.body if isinstance(n, ast.ClassDef)]
    assert classes == ["NullablePoint", "NullableMoney"]


def test_single_class_with_prefix(models_file, tmp_path):
    output = tmp_path / "out.py"

    code = main(
        [str(models_file), "--class", "Point", "--prefix", "Maybe", "--no-comments", "-o", str(output)]
    )

    source = output.read_text(encoding="utf-8")
    assert code == 0
    assert "class MaybePoint:" in source
    assert "Money" not in source
    assert "# Generated by" not in source


def test_prints_to_console_by_default(models_file, capsys):
    assert main([str(models_file), "--class", "Point", "--verbose"]) == 0

    out = capsys.readouterr().out
    assert "NullablePoint" in out
    assert "Generation Metadata" in out


def test_json_declarations(tmp_path):
    path = tmp_path / "types.json"
    path.write_text(
        json.dumps({"name": "Flag", "fields": {"enabled": "bool"}}), encoding="utf-8"
    )
    output = tmp_path / "flag.py"

    assert main([str(path), "-o", str(output)]) == 0
    assert "class NullableFlag:" in output.read_text(encoding="utf-8")


def test_config_file_is_applied(models_file, tmp_path):
    config = tmp_path / "nullable.json"
    config.write_text(json.dumps({"setter_prefix": "with_"}), encoding="utf-8")
    output = tmp_path / "out.py"

    assert main([str(models_file), "--config", str(config), "-o", str(output)]) == 0
    assert "def with_x(self" in output.read_text(encoding="utf-8")


def test_generation_failure_exits_non_zero(tmp_path, capsys):
    path = tmp_path / "bad.py"
    path.write_text("class Empty:\n    pass\n\nclass Ok:\n    a: int\n", encoding="utf-8")
    output = tmp_path / "out.py"

    assert main([str(path), "-o", str(output)]) == 1
    assert not output.exists()
    assert "Empty" in capsys.readouterr().out


def test_invalid_type_expression_exits_non_zero(tmp_path):
    path = tmp_path / "types.json"
    path.write_text(json.dumps({"name": "Bad", "fields": {"x": "list[int"}}), encoding="utf-8")
    output = tmp_path / "out.py"

    assert main([str(path), "-o", str(output)]) == 1
    assert not output.exists()


def test_undecodable_input_exits_non_zero(tmp_path):
    path = tmp_path / "latin.py"
    path.write_bytes(b"\xff\xfeclass A:\n    a: int\n")

    assert main([str(path)]) == 1


@pytest.mark.parametrize(
    "argv",
    [
        [],
        ["does-not-exist.py"],
    ],
)
def test_missing_input_exits_non_zero(argv):
    assert main(argv) == 1


def test_unknown_class_and_bad_suffix(models_file, tmp_path):
    other = tmp_path / "models.toml"
    other.write_text("", encoding="utf-8")

    assert main([str(models_file), "--class", "Missing"]) == 1
    assert main([str(other)]) == 1


def test_frontend_override(tmp_path):
    path = tmp_path / "models.txt"
    path.write_text(MODELS, encoding="utf-8")
    output = tmp_path / "out.py"

    assert main([str(path), "--frontend", "py", "--class", "Point", "-o", str(output)]) == 0


def test_list_frontends(capsys):
    assert main(["--list-frontends"]) == 0

    out = capsys.readouterr().out
    assert "python" in out
    assert ".json" in out


def test_parser_defaults():
    args = create_parser().parse_args(["models.py"])

    assert args.log_level == "WARNING"
    assert args.output is None
    assert args.no_comments is False
