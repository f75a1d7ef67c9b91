"""CLI orchestration integration tests."""

from __future__ import annotations

import json
from pathlib import Path

import yaml
from click.testing import CliRunner
from flatdoc.cli import cli
from flatdoc.results_writing import FLAT_MAP_SHEET_NAME
from lxml import etree
from openpyxl import load_workbook

_SAMPLE = {
    "array": [1, 2, 3],
    "boolean": True,
    "null": None,
    "hyp:number": 123,
    "object": {"a": "b", "c": "d", "e": "f"},
    "string": "Hello World",
}


def _write_input(tmp_path: Path, name: str = "doc.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(_SAMPLE), encoding="utf-8")
    return path


def _write_config(tmp_path: Path) -> Path:
    config = {
        "xml": {
            "name": "record",
            "namespace": "urn:default",
            "attributes": {"xmlns:hyp": "urn:hyp"},
        },
        "flatten": {"ignore": ["object.c"]},
    }
    path = tmp_path / "flatdoc.yaml"
    path.write_text(yaml.safe_dump(config), encoding="utf-8")
    return path


def test_flatten_command_prints_flat_map(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _write_input(tmp_path)

    result = runner.invoke(cli, ["flatten", str(input_path), "--ignore", "hyp:number"])

    assert result.exit_code == 0
    assert json.loads(result.output) == {
        "array": [1, 2, 3],
        "boolean": True,
        "null": None,
        "object_a": "b",
        "object_c": "d",
        "object_e": "f",
        "string": "Hello World",
    }


def test_flatten_command_combines_configured_and_cli_ignores(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _write_input(tmp_path)
    config_path = _write_config(tmp_path)

    result = runner.invoke(
        cli,
        ["flatten", str(input_path), "--config", str(config_path), "--ignore", "object.e"],
    )

    assert result.exit_code == 0
    flat = json.loads(result.output)
    assert "object_c" not in flat
    assert "object_e" not in flat
    assert flat["object_a"] == "b"
    assert flat["hyp_number"] == 123


def test_flatten_command_writes_workbook(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _write_input(tmp_path)
    output_path = tmp_path / "flat.xlsx"

    result = runner.invoke(cli, ["flatten", str(input_path), "--output", str(output_path)])

    assert result.exit_code == 0
    assert str(output_path.resolve()) in result.output
    sheet = load_workbook(output_path)[FLAT_MAP_SHEET_NAME]
    assert sheet.cell(row=2, column=1).value == "array"
    assert sheet.cell(row=2, column=2).value == "1|2|3"


def test_flatten_command_reads_yaml_input(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = tmp_path / "doc.yml"
    input_path.write_text("geek:\n  name: Ada\n  age: 36\n", encoding="utf-8")

    result = runner.invoke(cli, ["flatten", str(input_path)])

    assert result.exit_code == 0
    assert json.loads(result.output) == {"age": 36, "name": "Ada"}


def test_convert_command_writes_configured_xml(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _write_input(tmp_path)
    config_path = _write_config(tmp_path)
    output_path = tmp_path / "out" / "doc.xml"

    result = runner.invoke(
        cli,
        [
            "convert",
            str(input_path),
            "--to",
            "xml",
            "--config",
            str(config_path),
            "--output",
            str(output_path),
        ],
    )

    assert result.exit_code == 0
    root = etree.fromstring(output_path.read_bytes())
    assert root.tag == "{urn:default}record"
    assert root.find("{urn:hyp}number").text == "123"
    assert root.find("{urn:default}array").text == "1|2|3"


def test_convert_command_turns_xml_into_yaml(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = tmp_path / "doc.xml"
    input_path.write_text("<d><a>1</a><b><c>true</c></b></d>", encoding="utf-8")

    result = runner.invoke(cli, ["convert", str(input_path), "--to", "yaml"])

    assert result.exit_code == 0
    assert yaml.safe_load(result.output) == {"a": "1", "b": {"c": "true"}}


def test_convert_command_rewrites_prefixed_xml_without_config(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = tmp_path / "doc.xml"
    input_path.write_text(
        '<d xmlns:hyp="urn:hyp"><hyp:number>123</hyp:number></d>', encoding="utf-8"
    )

    result = runner.invoke(cli, ["convert", str(input_path), "--to", "xml"])

    assert result.exit_code == 0
    root = etree.fromstring(result.output.strip().encode("utf-8"))
    assert root.find("{urn:hyp}number").text == "123"


def test_convert_command_keeps_json_number_digits(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = tmp_path / "doc.json"
    input_path.write_text('{"pi": 3.14159265358979323846264338327950288}', encoding="utf-8")

    result = runner.invoke(cli, ["convert", str(input_path), "--to", "json"])

    assert result.exit_code == 0
    assert result.output == '{"pi": 3.14159265358979323846264338327950288}\n'


def test_get_command_prints_converted_values(tmp_path: Path) -> None:
    runner = CliRunner()
    input_path = _write_input(tmp_path)

    string_result = runner.invoke(cli, ["get", str(input_path), "object", "a"])
    int_result = runner.invoke(cli, ["get", str(input_path), "hyp:number", "--type", "int"])
    bool_result = runner.invoke(cli, ["get", str(input_path), "boolean", "--type", "bool"])

    assert string_result.output == "b\n"
    assert int_result.output == "123\n"
    assert bool_result.output == "true\n"


def test_generate_config_command_writes_template(tmp_path: Path) -> None:
    runner = CliRunner()
    output_path = tmp_path / "flatdoc.yaml"

    result = runner.invoke(cli, ["generate-config", "--output", str(output_path)])

    assert result.exit_code == 0
    assert output_path.exists()
    assert "flatten:" in output_path.read_text(encoding="utf-8")
