from __future__ import annotations

import importlib
import json
from pathlib import Path
from typing import Literal, cast

import pytest

from stringcodable import (
    CodecOptions,
    ConfigError,
    DataCorruptedError,
    DecodableDynamicValue,
    DynamicValue,
    EncodableDynamicValue,
    InvalidValueError,
    MissingDependencyError,
    OutputError,
    SerializationError,
)
from stringcodable.io import dumps, load, loads, save


def test_dumps_json_matches_payload(sample_payload: dict[str, object]) -> None:
    text = dumps(DynamicValue(sample_payload))
    assert json.loads(text) == sample_payload


def test_dumps_json_pretty_defaults_to_two_spaces() -> None:
    text = dumps(DynamicValue({"k": "v"}), pretty=True)
    assert text == '{\n  "k": "v"\n}'


def test_dumps_json_honors_options_indent() -> None:
    text = dumps(DynamicValue(["a"]), options=CodecOptions(indent=4))
    assert text == '[\n    "a"\n]'


def test_dumps_keeps_non_ascii() -> None:
    assert dumps(DynamicValue("日本語")) == '"日本語"'


def test_dumps_wraps_raw_data() -> None:
    assert dumps({"a": ["1", None]}) == '{"a": ["1", null]}'


def test_dumps_converts_decode_only_values() -> None:
    assert dumps(DecodableDynamicValue(["x"])) == '["x"]'


def test_dumps_rejects_non_string_leaves() -> None:
    with pytest.raises(InvalidValueError) as excinfo:
        dumps({"boolean": True, "integer": 1, "array": [1, 2, 3]})
    assert excinfo.value.value is True
    assert excinfo.value.coding_path == ("boolean",)


def test_dumps_unsupported_format() -> None:
    invalid_format = cast(Literal["json", "yaml", "yml", "toon"], "xml")
    with pytest.raises(SerializationError):
        dumps(DynamicValue("x"), invalid_format)


def test_dumps_invalid_options() -> None:
    with pytest.raises(ConfigError):
        dumps(DynamicValue("x"), indent=-1)


def test_loads_json_round_trip(sample_payload: dict[str, object]) -> None:
    value = DynamicValue(sample_payload)
    assert loads(dumps(value)) == value


def test_loads_selects_flavor() -> None:
    value = loads('{"k": ["v"]}', kind=DecodableDynamicValue)
    assert isinstance(value, DecodableDynamicValue)
    assert value == EncodableDynamicValue({"k": ["v"]})


def test_loads_rejects_numbers() -> None:
    with pytest.raises(DataCorruptedError) as excinfo:
        loads('{"integer": 1}')
    assert excinfo.value.coding_path == ("integer",)


def test_loads_malformed_json() -> None:
    with pytest.raises(SerializationError):
        loads("{not json")


def test_loads_does_not_accept_toon() -> None:
    with pytest.raises(SerializationError):
        loads("k: v", "toon")


@pytest.mark.yaml
def test_yaml_round_trip(sample_payload: dict[str, object]) -> None:
    value = DynamicValue(sample_payload)
    text = dumps(value, "yml")
    assert "nested:" in text
    assert loads(text, "yaml") == value


@pytest.mark.yaml
def test_yaml_unquoted_scalars_are_not_strings() -> None:
    with pytest.raises(DataCorruptedError):
        loads("flag: true\n", "yaml")
    assert loads("flag: 'true'\n", "yaml") == DynamicValue({"flag": "true"})


@pytest.mark.yaml
def test_yaml_malformed_input() -> None:
    with pytest.raises(SerializationError):
        loads("a: [unclosed", "yaml")


def test_yaml_missing_dependency(monkeypatch: pytest.MonkeyPatch) -> None:
    """YAML dependency missing should raise MissingDependencyError."""
    original_import = importlib.import_module

    def _fake_import(name: str, package: str | None = None) -> object:
        if name == "yaml":
            raise ImportError("yaml not installed")
        return original_import(name, package=package)

    monkeypatch.setattr(importlib, "import_module", _fake_import)
    with pytest.raises(MissingDependencyError):
        dumps(DynamicValue("x"), "yaml")
    with pytest.raises(MissingDependencyError):
        loads("x", "yaml")


def test_toon_missing_dependency(monkeypatch: pytest.MonkeyPatch) -> None:
    original_import = importlib.import_module

    def _fake_import(name: str, package: str | None = None) -> object:
        if name == "toon":
            raise ImportError("toon not installed")
        return original_import(name, package=package)

    monkeypatch.setattr(importlib, "import_module", _fake_import)
    with pytest.raises(MissingDependencyError):
        dumps(DynamicValue("x"), "toon")


def test_save_and_load_json(tmp_path: Path, sample_value: DynamicValue) -> None:
    dest = save(sample_value, tmp_path / "value.json", pretty=True)
    assert dest.read_text(encoding="utf-8").startswith("{\n  ")
    assert load(dest) == sample_value


@pytest.mark.yaml
def test_save_and_load_yaml(tmp_path: Path, sample_value: DynamicValue) -> None:
    dest = save(sample_value, tmp_path / "value.yaml")
    assert load(dest, kind=DecodableDynamicValue) == sample_value


def test_save_write_failure(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """IO failures should surface as OutputError."""

    def _fail_write(self: Path, *args: object, **kwargs: object) -> None:
        raise OSError("disk full")

    monkeypatch.setattr(Path, "write_text", _fail_write)
    with pytest.raises(OutputError):
        save(DynamicValue("x"), tmp_path / "out.json")


def test_load_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OutputError):
        load(tmp_path / "missing.json")


@pytest.mark.toon
def test_dumps_toon(sample_value: DynamicValue) -> None:
    text = dumps(sample_value, "toon")
    assert isinstance(text, str)
    assert "alpha" in text
    assert "charlie" in text


@pytest.mark.toon
def test_save_toon(tmp_path: Path, sample_value: DynamicValue) -> None:
    dest = save(sample_value, tmp_path / "value.toon")
    assert dest.suffix == ".toon"
    assert dest.read_text(encoding="utf-8") == dumps(sample_value, "toon")
