from __future__ import annotations

import importlib
import json
import logging
from pathlib import Path
from types import ModuleType
from typing import Literal, TypeVar

from ..core.protocols import Decodable, Encodable
from ..errors import MissingDependencyError, OutputError, SerializationError
from ..models.types import JsonStructure
from ..options import CodecOptions, resolve_options
from ..values import DynamicValue, EncodableDynamicValue
from .tree import decode_native, encode_native

logger = logging.getLogger(__name__)

D = TypeVar("D", bound=Decodable)

TextFormat = Literal["json", "yaml", "yml", "toon"]

_DUMP_FORMAT_HINTS: set[str] = {"json", "yaml", "toon"}
_LOAD_FORMAT_HINTS: set[str] = {"json", "yaml"}


def _normalize_format_hint(fmt: str) -> str:
    """Normalize a format hint string.

    Args:
        fmt: Format string such as "json", "yaml", or "yml".

    Returns:
        Normalized format hint.
    """
    format_hint = fmt.lower()
    if format_hint == "yml":
        return "yaml"
    return format_hint


def _ensure_format_hint(
    fmt: str,
    *,
    allowed: set[str],
    error_type: type[Exception],
    error_message: str,
) -> str:
    """Validate and normalize a format hint.

    Args:
        fmt: Raw format string.
        allowed: Allowed format hints.
        error_type: Exception type to raise on error.
        error_message: Error message template with {fmt}.

    Returns:
        Normalized format hint.
    """
    format_hint = _normalize_format_hint(fmt)
    if format_hint not in allowed:
        raise error_type(error_message.format(fmt=fmt))
    return format_hint


def _format_from_path(path: Path) -> str:
    return (path.suffix.lstrip(".") or "json").lower()


def _serialize_payload_from_hint(
    payload: JsonStructure,
    format_hint: str,
    *,
    options: CodecOptions,
) -> str:
    """Serialize a payload using a normalized format hint.

    Args:
        payload: Native payload produced by the tree writer.
        format_hint: Normalized format hint ("json", "yaml", "toon").
        options: Resolved codec options.

    Returns:
        Serialized string for the requested format.
    """
    match format_hint:
        case "json":
            return json.dumps(payload, ensure_ascii=False, indent=options.json_indent)
        case "yaml":
            yaml = _require_yaml()
            return str(
                yaml.safe_dump(
                    payload,
                    allow_unicode=True,
                    sort_keys=False,
                    indent=2,
                )
            )
        case "toon":
            toon = _require_toon()
            return str(toon.encode(payload))
        case _:
            raise SerializationError(
                f"Unsupported export format '{format_hint}'. Allowed: json, yaml, yml, toon."
            )


def _parse_payload_from_hint(text: str, format_hint: str) -> object:
    """Parse text into a native payload using a normalized format hint."""
    match format_hint:
        case "json":
            try:
                return json.loads(text)
            except json.JSONDecodeError as e:
                raise SerializationError(f"Malformed JSON input: {e}") from e
        case "yaml":
            yaml = _require_yaml()
            try:
                return yaml.safe_load(text)
            except yaml.YAMLError as e:
                raise SerializationError(f"Malformed YAML input: {e}") from e
        case _:
            raise SerializationError(
                f"Unsupported input format '{format_hint}'. Allowed: json, yaml, yml."
            )


def dumps(
    value: object,
    fmt: TextFormat = "json",
    *,
    pretty: bool | None = None,
    indent: int | None = None,
    options: CodecOptions | None = None,
) -> str:
    """
    Encode a dynamic value (or raw Python data) into text.

    Raw data is wrapped as an EncodableDynamicValue first, so any
    non-string leaf fails before anything is written.

    Args:
        value: Dynamic value of an encodable flavor, or raw Python data.
        fmt: "json", "yaml"/"yml" or "toon".
        pretty: Pretty-print JSON (overrides options).
        indent: JSON indent width (overrides options).
        options: Base codec options.

    Returns:
        Serialized text.

    Raises:
        SerializationError: If the format is unsupported.
        InvalidValueError: If the value holds an unencodable payload.
        MissingDependencyError: If the format backend is not installed.
    """
    format_hint = _ensure_format_hint(
        fmt,
        allowed=_DUMP_FORMAT_HINTS,
        error_type=SerializationError,
        error_message="Unsupported export format '{fmt}'. Allowed: json, yaml, yml, toon.",
    )
    opts = resolve_options(options, pretty=pretty, indent=indent)
    encodable: Encodable = (
        value if hasattr(value, "encode_to") else EncodableDynamicValue(value)  # type: ignore[assignment]
    )
    payload = encode_native(encodable, options=opts)
    return _serialize_payload_from_hint(payload, format_hint, options=opts)


def loads(
    text: str,
    fmt: TextFormat = "json",
    *,
    kind: type[D] = DynamicValue,  # type: ignore[assignment]
    options: CodecOptions | None = None,
) -> D:
    """
    Decode text into a dynamic value of the requested flavor.

    Args:
        text: Serialized input.
        fmt: "json" or "yaml"/"yml".
        kind: Decodable flavor to produce.
        options: Codec options (nesting limit).

    Returns:
        Decoded value.

    Raises:
        SerializationError: If the format is unsupported or the text is malformed.
        DataCorruptedError: If a node matches none of the known shapes.
        MissingDependencyError: If the format backend is not installed.
    """
    format_hint = _ensure_format_hint(
        fmt,
        allowed=_LOAD_FORMAT_HINTS,
        error_type=SerializationError,
        error_message="Unsupported input format '{fmt}'. Allowed: json, yaml, yml.",
    )
    payload = _parse_payload_from_hint(text, format_hint)
    return decode_native(kind, payload, options=options)


def save(
    value: object,
    path: str | Path,
    *,
    pretty: bool | None = None,
    indent: int | None = None,
    options: CodecOptions | None = None,
) -> Path:
    """
    Save a value to a file, inferring format from the extension.

    - .json → JSON
    - .yaml/.yml → YAML
    - .toon → TOON
    """
    dest = Path(path)
    text = dumps(
        value,
        _format_from_path(dest),  # type: ignore[arg-type]
        pretty=pretty,
        indent=indent,
        options=options,
    )
    try:
        dest.write_text(text, encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to write output to '{dest}'.") from e
    logger.debug("Wrote %s", dest)
    return dest


def load(
    path: str | Path,
    *,
    kind: type[D] = DynamicValue,  # type: ignore[assignment]
    options: CodecOptions | None = None,
) -> D:
    """Load a value from a .json/.yaml/.yml file."""
    src = Path(path)
    try:
        text = src.read_text(encoding="utf-8")
    except OSError as e:
        raise OutputError(f"Failed to read input from '{src}'.") from e
    return loads(text, _format_from_path(src), kind=kind, options=options)  # type: ignore[arg-type]


def _require_yaml() -> ModuleType:
    """Ensure pyyaml is installed; otherwise raise with guidance."""
    try:
        module = importlib.import_module("yaml")
    except ImportError as e:
        raise MissingDependencyError(
            "YAML support requires pyyaml. Install it via `pip install pyyaml` or add the 'yaml' extra."
        ) from e
    return module


def _require_toon() -> ModuleType:
    """Ensure python-toon is installed; otherwise raise with guidance."""
    try:
        module = importlib.import_module("toon")
    except ImportError as e:
        raise MissingDependencyError(
            "TOON export requires python-toon. Install it via `pip install python-toon` or add the 'toon' extra."
        ) from e
    return module
