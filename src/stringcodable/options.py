from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from .errors import ConfigError


class CodecOptions(BaseModel):
    """Options shared by the tree and text codecs.

    Examples:
        >>> CodecOptions(max_depth=64, pretty=True).json_indent
        2
    """

    model_config = ConfigDict(frozen=True)

    max_depth: int | None = Field(
        default=None,
        ge=1,
        description="Maximum nesting depth (root counts as 1); None for no limit.",
    )
    pretty: bool = Field(default=False, description="Pretty-print JSON output.")
    indent: int | None = Field(
        default=None,
        ge=0,
        description="Indent width for JSON (defaults to 2 when pretty is True).",
    )

    @property
    def json_indent(self) -> int | None:
        return 2 if self.pretty and self.indent is None else self.indent


def resolve_options(options: CodecOptions | None = None, **overrides: object) -> CodecOptions:
    """
    Merge keyword overrides into a base options object.

    Overrides whose value is None are ignored so callers can forward optional
    keyword arguments unchanged.

    Raises:
        ConfigError: If the merged options are invalid.
    """
    base = options or CodecOptions()
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return base
    try:
        return CodecOptions.model_validate({**base.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigError(f"Invalid codec options: {e}") from e
