from __future__ import annotations

"""Shared native-payload type aliases used across StringCodable."""

NativeValue = None | str | list["NativeValue"] | dict[str, "NativeValue"]
JsonPrimitive = str | int | float | bool | None
JsonStructure = JsonPrimitive | list["JsonStructure"] | dict[str, "JsonStructure"]

__all__ = ["NativeValue", "JsonPrimitive", "JsonStructure"]
