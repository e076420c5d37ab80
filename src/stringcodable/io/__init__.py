from __future__ import annotations

from .serialize import dumps, load, loads, save
from .tree import TreeReader, TreeWriter, decode_native, encode_native

__all__ = [
    "TreeReader",
    "TreeWriter",
    "decode_native",
    "dumps",
    "encode_native",
    "load",
    "loads",
    "save",
]
