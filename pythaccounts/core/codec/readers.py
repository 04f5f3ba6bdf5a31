"""Bounds-checked little-endian primitive readers."""

from __future__ import annotations

import struct

from pythaccounts.core.exceptions.decode import TooShortError

Buffer = bytes | bytearray | memoryview

_U8 = struct.Struct("<B")
_I32 = struct.Struct("<i")
_U32 = struct.Struct("<I")
_I64 = struct.Struct("<q")
_U64 = struct.Struct("<Q")


def ensure_available(data: Buffer, offset: int, width: int, field: str = "field") -> None:
    """Raise :class:`TooShortError` unless ``width`` bytes exist at ``offset``."""

    if offset < 0 or offset + width > len(data):
        raise TooShortError(field, offset, width, len(data))


def _unpack(codec: struct.Struct, data: Buffer, offset: int, field: str) -> int:
    ensure_available(data, offset, codec.size, field)
    return codec.unpack_from(data, offset)[0]


def read_u8(data: Buffer, offset: int, field: str = "u8") -> int:
    return _unpack(_U8, data, offset, field)


def read_i32(data: Buffer, offset: int, field: str = "i32") -> int:
    return _unpack(_I32, data, offset, field)


def read_u32(data: Buffer, offset: int, field: str = "u32") -> int:
    return _unpack(_U32, data, offset, field)


def read_i64(data: Buffer, offset: int, field: str = "i64") -> int:
    return _unpack(_I64, data, offset, field)


def read_u64(data: Buffer, offset: int, field: str = "u64") -> int:
    return _unpack(_U64, data, offset, field)


def read_bytes(data: Buffer, offset: int, length: int, field: str = "bytes") -> bytes:
    """Copy ``length`` bytes starting at ``offset``."""

    ensure_available(data, offset, length, field)
    return bytes(data[offset : offset + length])


__all__ = [
    "Buffer",
    "ensure_available",
    "read_u8",
    "read_i32",
    "read_u32",
    "read_i64",
    "read_u64",
    "read_bytes",
]
