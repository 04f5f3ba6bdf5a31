"""Byte-level codecs shared by the account decoders."""

from pythaccounts.core.codec.encoding import ENCODINGS, decode_account_data
from pythaccounts.core.codec.keys import EMPTY_KEY_BYTES, pubkey_or_none, read_optional_pubkey, read_pubkey
from pythaccounts.core.codec.readers import (
    Buffer,
    ensure_available,
    read_bytes,
    read_i32,
    read_i64,
    read_u8,
    read_u32,
    read_u64,
)

__all__ = [
    "Buffer",
    "ENCODINGS",
    "EMPTY_KEY_BYTES",
    "decode_account_data",
    "ensure_available",
    "pubkey_or_none",
    "read_bytes",
    "read_i32",
    "read_i64",
    "read_optional_pubkey",
    "read_pubkey",
    "read_u8",
    "read_u32",
    "read_u64",
]
