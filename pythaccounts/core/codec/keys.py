"""Nullable 32-byte account identifiers."""

from __future__ import annotations

from solders.pubkey import Pubkey

from pythaccounts.core.codec.readers import Buffer, read_bytes
from pythaccounts.core.constants import PUBKEY_SIZE

EMPTY_KEY_BYTES = bytes(PUBKEY_SIZE)


def pubkey_or_none(span: bytes) -> Pubkey | None:
    """Return ``None`` for an all-zero span, otherwise the identifier it holds."""

    if len(span) != PUBKEY_SIZE:
        raise ValueError(f"identifier span must be {PUBKEY_SIZE} bytes, got {len(span)}")
    if span == EMPTY_KEY_BYTES:
        return None
    return Pubkey.from_bytes(span)


def read_pubkey(data: Buffer, offset: int, field: str = "pubkey") -> Pubkey:
    """Read a required identifier; zero bytes are kept as the all-zero key."""

    return Pubkey.from_bytes(read_bytes(data, offset, PUBKEY_SIZE, field))


def read_optional_pubkey(data: Buffer, offset: int, field: str = "pubkey") -> Pubkey | None:
    """Read a nullable identifier."""

    return pubkey_or_none(read_bytes(data, offset, PUBKEY_SIZE, field))


__all__ = ["EMPTY_KEY_BYTES", "pubkey_or_none", "read_pubkey", "read_optional_pubkey"]
