"""Tests for the nullable identifier codec."""

from __future__ import annotations

import pytest
from solders.pubkey import Pubkey

from pythaccounts.core.codec.keys import pubkey_or_none, read_optional_pubkey, read_pubkey
from pythaccounts.core.exceptions import TooShortError


def test_all_zero_span_is_absent() -> None:
    assert pubkey_or_none(bytes(32)) is None


@pytest.mark.parametrize("position", [0, 15, 31])
def test_single_non_zero_byte_is_present_and_preserved(position: int) -> None:
    span = bytearray(32)
    span[position] = 0x7F

    key = pubkey_or_none(bytes(span))

    assert isinstance(key, Pubkey)
    assert bytes(key) == bytes(span)


def test_span_must_be_32_bytes() -> None:
    with pytest.raises(ValueError):
        pubkey_or_none(bytes(31))


def test_read_optional_pubkey_at_offset(account_bytes) -> None:
    key = account_bytes.key(3)
    data = bytes(8) + key + bytes(32)

    assert bytes(read_optional_pubkey(data, 8)) == key
    assert read_optional_pubkey(data, 40) is None


def test_read_pubkey_keeps_zero_key() -> None:
    key = read_pubkey(bytes(32), 0)

    assert bytes(key) == bytes(32)


def test_truncated_identifier_raises_too_short(account_bytes) -> None:
    data = account_bytes.key(1)[:20]

    with pytest.raises(TooShortError) as excinfo:
        read_optional_pubkey(data, 0, "next")

    assert excinfo.value.field == "next"
    assert excinfo.value.width == 32
