"""Tests for account data text encodings."""

from __future__ import annotations

import base64

import pytest

from pythaccounts.core.codec.encoding import decode_account_data
from pythaccounts.core.exceptions import ErrorCode, InvalidEncodingError

RAW = bytes([0xD4, 0xC3, 0xB2, 0xA1, 1, 0, 0, 0])


def test_base64_text_is_decoded() -> None:
    assert decode_account_data(base64.b64encode(RAW).decode()) == RAW


def test_base64_bytes_with_whitespace_are_decoded() -> None:
    encoded = base64.b64encode(RAW)

    assert decode_account_data(b"  " + encoded + b"\n", "BASE64") == RAW


def test_hex_is_decoded() -> None:
    assert decode_account_data("d4c3b2a1 01000000", "hex") == RAW


def test_raw_passes_bytes_through() -> None:
    assert decode_account_data(bytearray(RAW), "raw") == RAW


def test_raw_rejects_text() -> None:
    with pytest.raises(InvalidEncodingError):
        decode_account_data("abc", "raw")


@pytest.mark.parametrize(("encoded", "encoding"), [("not base64!", "base64"), ("zz", "hex")])
def test_malformed_text_raises(encoded: str, encoding: str) -> None:
    with pytest.raises(InvalidEncodingError) as excinfo:
        decode_account_data(encoded, encoding)

    assert excinfo.value.code is ErrorCode.INVALID_ENCODING
    assert excinfo.value.encoding == encoding


def test_unknown_encoding_raises() -> None:
    with pytest.raises(InvalidEncodingError):
        decode_account_data("AAAA", "base58")
