"""Tests for the product account decoder."""

from __future__ import annotations

import pytest

from pythaccounts.core.config import DecoderConfig
from pythaccounts.core.decoders.product import parse_product_data, parse_product_metadata
from pythaccounts.core.exceptions import MalformedMetadataError, TooShortError


def test_metadata_and_price_account(account_bytes) -> None:
    price_key = account_bytes.key(5)
    body = account_bytes.attributes(
        [
            ("symbol", "Crypto.BTC/USD"),
            ("asset_type", "Crypto"),
            ("quote_currency", "USD"),
            ("tenor", "Spot"),
            ("generic_symbol", "BTCUSD"),
        ]
    )
    data = account_bytes.product(price_key, body)

    record = parse_product_data(data)

    assert bytes(record.price_account_key) == price_key
    assert list(record.metadata) == ["symbol", "asset_type", "quote_currency", "tenor", "generic_symbol"]
    assert record.symbol == "Crypto.BTC/USD"
    assert record.asset_type == "Crypto"
    assert record.quote_currency == "USD"
    assert record.tenor == "Spot"
    assert record.metadata["generic_symbol"] == "BTCUSD"


def test_zero_key_length_consumes_one_byte(account_bytes) -> None:
    body = b"\x00" + account_bytes.attributes([("a", "1")]) + b"\x00\x00"
    data = account_bytes.product(account_bytes.key(5), body)

    record = parse_product_data(data)

    assert record.metadata == {"a": "1"}


def test_stops_at_declared_size_not_buffer_end(account_bytes) -> None:
    body = account_bytes.attributes([("symbol", "ETH/USD")])
    data = account_bytes.product(account_bytes.key(5), body, padding=128)

    record = parse_product_data(data)

    assert record.size == 48 + len(body)
    assert record.metadata == {"symbol": "ETH/USD"}


def test_duplicate_key_takes_last_value_keeps_first_position(account_bytes) -> None:
    body = account_bytes.attributes([("symbol", "old"), ("tenor", "Spot"), ("symbol", "new")])

    metadata = parse_product_metadata(account_bytes.product(account_bytes.key(5), body), 48 + len(body))

    assert metadata == {"symbol": "new", "tenor": "Spot"}
    assert list(metadata) == ["symbol", "tenor"]


def test_empty_value_is_allowed(account_bytes) -> None:
    body = account_bytes.attributes([("cms_symbol", "")])

    record = parse_product_data(account_bytes.product(account_bytes.key(5), body))

    assert record.metadata == {"cms_symbol": ""}


def test_key_overrunning_used_size(account_bytes) -> None:
    body = bytes([10]) + b"abc"
    data = account_bytes.product(account_bytes.key(5), body, padding=32)

    with pytest.raises(MalformedMetadataError) as excinfo:
        parse_product_data(data)

    assert excinfo.value.part == "key"
    assert excinfo.value.offset == 49
    assert excinfo.value.size == 52


def test_value_length_missing(account_bytes) -> None:
    body = bytes([3]) + b"abc"
    data = account_bytes.product(account_bytes.key(5), body, padding=8)

    with pytest.raises(MalformedMetadataError) as excinfo:
        parse_product_data(data)

    assert excinfo.value.part == "value length"


def test_value_overrunning_used_size(account_bytes) -> None:
    body = bytes([1]) + b"k" + bytes([9]) + b"v"
    data = account_bytes.product(account_bytes.key(5), body, padding=16)

    with pytest.raises(MalformedMetadataError) as excinfo:
        parse_product_data(data)

    assert excinfo.value.part == "value"
    assert excinfo.value.length == 9


def test_invalid_utf8_is_replaced(account_bytes) -> None:
    body = bytes([3]) + b"sym" + bytes([2]) + b"\xff\xfe"

    record = parse_product_data(account_bytes.product(account_bytes.key(5), body))

    assert record.metadata["sym"] == "\ufffd\ufffd"


def test_unvalidated_size_beyond_buffer_raises_too_short(account_bytes) -> None:
    body = account_bytes.attributes([("a", "b")])
    data = account_bytes.product(account_bytes.key(5), body, size=200)

    with pytest.raises(TooShortError):
        parse_product_data(data, DecoderConfig(validate_header=False))


def test_truncated_price_account_key(account_bytes) -> None:
    data = account_bytes.header(2, 20) + account_bytes.key(5)[:4]

    with pytest.raises(TooShortError) as excinfo:
        parse_product_data(data)

    assert excinfo.value.field == "price_account_key"
