"""Pytest configuration and synthetic account fixtures for pythaccounts."""

from __future__ import annotations

import struct
from typing import Sequence

import pytest

from pythaccounts.core.constants import MAGIC, VERSION
from pythaccounts.core.logging import configure_logging

MAPPING = 1
PRODUCT = 2
PRICE = 3


class AccountBytes:
    """Builders producing account buffers in the on-chain layouts."""

    @staticmethod
    def key(seed: int) -> bytes:
        """Deterministic non-zero 32-byte identifier."""
        return bytes((seed + index) % 256 or 1 for index in range(32))

    @staticmethod
    def header(account_type: int, size: int, *, magic: int = MAGIC, version: int = VERSION) -> bytes:
        return struct.pack("<IIII", magic, version, account_type, size)

    @staticmethod
    def price_info(
        price: int = 0,
        confidence: int = 0,
        status: int = 1,
        corporate_action: int = 0,
        publish_slot: int = 0,
    ) -> bytes:
        return struct.pack("<qQIIQ", price, confidence, status, corporate_action, publish_slot)

    def mapping(
        self,
        keys: Sequence[bytes],
        *,
        next_key: bytes | None = None,
        count: int | None = None,
        trailing: bytes = b"",
        **header_kwargs: int,
    ) -> bytes:
        body = struct.pack("<II", len(keys) if count is None else count, 0)
        body += next_key or bytes(32)
        body += b"".join(keys)
        size = 16 + len(body)
        return self.header(MAPPING, size, **header_kwargs) + body + trailing

    @staticmethod
    def attributes(pairs: Sequence[tuple[str, str]]) -> bytes:
        out = bytearray()
        for key, value in pairs:
            encoded_key = key.encode("utf-8")
            encoded_value = value.encode("utf-8")
            out += bytes([len(encoded_key)]) + encoded_key + bytes([len(encoded_value)]) + encoded_value
        return bytes(out)

    def product(
        self,
        price_key: bytes,
        body: bytes = b"",
        *,
        padding: int = 0,
        size: int | None = None,
        **header_kwargs: int,
    ) -> bytes:
        used = 48 + len(body) if size is None else size
        return self.header(PRODUCT, used, **header_kwargs) + price_key + body + bytes(padding)

    def price(
        self,
        *,
        exponent: int = -2,
        price_type: int = 1,
        num_components: int | None = None,
        current_slot: int = 100,
        valid_slot: int = 99,
        product_key: bytes | None = None,
        next_key: bytes | None = None,
        updater_key: bytes | None = None,
        aggregate: bytes | None = None,
        components: Sequence[tuple[bytes, bytes, bytes]] = (),
        terminator: bool = True,
        trailing: bytes = b"",
        **header_kwargs: int,
    ) -> bytes:
        declared = len(components) if num_components is None else num_components
        body = struct.pack("<IiIIQQ", price_type, exponent, declared, 0, current_slot, valid_slot)
        body += product_key or self.key(10)
        body += next_key or bytes(32)
        body += updater_key or self.key(20)
        body += aggregate or self.price_info()
        for publisher, component_aggregate, latest in components:
            body += publisher + component_aggregate + latest
        if terminator:
            body += bytes(32)
        body += trailing
        size = 16 + len(body)
        return self.header(PRICE, size, **header_kwargs) + body


@pytest.fixture
def account_bytes() -> AccountBytes:
    """Builder for synthetic account buffers."""
    return AccountBytes()


@pytest.fixture(autouse=True)
def reset_logging():
    """Restore the default stderr sink after tests that reconfigure logging."""
    yield
    configure_logging()
