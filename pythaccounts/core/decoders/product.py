"""Product account decoder."""

from __future__ import annotations

from pythaccounts.core.codec.keys import read_pubkey
from pythaccounts.core.codec.readers import Buffer, read_bytes, read_u8
from pythaccounts.core.config.settings import DecoderConfig
from pythaccounts.core.constants import PRODUCT_ATTRIBUTES_OFFSET, PRODUCT_PRICE_ACCOUNT_OFFSET
from pythaccounts.core.decoders.base import logged_decoder, resolve_config
from pythaccounts.core.decoders.header import read_header
from pythaccounts.core.exceptions.decode import MalformedMetadataError
from pythaccounts.core.models.accounts import ProductRecord
from pythaccounts.core.models.enums import AccountType


def parse_product_metadata(data: Buffer, size: int, encoding: str = "utf-8") -> dict[str, str]:
    """Read length-prefixed key/value strings from offset 48 up to ``size``.

    A zero key length is a one-byte padding slot. Duplicate keys keep their
    first position and take the last value.
    """

    metadata: dict[str, str] = {}
    offset = PRODUCT_ATTRIBUTES_OFFSET
    while offset < size:
        key_length = read_u8(data, offset, "key_length")
        offset += 1
        if not key_length:
            continue
        if offset + key_length > size:
            raise MalformedMetadataError("key", offset, key_length, size)
        key = read_bytes(data, offset, key_length, "key").decode(encoding, errors="replace")
        offset += key_length

        if offset >= size:
            raise MalformedMetadataError("value length", offset, 1, size)
        value_length = read_u8(data, offset, "value_length")
        offset += 1
        if offset + value_length > size:
            raise MalformedMetadataError("value", offset, value_length, size)
        value = read_bytes(data, offset, value_length, "value").decode(encoding, errors="replace")
        offset += value_length

        metadata[key] = value
    return metadata


@logged_decoder("product")
def parse_product_data(data: Buffer, config: DecoderConfig | None = None) -> ProductRecord:
    """Decode a product account."""

    config = resolve_config(config)
    header = read_header(data, config, AccountType.PRODUCT)
    price_account_key = read_pubkey(data, PRODUCT_PRICE_ACCOUNT_OFFSET, "price_account_key")
    metadata = parse_product_metadata(data, header.size, config.text_encoding)

    return ProductRecord(
        magic=header.magic,
        version=header.version,
        account_type=header.account_type,
        size=header.size,
        price_account_key=price_account_key,
        metadata=metadata,
    )


__all__ = ["parse_product_data", "parse_product_metadata"]
