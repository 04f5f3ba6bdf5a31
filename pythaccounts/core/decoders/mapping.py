"""Mapping (product directory) account decoder."""

from __future__ import annotations

from pythaccounts.core.codec.keys import read_optional_pubkey, read_pubkey
from pythaccounts.core.codec.readers import Buffer, ensure_available, read_u32
from pythaccounts.core.config.settings import DecoderConfig
from pythaccounts.core.constants import (
    MAPPING_COUNT_OFFSET,
    MAPPING_NEXT_OFFSET,
    MAPPING_PRODUCTS_OFFSET,
    PUBKEY_SIZE,
)
from pythaccounts.core.decoders.base import logged_decoder
from pythaccounts.core.decoders.header import read_header
from pythaccounts.core.models.accounts import MappingRecord
from pythaccounts.core.models.enums import AccountType


@logged_decoder("mapping")
def parse_mapping_data(data: Buffer, config: DecoderConfig | None = None) -> MappingRecord:
    """Decode a mapping account.

    Exactly ``product_count`` identifiers are read from offset 56, whatever
    the remaining buffer length; a buffer too short for them raises
    :class:`~pythaccounts.core.exceptions.TooShortError`.
    """

    header = read_header(data, config, AccountType.MAPPING)
    product_count = read_u32(data, MAPPING_COUNT_OFFSET, "product_count")
    next_mapping_account = read_optional_pubkey(data, MAPPING_NEXT_OFFSET, "next_mapping_account")

    ensure_available(data, MAPPING_PRODUCTS_OFFSET, product_count * PUBKEY_SIZE, "product_account_keys")
    product_account_keys = [
        read_pubkey(data, MAPPING_PRODUCTS_OFFSET + index * PUBKEY_SIZE, "product_account_key")
        for index in range(product_count)
    ]

    return MappingRecord(
        magic=header.magic,
        version=header.version,
        account_type=header.account_type,
        size=header.size,
        product_count=product_count,
        next_mapping_account=next_mapping_account,
        product_account_keys=product_account_keys,
    )


__all__ = ["parse_mapping_data"]
