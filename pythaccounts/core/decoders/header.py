"""Common account header decoding and validation."""

from __future__ import annotations

from pythaccounts.core.codec.readers import Buffer, read_u32
from pythaccounts.core.config.settings import DecoderConfig
from pythaccounts.core.constants import (
    HEADER_MAGIC_OFFSET,
    HEADER_SIZE_OFFSET,
    HEADER_TYPE_OFFSET,
    HEADER_VERSION_OFFSET,
    MAGIC,
)
from pythaccounts.core.decoders.base import resolve_config
from pythaccounts.core.exceptions.decode import (
    AccountTypeMismatchError,
    BadMagicError,
    TooShortError,
    UnknownAccountTypeError,
    UnsupportedVersionError,
)
from pythaccounts.core.models.base import AccountHeader
from pythaccounts.core.models.enums import AccountType

DECODABLE_TYPES = (AccountType.MAPPING, AccountType.PRODUCT, AccountType.PRICE)


def parse_header(data: Buffer) -> AccountHeader:
    """Read the four header fields without validating them."""

    return AccountHeader(
        magic=read_u32(data, HEADER_MAGIC_OFFSET, "magic"),
        version=read_u32(data, HEADER_VERSION_OFFSET, "version"),
        account_type=read_u32(data, HEADER_TYPE_OFFSET, "account_type"),
        size=read_u32(data, HEADER_SIZE_OFFSET, "size"),
    )


def validate_header(
    header: AccountHeader,
    data_length: int,
    config: DecoderConfig | None = None,
    expected: AccountType | None = None,
) -> None:
    """Check magic, version, type tag and declared size, in that order."""

    config = resolve_config(config)
    if header.magic != MAGIC:
        raise BadMagicError(header.magic, MAGIC)
    if header.version not in config.supported_versions:
        raise UnsupportedVersionError(header.version, config.supported_versions)
    account_type = header.type
    if account_type not in DECODABLE_TYPES:
        raise UnknownAccountTypeError(header.account_type)
    if expected is not None and account_type is not expected:
        raise AccountTypeMismatchError(account_type.display_name, expected.display_name)
    if header.size > data_length:
        raise TooShortError("size", 0, header.size, data_length)


def read_header(
    data: Buffer,
    config: DecoderConfig | None = None,
    expected: AccountType | None = None,
) -> AccountHeader:
    """Parse the header and, unless disabled in ``config``, validate it."""

    config = resolve_config(config)
    header = parse_header(data)
    if config.validate_header:
        validate_header(header, len(data), config, expected)
    return header


__all__ = ["DECODABLE_TYPES", "parse_header", "read_header", "validate_header"]
