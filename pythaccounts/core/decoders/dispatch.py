"""Select a decoder from the account type tag."""

from __future__ import annotations

from typing import Callable

from pythaccounts.core.codec.readers import Buffer
from pythaccounts.core.config.settings import DecoderConfig
from pythaccounts.core.decoders.header import read_header
from pythaccounts.core.decoders.mapping import parse_mapping_data
from pythaccounts.core.decoders.price import parse_price_data
from pythaccounts.core.decoders.product import parse_product_data
from pythaccounts.core.exceptions.decode import UnknownAccountTypeError
from pythaccounts.core.models import AccountRecord
from pythaccounts.core.models.enums import AccountType

DECODERS: dict[AccountType, Callable[..., AccountRecord]] = {
    AccountType.MAPPING: parse_mapping_data,
    AccountType.PRODUCT: parse_product_data,
    AccountType.PRICE: parse_price_data,
}


def get_decoder(account_type: AccountType | int) -> Callable[..., AccountRecord]:
    """Return the decoder for ``account_type``."""

    resolved = AccountType.from_ordinal(int(account_type))
    decoder = DECODERS.get(resolved)
    if decoder is None:
        raise UnknownAccountTypeError(int(account_type))
    return decoder


def parse_account(data: Buffer, config: DecoderConfig | None = None) -> AccountRecord:
    """Decode an account of any supported type, chosen by its header tag.

    The header is validated (unless disabled in ``config``) before the tag picks
    a decoder, so a bad magic or version is reported ahead of an unknown tag.
    """

    header = read_header(data, config)
    return get_decoder(header.account_type)(data, config)


__all__ = ["DECODERS", "get_decoder", "parse_account"]
