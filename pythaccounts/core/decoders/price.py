"""Price account decoder."""

from __future__ import annotations

from pythaccounts.core.codec.keys import read_optional_pubkey, read_pubkey
from pythaccounts.core.codec.readers import Buffer, read_i32, read_u32, read_u64
from pythaccounts.core.config.settings import DecoderConfig
from pythaccounts.core.constants import (
    PRICE_AGGREGATE_OFFSET,
    PRICE_AGGREGATE_UPDATER_OFFSET,
    PRICE_COMPONENTS_OFFSET,
    PRICE_CURRENT_SLOT_OFFSET,
    PRICE_EXPONENT_OFFSET,
    PRICE_INFO_SIZE,
    PRICE_NEXT_ACCOUNT_OFFSET,
    PRICE_NUM_COMPONENTS_OFFSET,
    PRICE_PRODUCT_ACCOUNT_OFFSET,
    PRICE_TYPE_OFFSET,
    PRICE_VALID_SLOT_OFFSET,
    PUBKEY_SIZE,
)
from pythaccounts.core.decoders.base import logged_decoder, resolve_config
from pythaccounts.core.decoders.header import read_header
from pythaccounts.core.decoders.price_info import parse_price_info
from pythaccounts.core.exceptions.decode import ComponentCountMismatchError
from pythaccounts.core.logging import logger
from pythaccounts.core.models.accounts import PriceComponent, PriceRecord
from pythaccounts.core.models.enums import AccountType, PriceType


def parse_price_components(data: Buffer, exponent: int, offset: int = PRICE_COMPONENTS_OFFSET) -> list[PriceComponent]:
    """Read publisher components until an all-zero publisher or the buffer end."""

    components: list[PriceComponent] = []
    while offset < len(data):
        publisher = read_optional_pubkey(data, offset, "publisher")
        if publisher is None:
            break
        offset += PUBKEY_SIZE
        aggregate = parse_price_info(data, exponent, offset)
        offset += PRICE_INFO_SIZE
        latest = parse_price_info(data, exponent, offset)
        offset += PRICE_INFO_SIZE
        components.append(PriceComponent(publisher=publisher, aggregate=aggregate, latest=latest))
    return components


def _check_component_count(decoded: int, declared: int, policy: str) -> None:
    if decoded == declared or policy == "ignore":
        return
    if policy == "strict":
        raise ComponentCountMismatchError(decoded, declared, PRICE_NUM_COMPONENTS_OFFSET)
    logger.warning(
        "Price account declares {} components, decoded {}",
        declared,
        decoded,
        declared=declared,
        decoded=decoded,
    )


@logged_decoder("price")
def parse_price_data(data: Buffer, config: DecoderConfig | None = None) -> PriceRecord:
    """Decode a price account.

    The component list ends at the first all-zero publisher, even if bytes
    remain. The declared component count is checked against it according to
    ``config.component_count_policy``.
    """

    config = resolve_config(config)
    header = read_header(data, config, AccountType.PRICE)
    price_type_code = read_u32(data, PRICE_TYPE_OFFSET, "price_type")
    exponent = read_i32(data, PRICE_EXPONENT_OFFSET, "exponent")
    num_component_prices = read_u32(data, PRICE_NUM_COMPONENTS_OFFSET, "num_component_prices")
    current_slot = read_u64(data, PRICE_CURRENT_SLOT_OFFSET, "current_slot")
    valid_slot = read_u64(data, PRICE_VALID_SLOT_OFFSET, "valid_slot")
    product_account_key = read_pubkey(data, PRICE_PRODUCT_ACCOUNT_OFFSET, "product_account_key")
    next_price_account_key = read_optional_pubkey(data, PRICE_NEXT_ACCOUNT_OFFSET, "next_price_account_key")
    aggregate_price_updater_account_key = read_pubkey(
        data, PRICE_AGGREGATE_UPDATER_OFFSET, "aggregate_price_updater_account_key"
    )
    aggregate = parse_price_info(data, exponent, PRICE_AGGREGATE_OFFSET)

    price_components = parse_price_components(data, exponent)
    _check_component_count(len(price_components), num_component_prices, config.component_count_policy)

    return PriceRecord(
        magic=header.magic,
        version=header.version,
        account_type=header.account_type,
        size=header.size,
        price_type=PriceType.from_ordinal(price_type_code),
        price_type_code=price_type_code,
        exponent=exponent,
        num_component_prices=num_component_prices,
        current_slot=current_slot,
        valid_slot=valid_slot,
        product_account_key=product_account_key,
        next_price_account_key=next_price_account_key,
        aggregate_price_updater_account_key=aggregate_price_updater_account_key,
        aggregate=aggregate,
        price_components=price_components,
    )


__all__ = ["parse_price_components", "parse_price_data"]
