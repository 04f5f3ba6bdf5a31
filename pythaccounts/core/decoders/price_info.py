"""Decoding of the 32-byte price/confidence tuple."""

from __future__ import annotations

import math

from pythaccounts.core.codec.readers import Buffer, ensure_available, read_i64, read_u32, read_u64
from pythaccounts.core.constants import (
    PRICE_INFO_CONFIDENCE_OFFSET,
    PRICE_INFO_CORP_ACTION_OFFSET,
    PRICE_INFO_PRICE_OFFSET,
    PRICE_INFO_PUBLISH_SLOT_OFFSET,
    PRICE_INFO_SIZE,
    PRICE_INFO_STATUS_OFFSET,
)
from pythaccounts.core.models.base import PriceInfo
from pythaccounts.core.models.enums import CorpAction, PriceStatus


def scale(mantissa: int, exponent: int) -> float:
    """Return ``mantissa * 10 ** exponent`` in double precision.

    A power of ten too large for a double becomes infinity, as in IEEE arithmetic.
    """

    try:
        factor = 10.0**exponent
    except OverflowError:
        factor = math.inf
    return float(mantissa) * factor


def parse_price_info(data: Buffer, exponent: int, offset: int = 0) -> PriceInfo:
    """Decode the price tuple starting at ``offset``."""

    ensure_available(data, offset, PRICE_INFO_SIZE, "price_info")
    price_component = read_i64(data, offset + PRICE_INFO_PRICE_OFFSET, "price")
    confidence_component = read_u64(data, offset + PRICE_INFO_CONFIDENCE_OFFSET, "confidence")
    status_code = read_u32(data, offset + PRICE_INFO_STATUS_OFFSET, "status")
    corporate_action_code = read_u32(data, offset + PRICE_INFO_CORP_ACTION_OFFSET, "corporate_action")
    publish_slot = read_u64(data, offset + PRICE_INFO_PUBLISH_SLOT_OFFSET, "publish_slot")
    return PriceInfo(
        price_component=price_component,
        price=scale(price_component, exponent),
        confidence_component=confidence_component,
        confidence=scale(confidence_component, exponent),
        status=PriceStatus.from_ordinal(status_code),
        status_code=status_code,
        corporate_action=CorpAction.from_ordinal(corporate_action_code),
        corporate_action_code=corporate_action_code,
        publish_slot=publish_slot,
    )


__all__ = ["parse_price_info", "scale"]
