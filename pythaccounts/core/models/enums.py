"""Ordinal enumerations used by account fields."""

from __future__ import annotations

from enum import IntEnum
from typing import Self

from pythaccounts.core.constants import (
    ACCOUNT_TYPE_NAMES,
    CORP_ACTION_NAMES,
    OUT_OF_RANGE_NAME,
    PRICE_STATUS_NAMES,
    PRICE_TYPE_NAMES,
)


class _OrdinalEnum(IntEnum):
    """Closed ordinal table; subclasses define ``OUT_OF_RANGE = -1``."""

    @classmethod
    def from_ordinal(cls, ordinal: int) -> Self:
        """Map a raw ordinal to a member, ``OUT_OF_RANGE`` when not in the table."""

        if ordinal < 0:
            return cls(-1)
        try:
            return cls(ordinal)
        except ValueError:
            return cls(-1)

    @property
    def display_name(self) -> str:
        if self.value < 0:
            return OUT_OF_RANGE_NAME
        return _DISPLAY_NAMES[type(self)][self.value]


class AccountType(_OrdinalEnum):
    """Account type tag stored in the common header."""

    OUT_OF_RANGE = -1
    UNKNOWN = 0
    MAPPING = 1
    PRODUCT = 2
    PRICE = 3


class PriceStatus(_OrdinalEnum):
    """Trading status of a price."""

    OUT_OF_RANGE = -1
    UNKNOWN = 0
    TRADING = 1
    HALTED = 2
    AUCTION = 3


class CorpAction(_OrdinalEnum):
    """Corporate action in effect for a price."""

    OUT_OF_RANGE = -1
    NO_CORP_ACT = 0


class PriceType(_OrdinalEnum):
    """Kind of value a price account publishes."""

    OUT_OF_RANGE = -1
    UNKNOWN = 0
    PRICE = 1
    TWAP = 2
    VOLATILITY = 3


_DISPLAY_NAMES: dict[type[_OrdinalEnum], tuple[str, ...]] = {
    AccountType: ACCOUNT_TYPE_NAMES,
    PriceStatus: PRICE_STATUS_NAMES,
    CorpAction: CORP_ACTION_NAMES,
    PriceType: PRICE_TYPE_NAMES,
}


__all__ = ["AccountType", "PriceStatus", "CorpAction", "PriceType"]
