"""Tests for ordinal enumerations and their display names."""

from __future__ import annotations

import pytest

from pythaccounts.core.constants import ACCOUNT_TYPE_NAMES, PRICE_STATUS_NAMES, PRICE_TYPE_NAMES
from pythaccounts.core.models import AccountType, CorpAction, PriceStatus, PriceType


@pytest.mark.parametrize(
    ("enum", "names"),
    [(AccountType, ACCOUNT_TYPE_NAMES), (PriceStatus, PRICE_STATUS_NAMES), (PriceType, PRICE_TYPE_NAMES)],
)
def test_display_names_follow_ordinal_tables(enum, names) -> None:
    assert [enum.from_ordinal(index).display_name for index in range(len(names))] == list(names)


def test_known_display_names() -> None:
    assert AccountType.PRICE.display_name == "Price"
    assert PriceStatus.TRADING.display_name == "Trading"
    assert CorpAction.NO_CORP_ACT.display_name == "NoCorpAct"
    assert PriceType.TWAP.display_name == "TWAP"


@pytest.mark.parametrize("ordinal", [-3, 4, 255, 2**32 - 1])
def test_out_of_range_ordinals(ordinal: int) -> None:
    status = PriceStatus.from_ordinal(ordinal)

    assert status is PriceStatus.OUT_OF_RANGE
    assert status.display_name == "OutOfRange"


def test_corp_action_table_has_single_entry() -> None:
    assert CorpAction.from_ordinal(0) is CorpAction.NO_CORP_ACT
    assert CorpAction.from_ordinal(1) is CorpAction.OUT_OF_RANGE


@pytest.mark.parametrize("enum", [AccountType, PriceStatus, CorpAction, PriceType])
def test_from_ordinal_returns_calling_enum(enum) -> None:
    assert type(enum.from_ordinal(0)) is enum
    assert type(enum.from_ordinal(99)) is enum
