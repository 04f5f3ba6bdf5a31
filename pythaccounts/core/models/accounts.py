"""Decoded oracle account records."""

from __future__ import annotations

from pydantic import Field, field_serializer
from solders.pubkey import Pubkey

from .base import AccountFields, FrozenModel, PriceInfo, render_key
from .enums import CorpAction, PriceStatus, PriceType


class MappingRecord(AccountFields):
    """Directory account listing product accounts in publication order."""

    product_count: int
    next_mapping_account: Pubkey | None = None
    product_account_keys: list[Pubkey] = Field(default_factory=list)

    @field_serializer("next_mapping_account", "product_account_keys", when_used="json")
    def serialize_keys(self, value: Pubkey | list[Pubkey] | None) -> str | list[str] | None:
        return render_key(value)


class ProductRecord(AccountFields):
    """Product account: price account link plus open-ended string metadata."""

    price_account_key: Pubkey
    metadata: dict[str, str] = Field(default_factory=dict)

    @field_serializer("price_account_key", when_used="json")
    def serialize_key(self, value: Pubkey) -> str:
        return str(value)

    @property
    def symbol(self) -> str | None:
        return self.metadata.get("symbol")

    @property
    def asset_type(self) -> str | None:
        return self.metadata.get("asset_type")

    @property
    def quote_currency(self) -> str | None:
        return self.metadata.get("quote_currency")

    @property
    def tenor(self) -> str | None:
        return self.metadata.get("tenor")


class PriceComponent(FrozenModel):
    """One publisher's contribution to a price account."""

    publisher: Pubkey
    aggregate: PriceInfo
    latest: PriceInfo

    @field_serializer("publisher", when_used="json")
    def serialize_publisher(self, value: Pubkey) -> str:
        return str(value)


class PriceRecord(AccountFields):
    """Price account with its aggregate and per-publisher components.

    The aggregate price fields are exposed directly on the record as well as
    through ``aggregate``.
    """

    price_type: PriceType
    price_type_code: int
    exponent: int
    num_component_prices: int
    current_slot: int
    valid_slot: int
    product_account_key: Pubkey
    next_price_account_key: Pubkey | None = None
    aggregate_price_updater_account_key: Pubkey
    aggregate: PriceInfo
    price_components: list[PriceComponent] = Field(default_factory=list)

    @field_serializer(
        "product_account_key",
        "next_price_account_key",
        "aggregate_price_updater_account_key",
        when_used="json",
    )
    def serialize_keys(self, value: Pubkey | None) -> str | None:
        return render_key(value)

    @field_serializer("price_type", when_used="json")
    def serialize_price_type(self, value: PriceType) -> str:
        return value.display_name

    @property
    def price_component(self) -> int:
        return self.aggregate.price_component

    @property
    def price(self) -> float:
        return self.aggregate.price

    @property
    def confidence_component(self) -> int:
        return self.aggregate.confidence_component

    @property
    def confidence(self) -> float:
        return self.aggregate.confidence

    @property
    def status(self) -> PriceStatus:
        return self.aggregate.status

    @property
    def corporate_action(self) -> CorpAction:
        return self.aggregate.corporate_action

    @property
    def publish_slot(self) -> int:
        return self.aggregate.publish_slot


__all__ = ["MappingRecord", "ProductRecord", "PriceComponent", "PriceRecord"]
