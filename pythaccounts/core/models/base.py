"""Base account models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, field_serializer
from solders.pubkey import Pubkey

from .enums import AccountType, CorpAction, PriceStatus


def render_key(value: Any) -> Any:
    """Render identifiers (or containers of them) as base58 strings."""
    if value is None:
        return None
    if isinstance(value, Pubkey):
        return str(value)
    if isinstance(value, (list, tuple)):
        return [render_key(item) for item in value]
    return value


class FrozenModel(BaseModel):
    """Immutable model allowing identifier fields."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON compatible dictionary."""
        return self.model_dump(mode="json")


class AccountFields(FrozenModel):
    """Fields of the header shared by every account layout."""

    magic: int
    version: int
    account_type: int
    size: int

    @property
    def type(self) -> AccountType:
        return AccountType.from_ordinal(self.account_type)

    @property
    def header(self) -> AccountHeader:
        return AccountHeader(
            magic=self.magic,
            version=self.version,
            account_type=self.account_type,
            size=self.size,
        )


class AccountHeader(AccountFields):
    """The 16-byte header common to all oracle accounts."""


class PriceInfo(FrozenModel):
    """One price/confidence observation with its scaled values."""

    price_component: int
    price: float
    confidence_component: int
    confidence: float
    status: PriceStatus
    status_code: int
    corporate_action: CorpAction
    corporate_action_code: int
    publish_slot: int

    @field_serializer("status", "corporate_action", when_used="json")
    def serialize_ordinal(self, value: PriceStatus | CorpAction) -> str:
        """Serialize ordinal enums by display name."""
        return value.display_name
