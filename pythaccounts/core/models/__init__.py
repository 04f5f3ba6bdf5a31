"""Data models module."""

from pythaccounts.core.models.accounts import MappingRecord, PriceComponent, PriceRecord, ProductRecord
from pythaccounts.core.models.base import AccountHeader, PriceInfo
from pythaccounts.core.models.enums import AccountType, CorpAction, PriceStatus, PriceType

AccountRecord = MappingRecord | ProductRecord | PriceRecord

__all__ = [
    "AccountHeader",
    "AccountRecord",
    "AccountType",
    "CorpAction",
    "MappingRecord",
    "PriceComponent",
    "PriceInfo",
    "PriceRecord",
    "PriceStatus",
    "PriceType",
    "ProductRecord",
]
