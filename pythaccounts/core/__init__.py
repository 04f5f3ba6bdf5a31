"""Core decoding modules."""

from pythaccounts.core.config.settings import ConfigManager, DecoderConfig, PythAccountsConfig
from pythaccounts.core.decoders import (
    parse_account,
    parse_header,
    parse_mapping_data,
    parse_price_data,
    parse_price_info,
    parse_product_data,
)
from pythaccounts.core.models import AccountType, CorpAction, PriceStatus, PriceType

__all__ = [
    "ConfigManager",
    "DecoderConfig",
    "PythAccountsConfig",
    "AccountType",
    "CorpAction",
    "PriceStatus",
    "PriceType",
    "parse_account",
    "parse_header",
    "parse_mapping_data",
    "parse_price_data",
    "parse_price_info",
    "parse_product_data",
]
