"""Format constants and account layout offsets."""

from __future__ import annotations

MAGIC = 0xA1B2C3D4
VERSION_1 = 1
VERSION = VERSION_1
SUPPORTED_VERSIONS: tuple[int, ...] = (VERSION_1,)

# Ordinal lookup tables published for interpreting raw fields.
ACCOUNT_TYPE_NAMES: tuple[str, ...] = ("Unknown", "Mapping", "Product", "Price")
PRICE_STATUS_NAMES: tuple[str, ...] = ("Unknown", "Trading", "Halted", "Auction")
CORP_ACTION_NAMES: tuple[str, ...] = ("NoCorpAct",)
PRICE_TYPE_NAMES: tuple[str, ...] = ("Unknown", "Price", "TWAP", "Volatility")
OUT_OF_RANGE_NAME = "OutOfRange"

PUBKEY_SIZE = 32
PRICE_INFO_SIZE = 32
PRICE_COMPONENT_SIZE = PUBKEY_SIZE + 2 * PRICE_INFO_SIZE

# Common header
HEADER_MAGIC_OFFSET = 0
HEADER_VERSION_OFFSET = 4
HEADER_TYPE_OFFSET = 8
HEADER_SIZE_OFFSET = 12
HEADER_SIZE = 16

# Mapping account
MAPPING_COUNT_OFFSET = 16
MAPPING_NEXT_OFFSET = 24
MAPPING_PRODUCTS_OFFSET = 56

# Product account
PRODUCT_PRICE_ACCOUNT_OFFSET = 16
PRODUCT_ATTRIBUTES_OFFSET = 48

# Price account
PRICE_TYPE_OFFSET = 16
PRICE_EXPONENT_OFFSET = 20
PRICE_NUM_COMPONENTS_OFFSET = 24
PRICE_CURRENT_SLOT_OFFSET = 32
PRICE_VALID_SLOT_OFFSET = 40
PRICE_PRODUCT_ACCOUNT_OFFSET = 48
PRICE_NEXT_ACCOUNT_OFFSET = 80
PRICE_AGGREGATE_UPDATER_OFFSET = 112
PRICE_AGGREGATE_OFFSET = 144
PRICE_COMPONENTS_OFFSET = 176

# Price info tuple, relative to its own start
PRICE_INFO_PRICE_OFFSET = 0
PRICE_INFO_CONFIDENCE_OFFSET = 8
PRICE_INFO_STATUS_OFFSET = 16
PRICE_INFO_CORP_ACTION_OFFSET = 20
PRICE_INFO_PUBLISH_SLOT_OFFSET = 24


__all__ = [name for name in dir() if name.isupper()]
