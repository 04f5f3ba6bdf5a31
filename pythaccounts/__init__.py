"""pythaccounts - decoders for price-oracle mapping, product and price accounts.

Turns raw account bytes fetched from the ledger into typed records::

    >>> import pythaccounts
    >>> record = pythaccounts.parse_account(account_bytes)
    >>> record.price, record.confidence
"""

from pythaccounts.core.codec import decode_account_data, pubkey_or_none
from pythaccounts.core.config import DecoderConfig
from pythaccounts.core.constants import (
    ACCOUNT_TYPE_NAMES,
    CORP_ACTION_NAMES,
    MAGIC,
    PRICE_STATUS_NAMES,
    PRICE_TYPE_NAMES,
    VERSION,
    VERSION_1,
)
from pythaccounts.core.decoders import (
    parse_account,
    parse_header,
    parse_mapping_data,
    parse_price_data,
    parse_price_info,
    parse_product_data,
)
from pythaccounts.core.exceptions import (
    AccountTypeMismatchError,
    BadMagicError,
    ComponentCountMismatchError,
    DecodeError,
    InvalidEncodingError,
    MalformedMetadataError,
    PythAccountsError,
    TooShortError,
    UnknownAccountTypeError,
    UnsupportedVersionError,
)
from pythaccounts.core.models import (
    AccountHeader,
    AccountType,
    CorpAction,
    MappingRecord,
    PriceComponent,
    PriceInfo,
    PriceRecord,
    PriceStatus,
    PriceType,
    ProductRecord,
)

__version__ = "0.1.0"

__all__ = [
    "MAGIC",
    "VERSION",
    "VERSION_1",
    "ACCOUNT_TYPE_NAMES",
    "PRICE_STATUS_NAMES",
    "CORP_ACTION_NAMES",
    "PRICE_TYPE_NAMES",
    "DecoderConfig",
    "AccountHeader",
    "AccountType",
    "CorpAction",
    "MappingRecord",
    "PriceComponent",
    "PriceInfo",
    "PriceRecord",
    "PriceStatus",
    "PriceType",
    "ProductRecord",
    "PythAccountsError",
    "DecodeError",
    "TooShortError",
    "BadMagicError",
    "UnsupportedVersionError",
    "UnknownAccountTypeError",
    "AccountTypeMismatchError",
    "MalformedMetadataError",
    "ComponentCountMismatchError",
    "InvalidEncodingError",
    "decode_account_data",
    "pubkey_or_none",
    "parse_account",
    "parse_header",
    "parse_mapping_data",
    "parse_price_data",
    "parse_price_info",
    "parse_product_data",
]
