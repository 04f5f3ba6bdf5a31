"""Account decoders."""

from pythaccounts.core.decoders.dispatch import DECODERS, get_decoder, parse_account
from pythaccounts.core.decoders.header import parse_header, read_header, validate_header
from pythaccounts.core.decoders.mapping import parse_mapping_data
from pythaccounts.core.decoders.price import parse_price_components, parse_price_data
from pythaccounts.core.decoders.price_info import parse_price_info, scale
from pythaccounts.core.decoders.product import parse_product_data, parse_product_metadata

__all__ = [
    "DECODERS",
    "get_decoder",
    "parse_account",
    "parse_header",
    "read_header",
    "validate_header",
    "parse_mapping_data",
    "parse_product_data",
    "parse_product_metadata",
    "parse_price_data",
    "parse_price_components",
    "parse_price_info",
    "scale",
]
