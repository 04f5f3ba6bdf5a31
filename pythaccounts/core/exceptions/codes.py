"""Standardised error codes."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes surfaced by decoding and configuration failures."""

    GENERAL_ERROR = "GENERAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # Decoding
    TOO_SHORT = "TOO_SHORT"
    BAD_MAGIC = "BAD_MAGIC"
    UNSUPPORTED_VERSION = "UNSUPPORTED_VERSION"
    UNKNOWN_ACCOUNT_TYPE = "UNKNOWN_ACCOUNT_TYPE"
    ACCOUNT_TYPE_MISMATCH = "ACCOUNT_TYPE_MISMATCH"
    MALFORMED_METADATA = "MALFORMED_METADATA"
    COMPONENT_COUNT_MISMATCH = "COMPONENT_COUNT_MISMATCH"
    INVALID_ENCODING = "INVALID_ENCODING"
