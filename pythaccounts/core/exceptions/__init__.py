"""Exception handling module."""

from pythaccounts.core.exceptions.base import ConfigurationError, PythAccountsError
from pythaccounts.core.exceptions.codes import ErrorCode
from pythaccounts.core.exceptions.decode import (
    AccountTypeMismatchError,
    BadMagicError,
    ComponentCountMismatchError,
    DecodeError,
    InvalidEncodingError,
    MalformedMetadataError,
    TooShortError,
    UnknownAccountTypeError,
    UnsupportedVersionError,
)
from pythaccounts.core.exceptions.messages import ErrorMessageTemplate

__all__ = [
    "PythAccountsError",
    "ConfigurationError",
    "DecodeError",
    "TooShortError",
    "BadMagicError",
    "UnsupportedVersionError",
    "UnknownAccountTypeError",
    "AccountTypeMismatchError",
    "MalformedMetadataError",
    "ComponentCountMismatchError",
    "InvalidEncodingError",
    "ErrorCode",
    "ErrorMessageTemplate",
]
