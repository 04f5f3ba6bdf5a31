"""Decoding error hierarchy."""

from __future__ import annotations

from typing import Any, Mapping

from pythaccounts.core.exceptions.base import PythAccountsError
from pythaccounts.core.exceptions.codes import ErrorCode
from pythaccounts.core.exceptions.messages import ErrorMessageTemplate


class DecodeError(PythAccountsError):
    """Base class for account decoding failures, carrying the failing offset."""

    code: ErrorCode = ErrorCode.GENERAL_ERROR

    def __init__(
        self,
        message: str | None = None,
        *,
        offset: int | None = None,
        context: Mapping[str, Any] | None = None,
    ) -> None:
        payload = dict(context or {})
        if message is None:
            message = ErrorMessageTemplate.get_message(self.code, offset=offset, **payload)
        details = {**payload, "offset": offset}
        super().__init__(message, self.code.value, details)
        self.offset = offset
        self.context = payload

    def to_payload(self) -> dict[str, Any]:
        """Return a serializable payload representing the error."""

        return {
            "code": self.code.value,
            "message": self.message,
            "offset": self.offset,
            "context": dict(self.context),
        }


class TooShortError(DecodeError):
    """A field read would run past the end of the buffer."""

    code = ErrorCode.TOO_SHORT

    def __init__(self, field: str, offset: int, width: int, length: int) -> None:
        super().__init__(offset=offset, context={"field": field, "width": width, "length": length})
        self.field = field
        self.width = width
        self.length = length


class BadMagicError(DecodeError):
    """Header magic number does not identify this format family."""

    code = ErrorCode.BAD_MAGIC

    def __init__(self, magic: int, expected: int) -> None:
        super().__init__(offset=0, context={"magic": magic, "expected": expected})
        self.magic = magic
        self.expected = expected


class UnsupportedVersionError(DecodeError):
    """Header version is not one the decoders understand."""

    code = ErrorCode.UNSUPPORTED_VERSION

    def __init__(self, version: int, supported: tuple[int, ...]) -> None:
        super().__init__(offset=4, context={"version": version, "supported": list(supported)})
        self.version = version
        self.supported = supported


class UnknownAccountTypeError(DecodeError):
    """Header type tag is not Mapping, Product or Price."""

    code = ErrorCode.UNKNOWN_ACCOUNT_TYPE

    def __init__(self, account_type: int) -> None:
        super().__init__(offset=8, context={"account_type": account_type})
        self.account_type = account_type


class AccountTypeMismatchError(DecodeError):
    """A known account type was handed to the decoder of another type."""

    code = ErrorCode.ACCOUNT_TYPE_MISMATCH

    def __init__(self, actual: str, expected: str) -> None:
        super().__init__(offset=8, context={"actual": actual, "expected": expected})
        self.actual = actual
        self.expected = expected


class MalformedMetadataError(DecodeError):
    """Product key/value length prefixes overrun the declared used size."""

    code = ErrorCode.MALFORMED_METADATA

    def __init__(self, part: str, offset: int, length: int, size: int) -> None:
        super().__init__(offset=offset, context={"part": part, "length": length, "size": size})
        self.part = part
        self.length = length
        self.size = size


class ComponentCountMismatchError(DecodeError):
    """Sentinel-terminated component list disagrees with the declared count."""

    code = ErrorCode.COMPONENT_COUNT_MISMATCH

    def __init__(self, decoded: int, declared: int, offset: int) -> None:
        super().__init__(offset=offset, context={"decoded": decoded, "declared": declared})
        self.decoded = decoded
        self.declared = declared


class InvalidEncodingError(DecodeError):
    """Textual account data could not be turned into bytes."""

    code = ErrorCode.INVALID_ENCODING

    def __init__(self, encoding: str, reason: str) -> None:
        super().__init__(context={"encoding": encoding, "reason": reason})
        self.encoding = encoding
        self.reason = reason
