"""Standardised error message templates."""

from typing import Any

from pythaccounts.core.exceptions.codes import ErrorCode


class ErrorMessageTemplate:
    """Error message template registry."""

    _templates: dict[ErrorCode, str] = {
        ErrorCode.GENERAL_ERROR: "An unknown error occurred",
        ErrorCode.CONFIGURATION_ERROR: "Invalid configuration: {details}",
        ErrorCode.TOO_SHORT: "Buffer too short: {field} needs {width} bytes at offset {offset}, buffer has {length}",
        ErrorCode.BAD_MAGIC: "Bad magic number 0x{magic:08x}, expected 0x{expected:08x}",
        ErrorCode.UNSUPPORTED_VERSION: "Unsupported account version {version}, supported: {supported}",
        ErrorCode.UNKNOWN_ACCOUNT_TYPE: "Unknown account type tag {account_type}",
        ErrorCode.ACCOUNT_TYPE_MISMATCH: "Account type {actual} cannot be decoded as {expected}",
        ErrorCode.MALFORMED_METADATA: "Product metadata {part} of {length} bytes at offset {offset} overruns used size {size}",
        ErrorCode.COMPONENT_COUNT_MISMATCH: "Decoded {decoded} price components, account declares {declared}",
        ErrorCode.INVALID_ENCODING: "Account data is not valid {encoding}: {reason}",
    }

    @classmethod
    def get_message(cls, error_code: ErrorCode, **kwargs: Any) -> str:
        """Render the standard message for ``error_code``.

        Args:
            error_code: error code
            **kwargs: template variables

        Returns:
            formatted message
        """
        template = cls._templates.get(error_code, cls._templates[ErrorCode.GENERAL_ERROR])
        try:
            return template.format(**kwargs)
        except (KeyError, ValueError):
            # Missing or mistyped template variables fall back to a generic message.
            return f"{cls._templates[ErrorCode.GENERAL_ERROR]} (error code: {error_code.value})"
