"""Core exception classes."""

from typing import Any


class PythAccountsError(Exception):
    """Base exception for the package."""

    def __init__(
        self,
        message: str,
        error_code: str = "GENERAL_ERROR",
        details: dict[str, Any] | None = None,
    ):
        """Initialise the exception.

        Args:
            message: human readable message
            error_code: machine readable error code
            details: extra details
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class ConfigurationError(PythAccountsError):
    """Invalid configuration value."""

    def __init__(
        self,
        message: str,
        setting: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if setting:
            super_details["setting"] = setting
        super().__init__(message, "CONFIGURATION_ERROR", super_details)
        self.setting = setting
