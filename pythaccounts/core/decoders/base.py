"""Helpers shared by the account decoders."""

from __future__ import annotations

import functools
from typing import Any, Callable, TypeVar

from pythaccounts.core.config.settings import DecoderConfig
from pythaccounts.core.exceptions.decode import DecodeError
from pythaccounts.core.logging import current_trace_id, log_context, logger

DEFAULT_CONFIG = DecoderConfig()

F = TypeVar("F", bound=Callable[..., Any])


def resolve_config(config: DecoderConfig | None) -> DecoderConfig:
    return config if config is not None else DEFAULT_CONFIG


def logged_decoder(kind: str) -> Callable[[F], F]:
    """Log the outcome of a decoder call under the ``account_type`` context key."""

    def decorator(func: F) -> F:
        @functools.wraps(func)
        def wrapper(data: Any, *args: Any, **kwargs: Any) -> Any:
            with log_context(trace_id=current_trace_id(), account_type=kind):
                try:
                    record = func(data, *args, **kwargs)
                except DecodeError as error:
                    logger.bind(error_code=error.error_code).debug(
                        "Failed to decode {} account: {}", kind, error.message, offset=error.offset
                    )
                    raise
                logger.debug("Decoded {} account", kind, length=len(data))
                return record

        return wrapper  # type: ignore[return-value]

    return decorator


__all__ = ["DEFAULT_CONFIG", "logged_decoder", "resolve_config"]
