"""Turn account data as returned by ledger RPC calls into raw bytes."""

from __future__ import annotations

import base64
import binascii

from pythaccounts.core.exceptions.decode import InvalidEncodingError

ENCODINGS = ("raw", "base64", "hex")


def decode_account_data(encoded: str | bytes, encoding: str = "base64") -> bytes:
    """Decode ``encoded`` account data.

    ``raw`` passes bytes through unchanged. ``base64`` and ``hex`` accept either
    text or ASCII bytes; surrounding whitespace is ignored.
    """

    normalized = encoding.strip().lower()
    if normalized not in ENCODINGS:
        raise InvalidEncodingError(encoding, f"unsupported encoding, expected one of {', '.join(ENCODINGS)}")

    if normalized == "raw":
        if isinstance(encoded, str):
            raise InvalidEncodingError(encoding, "raw account data must be bytes")
        return bytes(encoded)

    text = encoded.decode("ascii", errors="replace") if isinstance(encoded, (bytes, bytearray)) else encoded
    text = "".join(text.split())
    try:
        if normalized == "base64":
            return base64.b64decode(text, validate=True)
        return bytes.fromhex(text)
    except (binascii.Error, ValueError) as exc:
        raise InvalidEncodingError(encoding, str(exc)) from exc


__all__ = ["ENCODINGS", "decode_account_data"]
