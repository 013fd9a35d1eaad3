"""Opaque page-token codec.

A token is the URL-safe base64 encoding of the decimal offset into the
filtered folder list. Tokens carry no integrity protection: any well-formed
offset is accepted and simply maps to whatever slice it points at.
"""

from __future__ import annotations

import base64
import binascii

_URLSAFE_ALTCHARS = b"-_"


class InvalidTokenError(ValueError):
    """Raised when a page token cannot be decoded to a non-negative offset."""

    def __init__(self, token: str, reason: str) -> None:
        super().__init__(f"invalid token: {reason}")
        self.token = token
        self.reason = reason


def encode_token(offset: int) -> str:
    """Encode a non-negative offset as an opaque page token.

    Raises:
        ValueError: If offset is negative.
    """
    if offset < 0:
        raise ValueError(f"offset must be non-negative, got {offset}")
    return base64.urlsafe_b64encode(str(offset).encode("ascii")).decode("ascii")


def decode_token(token: str) -> int:
    """Decode a page token produced by :func:`encode_token`.

    Args:
        token: Non-empty token string.

    Returns:
        The offset the token encodes.

    Raises:
        InvalidTokenError: If the token is not valid base64, or the payload is
            not a plain decimal non-negative integer.
    """
    try:
        raw = base64.b64decode(token, altchars=_URLSAFE_ALTCHARS, validate=True)
        payload = raw.decode("ascii")
    except (binascii.Error, ValueError) as exc:
        # ValueError also covers UnicodeDecodeError and non-ASCII str input.
        raise InvalidTokenError(token, "not a base64 encoded offset") from exc

    # str.isdigit() alone accepts non-ASCII digits; int() accepts signs,
    # whitespace and underscores.
    if not (payload.isascii() and payload.isdigit()):
        raise InvalidTokenError(token, "payload is not a non-negative integer")
    try:
        return int(payload)
    except ValueError as exc:
        # Digit strings past sys.get_int_max_str_digits() are refused by int().
        raise InvalidTokenError(token, "offset is too large") from exc
