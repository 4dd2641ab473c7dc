"""ICS-24 host identifier validation.

Pure functions only.  Each validator returns the identifier unchanged
when it is well formed and raises :class:`InvalidInputError` otherwise.

Rules
-----
* Allowed characters: alphanumerics and ``. _ + - # [ ] < >``.
* Port ids: 2 to 128 characters.
* Channel ids: 8 to 64 characters.
* Chain ids: non-empty, no whitespace.
"""

from __future__ import annotations

import re

from ibc_xfer.exceptions import InvalidInputError

_VALID_CHARS = re.compile(r"^[a-zA-Z0-9._+\-#\[\]<>]+$")

PORT_ID_MIN_LEN: int = 2
PORT_ID_MAX_LEN: int = 128
CHANNEL_ID_MIN_LEN: int = 8
CHANNEL_ID_MAX_LEN: int = 64


def _validate_identifier(value: str, field: str, min_len: int, max_len: int) -> str:
    if not min_len <= len(value) <= max_len:
        raise InvalidInputError(
            f"invalid {field} '{value}': length must be between "
            f"{min_len} and {max_len} characters",
        )
    if _VALID_CHARS.match(value) is None:
        raise InvalidInputError(
            f"invalid {field} '{value}': contains characters outside "
            "[a-zA-Z0-9._+-#[]<>]",
        )
    return value


def validate_port_id(value: str) -> str:
    """Validate a port identifier (e.g. ``transfer``)."""
    return _validate_identifier(value, "port id", PORT_ID_MIN_LEN, PORT_ID_MAX_LEN)


def validate_channel_id(value: str) -> str:
    """Validate a channel identifier (e.g. ``channel-0``)."""
    return _validate_identifier(
        value, "channel id", CHANNEL_ID_MIN_LEN, CHANNEL_ID_MAX_LEN,
    )


def validate_chain_id(value: str) -> str:
    """Validate a chain identifier (e.g. ``cosmoshub-4``)."""
    if not value or any(ch.isspace() for ch in value):
        raise InvalidInputError(
            f"invalid chain id '{value}': must be non-empty and contain no whitespace",
        )
    return value
