"""Option validation — raw request fields to :class:`TransferOptions`.

:func:`validate_options` is a pure function: it reads the configuration
but performs no I/O and never mutates its inputs.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import timedelta
from typing import cast

from ibc_xfer.config import Config
from ibc_xfer.core.identifiers import validate_chain_id, validate_channel_id, validate_port_id
from ibc_xfer.core.models import DEFAULT_DENOM, TransferOptions
from ibc_xfer.exceptions import InvalidInputError, MissingChainConfigError


@dataclass(frozen=True, slots=True)
class RawTransferArgs:
    """Unvalidated request fields as supplied by the caller.

    Required fields are typed optional so that a missing value can be
    reported as an input error instead of a ``TypeError``.
    """

    dst_chain_id: str | None = None
    src_chain_id: str | None = None
    src_port_id: str | None = None
    src_channel_id: str | None = None
    amount: int | str | None = None
    timeout_height_offset: int = 0
    timeout_seconds: int = 0
    receiver: str | None = None
    denom: str | None = None
    number_msgs: int | None = None
    key_name: str | None = None


_REQUIRED_FIELDS: tuple[str, ...] = (
    "dst_chain_id",
    "src_chain_id",
    "src_port_id",
    "src_channel_id",
    "amount",
)


def parse_amount(value: int | str) -> int:
    """Parse a non-negative, arbitrary-precision integer amount."""
    if isinstance(value, bool):
        raise InvalidInputError(f"invalid amount '{value}'")
    if isinstance(value, int):
        amount = value
    else:
        text = value.strip()
        if not (text.isascii() and text.isdigit()):
            raise InvalidInputError(
                f"invalid amount '{value}': expected a non-negative integer",
            )
        amount = int(text)
    if amount < 0:
        raise InvalidInputError(f"invalid amount '{value}': must not be negative")
    return amount


def _require_fields(raw: RawTransferArgs) -> tuple[str, str, str, str, int | str]:
    """Return the required fields in ``_REQUIRED_FIELDS`` order."""
    for name in _REQUIRED_FIELDS:
        if getattr(raw, name) is None:
            raise InvalidInputError(f"missing required field '{name}'")
    return (
        cast(str, raw.dst_chain_id),
        cast(str, raw.src_chain_id),
        cast(str, raw.src_port_id),
        cast(str, raw.src_channel_id),
        cast("int | str", raw.amount),
    )


def validate_options(raw: RawTransferArgs, config: Config) -> TransferOptions:
    """Build a :class:`TransferOptions` from ``raw`` and ``config``.

    Raises
    ------
    InvalidInputError
        A required field is missing, an identifier is malformed, a
        numeric field is negative, or ``number_msgs`` is zero.
    MissingChainConfigError
        The source or destination chain is not configured.
    """
    raw_dst_chain, raw_src_chain, raw_port, raw_channel, raw_amount = _require_fields(raw)

    src_chain_id = validate_chain_id(raw_src_chain)
    dst_chain_id = validate_chain_id(raw_dst_chain)

    if config.find_chain(src_chain_id) is None:
        raise MissingChainConfigError(src_chain_id, side="source")
    if config.find_chain(dst_chain_id) is None:
        raise MissingChainConfigError(dst_chain_id, side="destination")

    port_id = validate_port_id(raw_port)
    channel_id = validate_channel_id(raw_channel)
    amount = parse_amount(raw_amount)

    denom = DEFAULT_DENOM if raw.denom is None else raw.denom
    if not denom:
        raise InvalidInputError("denom must not be empty")

    number_msgs = 1 if raw.number_msgs is None else raw.number_msgs
    if number_msgs <= 0:
        raise InvalidInputError("number of messages should be greater than zero")

    if raw.timeout_height_offset < 0:
        raise InvalidInputError("timeout height offset must not be negative")
    if raw.timeout_seconds < 0:
        raise InvalidInputError("timeout seconds must not be negative")

    return TransferOptions(
        packet_src_port_id=port_id,
        packet_src_channel_id=channel_id,
        amount=amount,
        denom=denom,
        receiver=raw.receiver,
        timeout_height_offset=raw.timeout_height_offset,
        timeout_duration=timedelta(seconds=raw.timeout_seconds),
        number_msgs=number_msgs,
    )
