"""Domain models for ibc-xfer.

All models are **frozen** dataclasses — immutable value objects with no
behaviour beyond data access and display.  Chain snapshots
(:class:`ChannelEnd`, :class:`ConnectionEnd`, :class:`ClientState`) are
fetched per invocation and never cached.
"""

from __future__ import annotations

import enum
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Any

DEFAULT_DENOM: str = "samoleans"
"""Denomination used when the caller does not supply one."""


# ---------------------------------------------------------------------------
# Heights
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True, order=True)
class Height:
    """A block height qualified by its revision (epoch) number."""

    revision_number: int
    revision_height: int

    def __str__(self) -> str:
        return f"{self.revision_number}-{self.revision_height}"


# ---------------------------------------------------------------------------
# Channel / connection state enums
# ---------------------------------------------------------------------------

class ChannelState(enum.Enum):
    """Lifecycle state of a channel end."""

    UNINITIALIZED = "Uninitialized"
    INIT = "Init"
    TRY_OPEN = "TryOpen"
    OPEN = "Open"
    CLOSED = "Closed"

    def __str__(self) -> str:
        return self.value


class ConnectionState(enum.Enum):
    """Lifecycle state of a connection end."""

    UNINITIALIZED = "Uninitialized"
    INIT = "Init"
    TRY_OPEN = "TryOpen"
    OPEN = "Open"

    def __str__(self) -> str:
        return self.value


# ---------------------------------------------------------------------------
# Chain snapshots
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ChannelEnd:
    """A channel end as stored on one chain."""

    port_id: str
    channel_id: str
    state: ChannelState
    connection_hops: tuple[str, ...]
    """Ordered connection ids; the first hop is the one the channel runs on."""

    ordering: str = "Unordered"
    counterparty_port_id: str | None = None
    counterparty_channel_id: str | None = None
    version: str = ""

    def is_open(self) -> bool:
        return self.state is ChannelState.OPEN


@dataclass(frozen=True, slots=True)
class ConnectionEnd:
    """A connection end as stored on one chain."""

    connection_id: str
    client_id: str
    state: ConnectionState
    counterparty_client_id: str | None = None
    counterparty_connection_id: str | None = None


@dataclass(frozen=True, slots=True)
class ClientState:
    """Light-client record kept by a chain for some counterparty."""

    client_id: str
    chain_id: str
    """Identifier of the chain whose headers this client verifies."""

    latest_height: Height
    client_type: str = "07-tendermint"


# ---------------------------------------------------------------------------
# Transfer request and results
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class TransferOptions:
    """Validated, immutable ICS-20 transfer request.

    Built once by :func:`ibc_xfer.core.options.validate_options` and
    handed unchanged to the path verifier and then to the dispatcher.
    """

    packet_src_port_id: str
    packet_src_channel_id: str
    amount: int
    denom: str = DEFAULT_DENOM
    receiver: str | None = None
    timeout_height_offset: int = 0
    timeout_duration: timedelta = timedelta(0)
    number_msgs: int = 1


@dataclass(frozen=True, slots=True)
class LedgerEvent:
    """A single event emitted by the chain in response to a transfer."""

    kind: str
    attributes: Mapping[str, str] = field(default_factory=dict)
    height: Height | None = None

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready representation."""
        data: dict[str, Any] = {"type": self.kind, "attributes": dict(self.attributes)}
        if self.height is not None:
            data["height"] = str(self.height)
        return data

    def __str__(self) -> str:
        attrs = " ".join(f"{key}={value}" for key, value in self.attributes.items())
        return f"{self.kind} {attrs}".rstrip()
