"""Protocols (interfaces) consumed by the core layer.

These define the contracts that infrastructure adapters and dispatcher
plugins must satisfy.  Core code depends ONLY on these protocols — never
on concrete implementations.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from ibc_xfer.core.models import (
    ChannelEnd,
    ClientState,
    ConnectionEnd,
    Height,
    LedgerEvent,
    TransferOptions,
)


class ChainHandle(Protocol):
    """Read-only query access to a single chain.

    ``height=None`` means "at the latest height".  Retry and timeout
    policy belong to the implementation.

    Implementations must map all backend-specific exceptions to
    :class:`~ibc_xfer.exceptions.QueryError` (or
    :class:`~ibc_xfer.exceptions.NotFoundError` when the object does not
    exist).
    """

    @property
    def chain_id(self) -> str:
        """Identifier of the chain this handle talks to."""
        ...  # pragma: no cover

    def query_channel(
        self,
        port_id: str,
        channel_id: str,
        height: Height | None = None,
    ) -> ChannelEnd:
        """Fetch the channel end for ``port_id``/``channel_id``."""
        ...  # pragma: no cover

    def query_connection(
        self,
        connection_id: str,
        height: Height | None = None,
    ) -> ConnectionEnd:
        """Fetch the connection end for ``connection_id``."""
        ...  # pragma: no cover

    def query_client_state(
        self,
        client_id: str,
        height: Height | None = None,
    ) -> ClientState:
        """Fetch the client state for ``client_id``."""
        ...  # pragma: no cover


class TransferDispatcher(Protocol):
    """Contract for plugins that build, sign and broadcast transfers.

    Whether ``opts.number_msgs > 1`` yields one combined transaction or
    several sequential ones is decided by the implementation.
    """

    def build_and_send(
        self,
        src: ChainHandle,
        dst: ChainHandle,
        opts: TransferOptions,
    ) -> Sequence[LedgerEvent]:
        """Submit the transfer and return the emitted events in order.

        Raises
        ------
        TransferError
            When the messages cannot be built, signed or broadcast.
        """
        ...  # pragma: no cover
