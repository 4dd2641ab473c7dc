"""Path verification — channel → connection → client → tracked chain.

Unwinds the trust path on the source chain to prove that its light
client for the requested channel actually follows the destination
chain's consensus, and not merely that a channel with that number
exists.

Each step feeds the next one's query key, so the queries run strictly in
sequence.  The first failing step raises; nothing after it is queried.

Guarantees
----------
* Read-only: only ``query_*`` calls on the source handle.
* Only :class:`~ibc_xfer.exceptions.IbcXferError` subclasses escape.
* On success the options object is returned unchanged.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TypeVar

from ibc_xfer.core.models import ChannelEnd, ClientState, ConnectionEnd, TransferOptions
from ibc_xfer.core.protocols import ChainHandle
from ibc_xfer.exceptions import (
    ChainMismatchError,
    ChannelNotOpenError,
    IbcXferError,
    MissingConnectionHopError,
    QueryError,
)

logger = logging.getLogger(__name__)

_T = TypeVar("_T")


class PathVerifier:
    """Checks that a source channel leads to the expected destination chain.

    Parameters
    ----------
    src:
        Query handle for the source chain.
    """

    def __init__(self, src: ChainHandle) -> None:
        self._src: ChainHandle = src

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def verify(
        self,
        src_chain_id: str,
        dst_chain_id: str,
        opts: TransferOptions,
    ) -> TransferOptions:
        """Run the full verification pipeline and return ``opts``.

        Raises
        ------
        QueryError
            A query failed or the object does not exist.
        ChannelNotOpenError
            The channel end is not ``Open``.
        MissingConnectionHopError
            The channel end lists no connection hops.
        ChainMismatchError
            The channel's client tracks a chain other than ``dst_chain_id``.
        """
        channel = self._fetch_open_channel(src_chain_id, opts)
        conn_id = self._first_hop(src_chain_id, channel, opts)
        connection = self._fetch_connection(conn_id)
        client_state = self._fetch_client_state(connection)
        self._check_tracked_chain(src_chain_id, dst_chain_id, client_state, opts)
        return opts

    # ------------------------------------------------------------------
    # Pipeline steps
    # ------------------------------------------------------------------

    def _fetch_open_channel(
        self, src_chain_id: str, opts: TransferOptions,
    ) -> ChannelEnd:
        port_id = opts.packet_src_port_id
        channel_id = opts.packet_src_channel_id
        channel = self._query(
            lambda: self._src.query_channel(port_id, channel_id, None),
        )
        if not channel.is_open():
            raise ChannelNotOpenError(
                f"the requested port/channel ('{port_id}'/'{channel_id}') on chain id "
                f"'{src_chain_id}' is in state '{channel.state}'; expected 'open' state",
            )
        return channel

    @staticmethod
    def _first_hop(
        src_chain_id: str, channel: ChannelEnd, opts: TransferOptions,
    ) -> str:
        if not channel.connection_hops:
            raise MissingConnectionHopError(
                "could not retrieve the connection hop underlying port/channel "
                f"'{opts.packet_src_port_id}'/'{opts.packet_src_channel_id}' "
                f"on chain '{src_chain_id}'",
            )
        return channel.connection_hops[0]

    def _fetch_connection(self, conn_id: str) -> ConnectionEnd:
        connection = self._query(lambda: self._src.query_connection(conn_id, None))
        logger.debug("connection hop underlying the channel: %r", connection)
        return connection

    def _fetch_client_state(self, connection: ConnectionEnd) -> ClientState:
        client_state = self._query(
            lambda: self._src.query_client_state(connection.client_id, None),
        )
        logger.debug("client state underlying the channel: %r", client_state)
        return client_state

    @staticmethod
    def _check_tracked_chain(
        src_chain_id: str,
        dst_chain_id: str,
        client_state: ClientState,
        opts: TransferOptions,
    ) -> None:
        if client_state.chain_id != dst_chain_id:
            raise ChainMismatchError(
                f"the requested port/channel ('{opts.packet_src_port_id}'/"
                f"'{opts.packet_src_channel_id}') provides a path from chain "
                f"'{src_chain_id}' to chain '{client_state.chain_id}' (not to the "
                f"destination chain '{dst_chain_id}'). Bailing due to mismatching "
                "arguments.",
                actual=client_state.chain_id,
                expected=dst_chain_id,
            )

    # ------------------------------------------------------------------
    # Handle delegation (safe boundary)
    # ------------------------------------------------------------------

    @staticmethod
    def _query(call: Callable[[], _T]) -> _T:
        """Invoke a handle query and ensure only our exceptions escape."""
        try:
            return call()
        except IbcXferError:
            raise
        except Exception as exc:
            raise QueryError(f"Unexpected query error: {exc}") from exc
