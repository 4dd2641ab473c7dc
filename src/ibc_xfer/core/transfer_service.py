"""Core transfer service — verify the path, then dispatch.

The service owns the ordering guarantee: the dispatcher is called at
most once, and only after :class:`~ibc_xfer.core.path_verifier.PathVerifier`
has accepted the channel.

Guarantees
----------
* Pure orchestration — no ``print()``, no process exit.
* Only :class:`~ibc_xfer.exceptions.IbcXferError` subclasses escape.
"""

from __future__ import annotations

import logging

from ibc_xfer.core.models import LedgerEvent, TransferOptions
from ibc_xfer.core.path_verifier import PathVerifier
from ibc_xfer.core.protocols import ChainHandle, TransferDispatcher
from ibc_xfer.exceptions import IbcXferError, TransferError

logger = logging.getLogger(__name__)


class TransferService:
    """Runs one path-verified transfer.

    Parameters
    ----------
    src, dst:
        Query handles for the source and destination chains.
    dispatcher:
        Any object satisfying the :class:`TransferDispatcher` protocol.
    """

    def __init__(
        self,
        src: ChainHandle,
        dst: ChainHandle,
        dispatcher: TransferDispatcher,
    ) -> None:
        self._src: ChainHandle = src
        self._dst: ChainHandle = dst
        self._dispatcher: TransferDispatcher = dispatcher

    def transfer(
        self,
        src_chain_id: str,
        dst_chain_id: str,
        opts: TransferOptions,
    ) -> list[LedgerEvent]:
        """Verify the channel path and submit the transfer.

        Raises
        ------
        QueryError, PathVerificationError
            Verification failed; the dispatcher was not called.
        TransferError
            The dispatcher failed.
        """
        verified = PathVerifier(self._src).verify(src_chain_id, dst_chain_id, opts)

        logger.info(
            "dispatching %d message(s): %s %s over %s/%s to %s",
            verified.number_msgs,
            verified.amount,
            verified.denom,
            verified.packet_src_port_id,
            verified.packet_src_channel_id,
            dst_chain_id,
        )
        try:
            events = self._dispatcher.build_and_send(self._src, self._dst, verified)
        except IbcXferError:
            raise
        except Exception as exc:
            raise TransferError(str(exc)) from exc
        return list(events)
