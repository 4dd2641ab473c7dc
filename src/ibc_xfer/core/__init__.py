"""Core / service layer — option validation, path verification, orchestration.

Rules
-----
* No ``print()`` calls.
* No filesystem or network I/O; chains are reached only through the
  :class:`~ibc_xfer.core.protocols.ChainHandle` protocol.
* No imports from ``cli`` or ``infra``.
"""

from ibc_xfer.core.models import (
    DEFAULT_DENOM,
    ChannelEnd,
    ChannelState,
    ClientState,
    ConnectionEnd,
    ConnectionState,
    Height,
    LedgerEvent,
    TransferOptions,
)
from ibc_xfer.core.options import RawTransferArgs, validate_options
from ibc_xfer.core.path_verifier import PathVerifier
from ibc_xfer.core.protocols import ChainHandle, TransferDispatcher
from ibc_xfer.core.transfer_service import TransferService

__all__: list[str] = [
    "DEFAULT_DENOM",
    "ChainHandle",
    "ChannelEnd",
    "ChannelState",
    "ClientState",
    "ConnectionEnd",
    "ConnectionState",
    "Height",
    "LedgerEvent",
    "PathVerifier",
    "RawTransferArgs",
    "TransferDispatcher",
    "TransferOptions",
    "TransferService",
    "validate_options",
]
