"""Custom exception hierarchy for ibc-xfer.

All exceptions that cross layer boundaries must inherit from
:class:`IbcXferError`.  Raw third-party exceptions (httpx, pydantic,
dispatcher plugins) must not propagate beyond the layer that talks to
them; they are caught and re-raised as a typed subclass defined here.

Hierarchy
---------
IbcXferError
├── ConfigError
│   └── MissingChainConfigError
├── InvalidInputError
├── QueryError
│   └── NotFoundError
├── PathVerificationError
│   ├── ChannelNotOpenError
│   ├── MissingConnectionHopError
│   └── ChainMismatchError
├── TransferError
└── EnvironmentError
    └── DispatcherUnavailableError
"""

from __future__ import annotations


class IbcXferError(Exception):
    """Base exception for all ibc-xfer errors.

    Every user-visible error condition maps to a subclass of this
    exception so that the CLI can render a single clean report without
    leaking stack traces.
    """

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Configuration ---------------------------------------------------------

class ConfigError(IbcXferError):
    """Raised when the configuration file cannot be loaded or is invalid."""


class MissingChainConfigError(ConfigError):
    """Raised when a chain id has no entry in the configuration."""

    def __init__(self, chain_id: str, *, side: str | None = None) -> None:
        label = f"{side} chain" if side else "chain"
        super().__init__(
            f"missing configuration for {label} '{chain_id}'",
            hint="Add a [[chains]] entry with this id to the config file.",
        )
        self.chain_id: str = chain_id
        self.side: str | None = side


# --- Input validation ------------------------------------------------------

class InvalidInputError(IbcXferError):
    """Raised when a request field is missing or malformed."""


# --- Chain queries ---------------------------------------------------------

class QueryError(IbcXferError):
    """Raised when a query against a chain fails (network, node, decode)."""


class NotFoundError(QueryError):
    """Raised when the queried channel, connection or client does not exist."""


# --- Path verification -----------------------------------------------------

class PathVerificationError(IbcXferError):
    """Base class for channel/connection/client topology mismatches."""


class ChannelNotOpenError(PathVerificationError):
    """Raised when the source channel end is not in the ``Open`` state."""


class MissingConnectionHopError(PathVerificationError):
    """Raised when the source channel end lists no connection hops."""


class ChainMismatchError(PathVerificationError):
    """Raised when the channel's client tracks a chain other than the destination."""

    def __init__(self, message: str, *, actual: str, expected: str) -> None:
        super().__init__(message)
        self.actual: str = actual
        self.expected: str = expected


# --- Dispatch --------------------------------------------------------------

class TransferError(IbcXferError):
    """Raised when the transfer dispatcher fails to build or submit messages."""


# --- Environment / plugins -------------------------------------------------

class EnvironmentError(IbcXferError):
    """Raised when a required runtime dependency is not available."""


class DispatcherUnavailableError(EnvironmentError):
    """Raised when no usable transfer dispatcher plugin is installed."""
