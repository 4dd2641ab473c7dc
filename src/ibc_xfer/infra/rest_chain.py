"""httpx-backed implementation of :class:`~ibc_xfer.core.protocols.ChainHandle`.

Talks to the Cosmos SDK gRPC-gateway REST API exposed by a full node.
All httpx and decoding failures are caught here and re-raised as
:class:`~ibc_xfer.exceptions.QueryError` (or
:class:`~ibc_xfer.exceptions.NotFoundError`) so nothing raw escapes the
infrastructure boundary.
"""

from __future__ import annotations

import logging
from types import TracebackType
from typing import Any

import httpx

from ibc_xfer.config import ChainConfig
from ibc_xfer.core.models import (
    ChannelEnd,
    ChannelState,
    ClientState,
    ConnectionEnd,
    ConnectionState,
    Height,
)
from ibc_xfer.exceptions import NotFoundError, QueryError

logger = logging.getLogger(__name__)

HEIGHT_HEADER: str = "x-cosmos-block-height"

# gRPC status code NOT_FOUND, as reported in gateway error bodies.
_GRPC_NOT_FOUND: int = 5

_CHANNEL_STATES: dict[str, ChannelState] = {
    "STATE_UNINITIALIZED_UNSPECIFIED": ChannelState.UNINITIALIZED,
    "STATE_INIT": ChannelState.INIT,
    "STATE_TRYOPEN": ChannelState.TRY_OPEN,
    "STATE_OPEN": ChannelState.OPEN,
    "STATE_CLOSED": ChannelState.CLOSED,
}

_CONNECTION_STATES: dict[str, ConnectionState] = {
    "STATE_UNINITIALIZED_UNSPECIFIED": ConnectionState.UNINITIALIZED,
    "STATE_INIT": ConnectionState.INIT,
    "STATE_TRYOPEN": ConnectionState.TRY_OPEN,
    "STATE_OPEN": ConnectionState.OPEN,
}

_ORDERINGS: dict[str, str] = {
    "ORDER_NONE_UNSPECIFIED": "None",
    "ORDER_UNORDERED": "Unordered",
    "ORDER_ORDERED": "Ordered",
}

_CLIENT_TYPES: dict[str, str] = {
    "/ibc.lightclients.tendermint.v1.ClientState": "07-tendermint",
    "/ibc.lightclients.solomachine.v3.ClientState": "06-solomachine",
    "/ibc.lightclients.localhost.v2.ClientState": "09-localhost",
    "/ibc.lightclients.wasm.v1.ClientState": "08-wasm",
}


class RestChainHandle:
    """Query handle for one chain's REST endpoint.

    Usage::

        with RestChainHandle(chain_config) as handle:
            channel = handle.query_channel("transfer", "channel-0")

    Parameters
    ----------
    config:
        The chain's configuration entry.
    transport:
        Optional httpx transport, used by tests to serve canned responses.
    """

    def __init__(
        self,
        config: ChainConfig,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config: ChainConfig = config
        self._client = httpx.Client(
            base_url=config.rest_addr,
            timeout=config.rpc_timeout,
            transport=transport,
        )

    @property
    def chain_id(self) -> str:
        return self._config.id

    @property
    def config(self) -> ChainConfig:
        return self._config

    # ------------------------------------------------------------------
    # Protocol methods
    # ------------------------------------------------------------------

    def query_channel(
        self,
        port_id: str,
        channel_id: str,
        height: Height | None = None,
    ) -> ChannelEnd:
        body = self._get(
            f"/ibc/core/channel/v1/channels/{channel_id}/ports/{port_id}",
            height,
            what=f"channel '{port_id}'/'{channel_id}'",
        )
        raw = self._section(body, "channel")
        counterparty = raw.get("counterparty") or {}
        return ChannelEnd(
            port_id=port_id,
            channel_id=channel_id,
            state=self._lookup(_CHANNEL_STATES, raw.get("state"), "channel state"),
            connection_hops=tuple(str(hop) for hop in raw.get("connection_hops") or ()),
            ordering=_ORDERINGS.get(str(raw.get("ordering")), "None"),
            counterparty_port_id=counterparty.get("port_id") or None,
            counterparty_channel_id=counterparty.get("channel_id") or None,
            version=str(raw.get("version", "")),
        )

    def query_connection(
        self,
        connection_id: str,
        height: Height | None = None,
    ) -> ConnectionEnd:
        body = self._get(
            f"/ibc/core/connection/v1/connections/{connection_id}",
            height,
            what=f"connection '{connection_id}'",
        )
        raw = self._section(body, "connection")
        client_id = raw.get("client_id")
        if not client_id:
            raise QueryError(
                f"connection '{connection_id}' on chain '{self.chain_id}' has no client id",
            )
        counterparty = raw.get("counterparty") or {}
        return ConnectionEnd(
            connection_id=connection_id,
            client_id=str(client_id),
            state=self._lookup(_CONNECTION_STATES, raw.get("state"), "connection state"),
            counterparty_client_id=counterparty.get("client_id") or None,
            counterparty_connection_id=counterparty.get("connection_id") or None,
        )

    def query_client_state(
        self,
        client_id: str,
        height: Height | None = None,
    ) -> ClientState:
        body = self._get(
            f"/ibc/core/client/v1/client_states/{client_id}",
            height,
            what=f"client '{client_id}'",
        )
        raw = self._section(body, "client_state")
        tracked = raw.get("chain_id")
        if not tracked:
            raise QueryError(
                f"client '{client_id}' on chain '{self.chain_id}' does not report "
                "a tracked chain id",
            )
        return ClientState(
            client_id=client_id,
            chain_id=str(tracked),
            latest_height=self._parse_height(raw.get("latest_height")),
            client_type=_CLIENT_TYPES.get(str(raw.get("@type")), "unknown"),
        )

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> RestChainHandle:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()

    # ------------------------------------------------------------------
    # HTTP + decoding helpers
    # ------------------------------------------------------------------

    def _get(self, path: str, height: Height | None, *, what: str) -> dict[str, Any]:
        """GET ``path`` and return the decoded JSON object."""
        headers: dict[str, str] = {}
        if height is not None:
            headers[HEIGHT_HEADER] = str(height.revision_height)

        logger.debug("GET %s%s (chain %s)", self._config.rest_addr, path, self.chain_id)
        try:
            resp = self._client.get(path, headers=headers)
        except httpx.HTTPError as exc:
            raise QueryError(
                f"failed to query {what} on chain '{self.chain_id}': {exc}",
                hint=f"Check that {self._config.rest_addr} is reachable.",
            ) from exc

        body = self._decode(resp, what)
        if resp.status_code == httpx.codes.NOT_FOUND or body.get("code") == _GRPC_NOT_FOUND:
            raise NotFoundError(f"{what} not found on chain '{self.chain_id}'")
        if resp.is_error or body.get("code"):
            message = body.get("message") or resp.reason_phrase
            raise QueryError(
                f"failed to query {what} on chain '{self.chain_id}': "
                f"HTTP {resp.status_code}: {message}",
            )
        return body

    def _decode(self, resp: httpx.Response, what: str) -> dict[str, Any]:
        try:
            body: Any = resp.json()
        except ValueError as exc:
            if resp.status_code == httpx.codes.NOT_FOUND:
                return {}
            raise QueryError(
                f"invalid JSON in response for {what} on chain '{self.chain_id}'",
            ) from exc
        if not isinstance(body, dict):
            raise QueryError(
                f"unexpected response shape for {what} on chain '{self.chain_id}'",
            )
        return body

    def _section(self, body: dict[str, Any], key: str) -> dict[str, Any]:
        section = body.get(key)
        if not isinstance(section, dict):
            raise QueryError(
                f"response from chain '{self.chain_id}' is missing '{key}'",
            )
        return section

    def _lookup(self, table: dict[str, Any], value: object, label: str) -> Any:
        try:
            return table[str(value)]
        except KeyError as exc:
            raise QueryError(
                f"unknown {label} '{value}' reported by chain '{self.chain_id}'",
            ) from exc

    def _parse_height(self, raw: object) -> Height:
        if not isinstance(raw, dict):
            raise QueryError(
                f"client state from chain '{self.chain_id}' has no latest height",
            )
        try:
            return Height(
                revision_number=int(raw.get("revision_number", 0)),
                revision_height=int(raw.get("revision_height", 0)),
            )
        except (TypeError, ValueError) as exc:
            raise QueryError(
                f"malformed latest height {raw!r} from chain '{self.chain_id}'",
            ) from exc
