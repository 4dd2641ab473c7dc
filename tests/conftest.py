"""Shared pytest fixtures and configuration for the ibc-xfer test suite.

Guidelines
----------
* No network access in any test: chains are faked in memory or served
  through ``httpx.MockTransport``.
* Dispatchers are mocks; nothing is signed or broadcast.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from ibc_xfer.config import Config, parse_config
from ibc_xfer.core.models import (
    ChannelEnd,
    ChannelState,
    ClientState,
    ConnectionEnd,
    ConnectionState,
    Height,
)
from ibc_xfer.exceptions import NotFoundError

CONFIG_TOML: str = """
[[chains]]
id = "chain-a"
rest_addr = "http://chain-a.test:1317"
key_name = "alice"

[[chains]]
id = "chain-b"
rest_addr = "http://chain-b.test:1317"
key_name = "bob"
"""


class FakeChainHandle:
    """In-memory :class:`ChainHandle` that records every query."""

    def __init__(
        self,
        chain_id: str = "chain-a",
        *,
        channels: dict[tuple[str, str], ChannelEnd] | None = None,
        connections: dict[str, ConnectionEnd] | None = None,
        clients: dict[str, ClientState] | None = None,
    ) -> None:
        self._chain_id = chain_id
        self.channels = channels or {}
        self.connections = connections or {}
        self.clients = clients or {}
        self.calls: list[tuple[str, ...]] = []
        self.closed = False

    @property
    def chain_id(self) -> str:
        return self._chain_id

    def close(self) -> None:
        self.closed = True

    def query_channel(self, port_id: str, channel_id: str, height: Height | None = None) -> ChannelEnd:
        self.calls.append(("channel", port_id, channel_id))
        try:
            return self.channels[(port_id, channel_id)]
        except KeyError:
            raise NotFoundError(f"channel '{port_id}'/'{channel_id}' not found") from None

    def query_connection(self, connection_id: str, height: Height | None = None) -> ConnectionEnd:
        self.calls.append(("connection", connection_id))
        try:
            return self.connections[connection_id]
        except KeyError:
            raise NotFoundError(f"connection '{connection_id}' not found") from None

    def query_client_state(self, client_id: str, height: Height | None = None) -> ClientState:
        self.calls.append(("client", client_id))
        try:
            return self.clients[client_id]
        except KeyError:
            raise NotFoundError(f"client '{client_id}' not found") from None


def make_src_handle(
    *,
    state: ChannelState = ChannelState.OPEN,
    hops: tuple[str, ...] = ("connection-0",),
    tracked_chain: str = "chain-b",
    port_id: str = "transfer",
    channel_id: str = "channel-0",
) -> FakeChainHandle:
    """Source chain whose ``transfer/channel-0`` leads to ``tracked_chain``."""
    return FakeChainHandle(
        "chain-a",
        channels={
            (port_id, channel_id): ChannelEnd(
                port_id=port_id,
                channel_id=channel_id,
                state=state,
                connection_hops=hops,
                counterparty_port_id="transfer",
                counterparty_channel_id="channel-7",
                version="ics20-1",
            ),
        },
        connections={
            "connection-0": ConnectionEnd(
                connection_id="connection-0",
                client_id="07-tendermint-0",
                state=ConnectionState.OPEN,
            ),
        },
        clients={
            "07-tendermint-0": ClientState(
                client_id="07-tendermint-0",
                chain_id=tracked_chain,
                latest_height=Height(1, 4200),
            ),
        },
    )


@pytest.fixture()
def config() -> Config:
    return parse_config(CONFIG_TOML)


@pytest.fixture()
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.toml"
    path.write_text(CONFIG_TOML, encoding="utf-8")
    return path
