"""Tests for domain models (core/models.py).

All models are frozen dataclasses — these tests verify immutability,
defaults, and display helpers.
"""

from __future__ import annotations

import dataclasses
from datetime import timedelta

import pytest

from ibc_xfer.core.models import (
    DEFAULT_DENOM,
    ChannelEnd,
    ChannelState,
    ClientState,
    Height,
    LedgerEvent,
    TransferOptions,
)


def _make_channel(**overrides: object) -> ChannelEnd:
    defaults: dict[str, object] = {
        "port_id": "transfer",
        "channel_id": "channel-0",
        "state": ChannelState.OPEN,
        "connection_hops": ("connection-0",),
    }
    defaults.update(overrides)
    return ChannelEnd(**defaults)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Height
# ---------------------------------------------------------------------------

class TestHeight:
    def test_str(self) -> None:
        assert str(Height(1, 4200)) == "1-4200"

    def test_ordering(self) -> None:
        assert Height(0, 99) < Height(1, 1)
        assert Height(1, 2) > Height(1, 1)


# ---------------------------------------------------------------------------
# ChannelEnd
# ---------------------------------------------------------------------------

class TestChannelEnd:
    def test_is_open(self) -> None:
        assert _make_channel().is_open()

    @pytest.mark.parametrize(
        "state",
        [ChannelState.UNINITIALIZED, ChannelState.INIT, ChannelState.TRY_OPEN, ChannelState.CLOSED],
    )
    def test_not_open(self, state: ChannelState) -> None:
        assert not _make_channel(state=state).is_open()

    def test_state_displays_as_value(self) -> None:
        assert str(ChannelState.TRY_OPEN) == "TryOpen"

    def test_frozen(self) -> None:
        channel = _make_channel()
        with pytest.raises(dataclasses.FrozenInstanceError):
            channel.state = ChannelState.CLOSED  # type: ignore[misc]


# ---------------------------------------------------------------------------
# ClientState
# ---------------------------------------------------------------------------

class TestClientState:
    def test_default_client_type(self) -> None:
        cs = ClientState(client_id="07-tendermint-0", chain_id="chain-b", latest_height=Height(0, 1))
        assert cs.client_type == "07-tendermint"


# ---------------------------------------------------------------------------
# TransferOptions
# ---------------------------------------------------------------------------

class TestTransferOptions:
    def test_defaults(self) -> None:
        opts = TransferOptions(
            packet_src_port_id="transfer",
            packet_src_channel_id="channel-0",
            amount=42,
        )
        assert opts.denom == DEFAULT_DENOM == "samoleans"
        assert opts.receiver is None
        assert opts.timeout_height_offset == 0
        assert opts.timeout_duration == timedelta(0)
        assert opts.number_msgs == 1

    def test_amount_is_arbitrary_precision(self) -> None:
        big = 2**256 + 1
        opts = TransferOptions("transfer", "channel-0", big)
        assert opts.amount == big

    def test_frozen(self) -> None:
        opts = TransferOptions("transfer", "channel-0", 1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            opts.amount = 2  # type: ignore[misc]


# ---------------------------------------------------------------------------
# LedgerEvent
# ---------------------------------------------------------------------------

class TestLedgerEvent:
    def test_to_dict(self) -> None:
        event = LedgerEvent(
            kind="send_packet",
            attributes={"packet_sequence": "7"},
            height=Height(1, 10),
        )
        assert event.to_dict() == {
            "type": "send_packet",
            "attributes": {"packet_sequence": "7"},
            "height": "1-10",
        }

    def test_to_dict_without_height(self) -> None:
        assert "height" not in LedgerEvent(kind="x").to_dict()

    def test_str(self) -> None:
        event = LedgerEvent(kind="send_packet", attributes={"a": "1", "b": "2"})
        assert str(event) == "send_packet a=1 b=2"

    def test_str_no_attributes(self) -> None:
        assert str(LedgerEvent(kind="send_packet")) == "send_packet"
