"""Tests for ICS-24 identifier validation (core/identifiers.py)."""

from __future__ import annotations

import pytest

from ibc_xfer.core.identifiers import validate_chain_id, validate_channel_id, validate_port_id
from ibc_xfer.exceptions import InvalidInputError


class TestPortId:
    @pytest.mark.parametrize("value", ["transfer", "ab", "icacontroller-cosmos1abc", "wasm.juno1x"])
    def test_valid(self, value: str) -> None:
        assert validate_port_id(value) == value

    def test_too_short(self) -> None:
        with pytest.raises(InvalidInputError, match="port id 'a'"):
            validate_port_id("a")

    def test_too_long(self) -> None:
        with pytest.raises(InvalidInputError, match="length"):
            validate_port_id("p" * 129)

    @pytest.mark.parametrize("value", ["trans fer", "port/1", "port@x"])
    def test_bad_characters(self, value: str) -> None:
        with pytest.raises(InvalidInputError, match="characters"):
            validate_port_id(value)


class TestChannelId:
    @pytest.mark.parametrize("value", ["channel-0", "channel-1234", "channel_sender"])
    def test_valid(self, value: str) -> None:
        assert validate_channel_id(value) == value

    def test_too_short(self) -> None:
        with pytest.raises(InvalidInputError, match="channel id 'chan-0'"):
            validate_channel_id("chan-0")

    def test_too_long(self) -> None:
        with pytest.raises(InvalidInputError):
            validate_channel_id("c" * 65)

    def test_empty(self) -> None:
        with pytest.raises(InvalidInputError):
            validate_channel_id("")


class TestChainId:
    @pytest.mark.parametrize("value", ["cosmoshub-4", "osmosis-1", "chain_receiver"])
    def test_valid(self, value: str) -> None:
        assert validate_chain_id(value) == value

    @pytest.mark.parametrize("value", ["", "chain a", " chain"])
    def test_invalid(self, value: str) -> None:
        with pytest.raises(InvalidInputError, match="invalid chain id"):
            validate_chain_id(value)
