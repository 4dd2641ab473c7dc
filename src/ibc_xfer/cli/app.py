"""CLI application entry point and command routing for ibc-xfer.

This module is the only place that turns domain results into process
exit codes.  :func:`_handle_transfer` reports every
:class:`~ibc_xfer.exceptions.IbcXferError` through exactly one
:class:`~ibc_xfer.cli.output.Output`; :func:`cli` is the last-resort
boundary for ``KeyboardInterrupt`` and unexpected exceptions.

Architecture notes
------------------
* No business logic lives here — validation, verification and dispatch
  are delegated to the core and infrastructure layers.
* Configuration overrides (``--key-name``) are applied to a copy of the
  loaded config before any chain is queried.
"""

from __future__ import annotations

import argparse
import logging
import sys

from ibc_xfer.cli import exit_codes
from ibc_xfer.cli.console import err_console, escape
from ibc_xfer.cli.output import Output
from ibc_xfer.core.models import DEFAULT_DENOM
from ibc_xfer.core.options import RawTransferArgs, validate_options
from ibc_xfer.exceptions import IbcXferError
from ibc_xfer.utils.logger import LEVELS, setup_logger
from ibc_xfer.version import __version__

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Argument parser
# ---------------------------------------------------------------------------

def _add_transfer_parser(subparsers: argparse._SubParsersAction) -> None:
    parser = subparsers.add_parser(
        "transfer",
        aliases=["ft-transfer"],
        help="Send an ICS-20 token transfer over a verified channel.",
        description=(
            "Check that the source channel leads to the destination chain, "
            "then submit a fungible token transfer over it."
        ),
    )
    required = parser.add_argument_group("required")
    required.add_argument(
        "--dst-chain",
        dest="dst_chain_id",
        required=True,
        metavar="DST_CHAIN_ID",
        help="Identifier of the destination chain",
    )
    required.add_argument(
        "--src-chain",
        dest="src_chain_id",
        required=True,
        metavar="SRC_CHAIN_ID",
        help="Identifier of the source chain",
    )
    required.add_argument(
        "--src-port",
        dest="src_port_id",
        required=True,
        metavar="SRC_PORT_ID",
        help="Identifier of the source port",
    )
    required.add_argument(
        "--src-channel",
        "--src-chan",
        dest="src_channel_id",
        required=True,
        metavar="SRC_CHANNEL_ID",
        help="Identifier of the source channel",
    )
    required.add_argument(
        "--amount",
        required=True,
        metavar="AMOUNT",
        help=f"Amount of coins ({DEFAULT_DENOM}, by default) to send (e.g. `100000`)",
    )
    parser.add_argument(
        "--timeout-height-offset",
        type=int,
        default=0,
        metavar="TIMEOUT_HEIGHT_OFFSET",
        help="Timeout in number of blocks since current",
    )
    parser.add_argument(
        "--timeout-seconds",
        type=int,
        default=0,
        metavar="TIMEOUT_SECONDS",
        help="Timeout in seconds since current",
    )
    parser.add_argument(
        "--receiver",
        default=None,
        metavar="RECEIVER",
        help=(
            "The account address on the destination chain which will receive "
            "the tokens. If omitted, the wallet on the destination chain is used"
        ),
    )
    parser.add_argument(
        "--denom",
        default=DEFAULT_DENOM,
        metavar="DENOM",
        help="Denomination of the coins to send",
    )
    parser.add_argument(
        "--number-msgs",
        type=int,
        default=None,
        metavar="NUMBER_MSGS",
        help="Number of messages to send",
    )
    parser.add_argument(
        "--key-name",
        default=None,
        metavar="KEY_NAME",
        help="Use the given signing key name (default: `key_name` config)",
    )
    parser.set_defaults(handler=_handle_transfer)


def _build_parser() -> argparse.ArgumentParser:
    """Construct the top-level argument parser.

    * ``ibc-xfer transfer ...`` — path-verified token transfer
    * ``ibc-xfer --version``
    """
    parser = argparse.ArgumentParser(
        prog="ibc-xfer",
        description="Path-verified ICS-20 token transfers.",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        default=None,
        metavar="PATH",
        help="Config file (default: $IBC_XFER_CONFIG or ~/.ibc-xfer/config.toml)",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as a single JSON document",
    )
    parser.add_argument(
        "--log-level",
        choices=sorted(LEVELS),
        default="warning",
        help="Diagnostic log level (written to stderr)",
    )
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")
    _add_transfer_parser(subparsers)
    return parser


# ---------------------------------------------------------------------------
# Command dispatch
# ---------------------------------------------------------------------------

def _raw_transfer_args(args: argparse.Namespace) -> RawTransferArgs:
    return RawTransferArgs(
        dst_chain_id=args.dst_chain_id,
        src_chain_id=args.src_chain_id,
        src_port_id=args.src_port_id,
        src_channel_id=args.src_channel_id,
        amount=args.amount,
        timeout_height_offset=args.timeout_height_offset,
        timeout_seconds=args.timeout_seconds,
        receiver=args.receiver,
        denom=args.denom,
        number_msgs=args.number_msgs,
        key_name=args.key_name,
    )


def _handle_transfer(args: argparse.Namespace) -> int:
    """Run one path-verified transfer.

    Flow:
    1. Load the config and apply ``--key-name`` to a copy.
    2. Validate options (no network).
    3. Load the dispatcher plugin.
    4. Open handles, verify the path, dispatch.
    5. Report exactly one outcome.
    """
    from ibc_xfer.config import load_config
    from ibc_xfer.core.transfer_service import TransferService
    from ibc_xfer.infra.chain_pair import ChainHandlePair
    from ibc_xfer.infra.dispatcher_loader import load_dispatcher

    raw = _raw_transfer_args(args)
    try:
        config = load_config(args.config)
        if raw.key_name is not None:
            config = config.with_key_name(raw.src_chain_id, raw.key_name)

        opts = validate_options(raw, config)
        logger.debug("Message: %r", opts)

        dispatcher = load_dispatcher(config.dispatcher)
        with ChainHandlePair.spawn(config, raw.src_chain_id, raw.dst_chain_id) as chains:
            service = TransferService(chains.src, chains.dst, dispatcher)
            events = service.transfer(raw.src_chain_id, raw.dst_chain_id, opts)
    except IbcXferError as exc:
        logger.debug("transfer failed", exc_info=True)
        return Output.error(exc).render(json_mode=args.json)

    return Output.success(events).render(json_mode=args.json)


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: list[str] | None = None) -> int:
    """Run the ibc-xfer CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = _build_parser()
    args = parser.parse_args(argv)

    setup_logger(args.log_level)

    if args.command is None:
        parser.print_help()
        return exit_codes.SUCCESS

    return args.handler(args)


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level error boundary invoked by the console-script entry point."""
    try:
        code = main()
        sys.exit(code)
    except IbcXferError as exc:
        sys.exit(Output.error(exc).render())
    except KeyboardInterrupt:
        err_console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    except Exception as exc:  # noqa: BLE001
        err_console.print(
            "[bold red]Unexpected error.[/bold red] "
            "Please report this issue.\n"
            f"  {type(exc).__name__}: {escape(str(exc))}"
        )
        sys.exit(exit_codes.UNEXPECTED_ERROR)
