"""Outcome reporting — one terminal report per invocation.

An :class:`Output` is either a success carrying the emitted events or an
error carrying a message.  :meth:`Output.render` writes it to stdout,
as JSON or as styled text, and returns the matching exit code.
"""

from __future__ import annotations

import enum
import json
from collections.abc import Iterable
from dataclasses import dataclass
from typing import Any

from ibc_xfer.cli import exit_codes
from ibc_xfer.cli.console import console, escape
from ibc_xfer.core.models import LedgerEvent
from ibc_xfer.exceptions import IbcXferError


class Status(enum.Enum):
    SUCCESS = "success"
    ERROR = "error"


@dataclass(frozen=True, slots=True)
class Output:
    """Terminal result of a command."""

    status: Status
    result: tuple[LedgerEvent, ...] | str
    hint: str | None = None

    @classmethod
    def success(cls, events: Iterable[LedgerEvent]) -> Output:
        return cls(status=Status.SUCCESS, result=tuple(events))

    @classmethod
    def error(cls, error: IbcXferError | str) -> Output:
        if isinstance(error, IbcXferError):
            return cls(status=Status.ERROR, result=str(error), hint=error.hint)
        return cls(status=Status.ERROR, result=error)

    @property
    def exit_code(self) -> int:
        if self.status is Status.SUCCESS:
            return exit_codes.SUCCESS
        return exit_codes.GENERAL_ERROR

    def to_dict(self) -> dict[str, Any]:
        """Return the JSON document for this outcome."""
        if isinstance(self.result, str):
            result: Any = self.result
        else:
            result = [event.to_dict() for event in self.result]
        return {"status": self.status.value, "result": result}

    def render(self, *, json_mode: bool = False) -> int:
        """Write the report to stdout and return the exit code."""
        if json_mode:
            console.print_raw(json.dumps(self.to_dict()))
        elif isinstance(self.result, str):
            console.print(f"[bold red]ERROR[/bold red] {escape(self.result)}")
            if self.hint:
                console.print(f"[yellow]Hint:[/yellow] {escape(self.hint)}")
        else:
            self._render_events(self.result)
        return self.exit_code

    @staticmethod
    def _render_events(events: tuple[LedgerEvent, ...]) -> None:
        if not events:
            console.print("[bold green]SUCCESS[/bold green] (no events)")
            return
        console.print(f"[bold green]SUCCESS[/bold green] {len(events)} event(s)")
        for event in events:
            console.print(f"  {escape(str(event))}")
