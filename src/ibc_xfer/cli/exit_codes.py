"""Exit-code constants used by the CLI layer.

Every exit path returns one of these values; no other module decides a
process exit status.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Transfer dispatched, or help/version shown."""

GENERAL_ERROR: int = 1
"""A known IbcXferError was reported (validation, config, query, path, dispatch)."""

UNEXPECTED_ERROR: int = 2
"""An unhandled exception escaped all known error boundaries."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""
