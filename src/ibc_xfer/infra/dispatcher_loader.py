"""Discovery of transfer dispatcher plugins.

Signing and broadcasting are not implemented by ibc-xfer itself.  A
separate package provides them by registering an object under the
``ibc_xfer.dispatchers`` entry-point group, e.g. in its
``pyproject.toml``::

    [project.entry-points."ibc_xfer.dispatchers"]
    cosmos = "my_signer.dispatch:CosmosDispatcher"

The entry point may name a class/factory (called with no arguments) or a
ready-made instance exposing ``build_and_send``.
"""

from __future__ import annotations

import logging
from importlib.metadata import EntryPoint, entry_points

from ibc_xfer.core.protocols import TransferDispatcher
from ibc_xfer.exceptions import DispatcherUnavailableError

logger = logging.getLogger(__name__)

ENTRY_POINT_GROUP: str = "ibc_xfer.dispatchers"

_INSTALL_HINT: str = (
    "Install a package that registers an 'ibc_xfer.dispatchers' entry point, "
    "or set 'dispatcher' in the config file to one that is installed."
)


def available_dispatchers() -> dict[str, EntryPoint]:
    """Return installed dispatcher entry points keyed by name."""
    return {ep.name: ep for ep in entry_points(group=ENTRY_POINT_GROUP)}


def load_dispatcher(name: str | None = None) -> TransferDispatcher:
    """Load the dispatcher called ``name``.

    When ``name`` is ``None`` and exactly one dispatcher is installed,
    that one is used.

    Raises
    ------
    DispatcherUnavailableError
        If no matching dispatcher is installed, the choice is ambiguous,
        or the plugin fails to load.
    """
    found = available_dispatchers()

    if name is None:
        if not found:
            raise DispatcherUnavailableError(
                "no transfer dispatcher is installed",
                hint=_INSTALL_HINT,
            )
        if len(found) > 1:
            raise DispatcherUnavailableError(
                "several transfer dispatchers are installed "
                f"({', '.join(sorted(found))}); choose one with 'dispatcher' in the config",
            )
        name = next(iter(found))

    entry_point = found.get(name)
    if entry_point is None:
        raise DispatcherUnavailableError(
            f"transfer dispatcher '{name}' is not installed",
            hint=_INSTALL_HINT,
        )

    logger.debug("loading dispatcher '%s' from %s", name, entry_point.value)
    try:
        dispatcher = entry_point.load()
        if isinstance(dispatcher, type) or not hasattr(dispatcher, "build_and_send"):
            dispatcher = dispatcher()
    except Exception as exc:
        raise DispatcherUnavailableError(
            f"failed to load transfer dispatcher '{name}': {exc}",
        ) from exc

    if not callable(getattr(dispatcher, "build_and_send", None)):
        raise DispatcherUnavailableError(
            f"transfer dispatcher '{name}' does not provide build_and_send()",
        )
    return dispatcher
