"""Infrastructure layer — external system integration.

This layer wraps all interaction with chain REST endpoints (httpx) and
dispatcher plugins (entry points).  Every raw third-party exception must
be caught here and re-raised as an
:class:`~ibc_xfer.exceptions.IbcXferError` subclass.

Rules
-----
* No imports from ``cli``.
* No user-facing output (no ``print()``, no Rich rendering).
"""

from ibc_xfer.infra.chain_pair import ChainHandlePair
from ibc_xfer.infra.dispatcher_loader import available_dispatchers, load_dispatcher
from ibc_xfer.infra.rest_chain import RestChainHandle

__all__: list[str] = [
    "ChainHandlePair",
    "RestChainHandle",
    "available_dispatchers",
    "load_dispatcher",
]
