"""ibc-xfer — path-verified ICS-20 token transfers.

Checks that a source channel really leads to the requested destination
chain before handing the transfer to a dispatcher plugin.
"""

from ibc_xfer.version import __version__

__all__: list[str] = ["__version__"]
