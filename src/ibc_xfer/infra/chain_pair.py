"""Acquire the source/destination handle pair for one invocation."""

from __future__ import annotations

from dataclasses import dataclass
from types import TracebackType

from ibc_xfer.config import Config
from ibc_xfer.exceptions import MissingChainConfigError
from ibc_xfer.infra.rest_chain import RestChainHandle


@dataclass(slots=True)
class ChainHandlePair:
    """Source and destination handles, closed together on exit.

    Usage::

        with ChainHandlePair.spawn(config, "ibc-0", "ibc-1") as chains:
            chains.src.query_channel(...)
    """

    src: RestChainHandle
    dst: RestChainHandle

    @classmethod
    def spawn(cls, config: Config, src_chain_id: str, dst_chain_id: str) -> ChainHandlePair:
        """Open one handle per chain from ``config``.

        Raises
        ------
        MissingChainConfigError
            If either chain is not configured.
        """
        src_config = config.find_chain(src_chain_id)
        if src_config is None:
            raise MissingChainConfigError(src_chain_id, side="source")
        dst_config = config.find_chain(dst_chain_id)
        if dst_config is None:
            raise MissingChainConfigError(dst_chain_id, side="destination")

        src = RestChainHandle(src_config)
        try:
            dst = RestChainHandle(dst_config)
        except Exception:
            src.close()
            raise
        return cls(src=src, dst=dst)

    def close(self) -> None:
        try:
            self.src.close()
        finally:
            self.dst.close()

    def __enter__(self) -> ChainHandlePair:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc_value: BaseException | None,
        traceback: TracebackType | None,
    ) -> None:
        self.close()
