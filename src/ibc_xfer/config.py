"""Load and validate the chain configuration file.

The file is TOML and holds one ``[[chains]]`` table per chain the tool may
talk to.  Parsed content is validated with pydantic and exposed as an
immutable :class:`Config`.  Per-invocation overrides never mutate a loaded
config: :meth:`Config.with_key_name` returns a new view.

Lookup order for the file path:

1. explicit ``path`` argument (``--config``)
2. ``IBC_XFER_CONFIG`` environment variable
3. ``~/.ibc-xfer/config.toml``
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator, model_validator

from ibc_xfer.exceptions import ConfigError, MissingChainConfigError

CONFIG_ENV_VAR: str = "IBC_XFER_CONFIG"
DEFAULT_CONFIG_PATH: Path = Path("~/.ibc-xfer/config.toml")


class ChainConfig(BaseModel):
    """Settings for a single chain."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    id: str
    rest_addr: str
    key_name: str
    account_prefix: str = "cosmos"
    rpc_timeout: float = Field(default=10.0, gt=0)

    @field_validator("id", "key_name")
    @classmethod
    def _not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("rest_addr")
    @classmethod
    def _http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("rest_addr must start with http:// or https://")
        return v.rstrip("/")


class Config(BaseModel):
    """The whole configuration file."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    dispatcher: str | None = None
    chains: tuple[ChainConfig, ...] = ()

    @model_validator(mode="after")
    def _unique_chain_ids(self) -> Config:
        seen: set[str] = set()
        for chain in self.chains:
            if chain.id in seen:
                raise ValueError(f"duplicate chain id '{chain.id}'")
            seen.add(chain.id)
        return self

    def find_chain(self, chain_id: str) -> ChainConfig | None:
        """Return the config for ``chain_id`` or ``None``."""
        return next((c for c in self.chains if c.id == chain_id), None)

    def with_key_name(self, chain_id: str, key_name: str) -> Config:
        """Return a copy where ``chain_id`` signs with ``key_name``.

        Raises
        ------
        MissingChainConfigError
            If ``chain_id`` is not configured.
        ConfigError
            If ``key_name`` is blank.
        """
        target = self.find_chain(chain_id)
        if target is None:
            raise MissingChainConfigError(chain_id, side="source")
        try:
            overridden = ChainConfig.model_validate({**target.model_dump(), "key_name": key_name})
        except ValidationError as exc:
            raise ConfigError(
                f"invalid key name '{key_name}' for chain '{chain_id}': must not be empty",
                hint="Pass a non-empty --key-name.",
            ) from exc
        chains = tuple(overridden if c.id == chain_id else c for c in self.chains)
        return self.model_copy(update={"chains": chains})


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Pick the config file path from the argument, env var or default."""
    if path is None:
        path = os.environ.get(CONFIG_ENV_VAR) or DEFAULT_CONFIG_PATH
    return Path(path).expanduser()


def parse_config(text: str) -> Config:
    """Parse TOML ``text`` into a :class:`Config`."""
    try:
        raw = tomllib.loads(text)
    except tomllib.TOMLDecodeError as exc:
        raise ConfigError(f"invalid TOML in config file: {exc}") from exc
    try:
        return Config.model_validate(raw)
    except ValidationError as exc:
        raise ConfigError(f"invalid configuration: {exc}") from exc


def load_config(path: str | Path | None = None) -> Config:
    """Read and validate the configuration file.

    Raises
    ------
    ConfigError
        If the file is missing, unreadable, or does not validate.
    """
    resolved = resolve_config_path(path)
    try:
        text = resolved.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise ConfigError(
            f"config file not found: {resolved}",
            hint=f"Pass --config or set {CONFIG_ENV_VAR}.",
        ) from exc
    except OSError as exc:
        raise ConfigError(f"cannot read config file {resolved}: {exc}") from exc
    return parse_config(text)
