# =============================================================================
# core/config.py  -  Adapter configuration
# =============================================================================
#
# WHAT THIS MODULE DOES:
#   Holds the few knobs the adapter has, with documented defaults:
#     - tool_timeout:      seconds each tools/list and tools/call may take
#     - handshake_timeout: seconds the initialize exchange may take
#
# OVERRIDES:
#   AdapterConfig is frozen.  with_overrides() returns a new config; calling
#   it several times applies the changes in call order, so the last value
#   written for a field wins.
#
# ENVIRONMENT:
#   from_env() reads a .env file (python-dotenv) and then the process
#   environment, the same way the CLI picks up its settings:
#     MCP_ADAPTER_TOOL_TIMEOUT=45
#     MCP_ADAPTER_HANDSHAKE_TIMEOUT=10
# =============================================================================

import dataclasses
import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

from dotenv import find_dotenv, load_dotenv

from mcp_adk_adapter.core.errors import ConfigError


DEFAULT_TOOL_TIMEOUT = 30.0
DEFAULT_HANDSHAKE_TIMEOUT = 30.0

_ENV_PREFIX = "MCP_ADAPTER_"


@dataclass(frozen=True)
class AdapterConfig:
    """Settings applied to an McpAdapter and every tool it produces."""

    tool_timeout: float = DEFAULT_TOOL_TIMEOUT
    handshake_timeout: float = DEFAULT_HANDSHAKE_TIMEOUT

    def __post_init__(self):
        for f in dataclasses.fields(self):
            value = getattr(self, f.name)
            if isinstance(value, bool) or not isinstance(value, (int, float)):
                raise ConfigError(f"{f.name} must be a number of seconds, got {value!r}")
            if value <= 0:
                raise ConfigError(f"{f.name} must be positive, got {value!r}")

    def with_overrides(self, **changes: Any) -> "AdapterConfig":
        """Return a copy with ``changes`` applied on top of this config."""
        known = {f.name for f in dataclasses.fields(self)}
        unknown = sorted(set(changes) - known)
        if unknown:
            raise ConfigError(f"unknown config option(s): {', '.join(unknown)}")
        return dataclasses.replace(self, **changes)

    def with_tool_timeout(self, seconds: float) -> "AdapterConfig":
        return self.with_overrides(tool_timeout=seconds)

    @classmethod
    def from_env(
        cls,
        environ: Optional[Mapping[str, str]] = None,
        dotenv: bool = True,
    ) -> "AdapterConfig":
        """Build a config from MCP_ADAPTER_* variables, falling back to defaults.

        Args:
            environ: Mapping to read instead of os.environ (handy in tests).
            dotenv: Load the nearest .env file (searched from the working
                directory upwards) first.  Existing variables are not
                overwritten, so the real environment still wins.
        """
        if dotenv:
            load_dotenv(find_dotenv(usecwd=True))
        if environ is None:
            environ = os.environ

        changes: dict[str, float] = {}
        for f in dataclasses.fields(cls):
            raw = environ.get(_ENV_PREFIX + f.name.upper())
            if raw is None or not raw.strip():
                continue
            try:
                changes[f.name] = float(raw)
            except ValueError as exc:
                raise ConfigError(
                    f"{_ENV_PREFIX}{f.name.upper()} must be a number, got {raw!r}"
                ) from exc
        return cls().with_overrides(**changes)
