"""Transport configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_URL = "http://localhost:8545"
JSONRPC_VERSION = "2.0"

_FALSE_VALUES = ("0", "false", "no", "off")


@dataclass
class TransportConfig:
    """Settings shared by the HTTP transports."""

    # Connection settings
    url: str = DEFAULT_URL
    timeout: float = 30.0
    headers: dict[str, str] = field(default_factory=dict)

    # Compatibility knob: None drops the "jsonrpc" tag from requests
    jsonrpc_version: str | None = JSONRPC_VERSION

    @classmethod
    def from_env(cls, **overrides: object) -> TransportConfig:
        """Build a config from ETHRPC_* environment variables.

        - ETHRPC_URL: node endpoint
        - ETHRPC_TIMEOUT: request timeout in seconds
        - ETHRPC_JSONRPC_TAG: set to 0/false/no/off to omit the "jsonrpc" tag

        Keyword overrides win over the environment.
        """
        config = cls(
            url=os.environ.get("ETHRPC_URL", DEFAULT_URL),
            timeout=float(os.environ.get("ETHRPC_TIMEOUT", "30")),
        )
        tag = os.environ.get("ETHRPC_JSONRPC_TAG")
        if tag is not None and tag.strip().lower() in _FALSE_VALUES:
            config.jsonrpc_version = None

        for key, value in overrides.items():
            if not hasattr(config, key):
                raise TypeError(f"Unknown TransportConfig field: {key}")
            setattr(config, key, value)
        return config
