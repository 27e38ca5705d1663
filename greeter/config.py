"""Startup configuration read from the process environment."""

import os
from dataclasses import dataclass
from typing import Mapping, Optional

DEFAULT_PORT = "2593"
DEFAULT_HOST = "0.0.0.0"
READ_HEADER_TIMEOUT = 10.0


@dataclass(frozen=True)
class Config:
    port: str = DEFAULT_PORT
    host: str = DEFAULT_HOST
    read_header_timeout: float = READ_HEADER_TIMEOUT

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Config":
        """Build a config from ``PORT``, falling back to the default when unset or empty."""
        if environ is None:
            environ = os.environ
        port = environ.get("PORT") or DEFAULT_PORT
        return cls(port=port)

    @property
    def bind_address(self) -> str:
        return ":" + self.port
