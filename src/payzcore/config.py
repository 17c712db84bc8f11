"""Client configuration."""
from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_BASE_URL = "https://api.payzcore.com"
DEFAULT_TIMEOUT = 30.0
DEFAULT_MAX_RETRIES = 2

_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class ClientConfig:
    """Transport settings for one client instance.

    Attributes:
        base_url: API root, without trailing slashes
        timeout: Per-attempt timeout in seconds
        max_retries: Extra attempts after the first on 5xx or network failures
        master_key: Authenticate with ``x-master-key`` instead of ``x-api-key``
    """

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    master_key: bool = False

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_url", self.base_url.rstrip("/"))
        if self.timeout <= 0:
            raise ValueError("timeout must be positive")
        if self.max_retries < 0:
            raise ValueError("max_retries must not be negative")

    @property
    def auth_header(self) -> str:
        """Name of the header carrying the API key."""
        return "x-master-key" if self.master_key else "x-api-key"

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Build a config from ``PAYZCORE_*`` environment variables."""
        return cls(
            base_url=os.getenv("PAYZCORE_BASE_URL", DEFAULT_BASE_URL),
            timeout=float(os.getenv("PAYZCORE_TIMEOUT", str(DEFAULT_TIMEOUT))),
            max_retries=int(os.getenv("PAYZCORE_MAX_RETRIES", str(DEFAULT_MAX_RETRIES))),
            master_key=os.getenv("PAYZCORE_MASTER_KEY", "").strip().lower() in _TRUTHY,
        )
