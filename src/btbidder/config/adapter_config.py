"""
Adapter Configuration Management

Loads the host-wide settings the adapter reads during an auction: debug
flag, ad-server currency, page URL and the runtime environment used to
derive device data when the host supplies none.

Settings come from a YAML file, then environment variable overrides,
then built-in defaults.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from ..utils.constants import (
    DEFAULT_CURRENCY,
    DEFAULT_TTL,
    ENDPOINT_URL,
    NET_REVENUE,
    SYNC_URL,
)


class AdapterConfigError(Exception):
    """Raised when adapter configuration cannot be loaded."""
    pass


@dataclass(frozen=True)
class RuntimeEnvironment:
    """
    Runtime values a browser would expose to the adapter.

    Attributes:
        user_agent: The user agent string of the page's browser
        viewport_width: Viewport width in CSS pixels
        viewport_height: Viewport height in CSS pixels
        language: Two-letter browser language
        opera_mini: Whether the Opera Mini global object is present
    """

    user_agent: str = ""
    viewport_width: int | None = None
    viewport_height: int | None = None
    language: str | None = None
    opera_mini: bool = False

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "RuntimeEnvironment":
        """Create from dictionary."""
        return cls(
            user_agent=data.get("user_agent", ""),
            viewport_width=data.get("viewport_width"),
            viewport_height=data.get("viewport_height"),
            language=data.get("language"),
            opera_mini=bool(data.get("opera_mini", False)),
        )


@dataclass(frozen=True)
class AdapterConfig:
    """Complete read-only configuration for the bid adapter."""

    debug: bool = False
    currency: str = DEFAULT_CURRENCY
    page_url: str = ""
    ttl: int = DEFAULT_TTL
    net_revenue: bool = NET_REVENUE
    endpoint_url: str = ENDPOINT_URL
    sync_url: str = SYNC_URL
    runtime: RuntimeEnvironment = field(default_factory=RuntimeEnvironment)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AdapterConfig":
        """Create from dictionary."""
        ttl = data.get("ttl", DEFAULT_TTL)
        if not isinstance(ttl, int) or isinstance(ttl, bool) or ttl <= 0:
            raise AdapterConfigError(f"ttl must be a positive integer, got {ttl!r}")

        return cls(
            debug=bool(data.get("debug", False)),
            currency=str(data.get("currency") or DEFAULT_CURRENCY).upper(),
            page_url=data.get("page_url", "") or "",
            ttl=ttl,
            net_revenue=bool(data.get("net_revenue", NET_REVENUE)),
            endpoint_url=data.get("endpoint_url", ENDPOINT_URL),
            sync_url=data.get("sync_url", SYNC_URL),
            runtime=RuntimeEnvironment.from_dict(data.get("runtime", {}) or {}),
        )

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "debug": self.debug,
            "currency": self.currency,
            "page_url": self.page_url,
            "ttl": self.ttl,
            "net_revenue": self.net_revenue,
            "endpoint_url": self.endpoint_url,
            "sync_url": self.sync_url,
            "runtime": {
                "user_agent": self.runtime.user_agent,
                "viewport_width": self.runtime.viewport_width,
                "viewport_height": self.runtime.viewport_height,
                "language": self.runtime.language,
                "opera_mini": self.runtime.opera_mini,
            },
        }


def _env_flag(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay BT_* environment variables on file settings."""
    result = dict(data)
    if "BT_DEBUG" in os.environ:
        result["debug"] = _env_flag(os.environ["BT_DEBUG"])
    if os.environ.get("BT_CURRENCY"):
        result["currency"] = os.environ["BT_CURRENCY"]
    if os.environ.get("BT_PAGE_URL"):
        result["page_url"] = os.environ["BT_PAGE_URL"]
    return result


def load_adapter_config(path: str | Path | None = None) -> AdapterConfig:
    """
    Load adapter configuration.

    Args:
        path: YAML file to read. Defaults to BT_CONFIG_PATH; when neither
              is set, or the file does not exist, only environment
              overrides and defaults apply.

    Returns:
        AdapterConfig

    Raises:
        AdapterConfigError: If the file is not valid YAML or not a mapping
    """
    if path is None:
        path = os.environ.get("BT_CONFIG_PATH")

    data: dict[str, Any] = {}
    if path is not None:
        config_path = Path(path)
        if config_path.exists():
            try:
                with open(config_path) as f:
                    loaded = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise AdapterConfigError(f"YAML error in {config_path}: {e}") from e

            if loaded is None:
                loaded = {}
            if not isinstance(loaded, dict):
                raise AdapterConfigError(
                    f"{config_path} must contain a mapping, got {type(loaded).__name__}"
                )
            data = loaded.get("adapter", loaded)

    return AdapterConfig.from_dict(_apply_env_overrides(data))
