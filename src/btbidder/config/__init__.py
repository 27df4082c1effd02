"""
Adapter Configuration Module.

Provides the read-only settings passed into every adapter operation.

Usage:
    from src.btbidder.config import load_adapter_config

    config = load_adapter_config("config/adapter.yaml")
"""

from .adapter_config import (
    AdapterConfig,
    AdapterConfigError,
    RuntimeEnvironment,
    load_adapter_config,
)

__all__ = [
    "AdapterConfig",
    "AdapterConfigError",
    "RuntimeEnvironment",
    "load_adapter_config",
]
