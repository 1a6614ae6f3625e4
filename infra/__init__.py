"""
Infrastructure module exports.

Configuration and session bootstrap for the relay.
"""

from .config import CompletionBackendType, RelayConfig, RelayConfigError, get_config
from .bootstrap import FatalBootstrapError, SessionBootstrap, bootstrap_relay

__all__ = [
    "RelayConfig",
    "get_config",
    "RelayConfigError",
    "CompletionBackendType",
    "SessionBootstrap",
    "FatalBootstrapError",
    "bootstrap_relay",
]
