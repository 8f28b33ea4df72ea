"""Core infrastructure modules for logging."""

from accept_language.core.logging_config import (
    LIBRARY_NAME,
    configure_logging,
    reset_logging,
)

__all__ = [
    "LIBRARY_NAME",
    "configure_logging",
    "reset_logging",
]
