"""
Pytest configuration and fixtures for accept_language tests.
"""

import sys
from pathlib import Path

import pytest
from loguru import logger

# Add project root to path for imports
project_dir = Path(__file__).parent.parent
sys.path.insert(0, str(project_dir))

from accept_language.core.logging_config import LIBRARY_NAME  # noqa: E402
from accept_language.models.config import settings  # noqa: E402


@pytest.fixture
def log_messages():
    """Capture the library's log messages as plain strings."""
    messages: list[str] = []
    logger.enable(LIBRARY_NAME)
    handler_id = logger.add(
        lambda message: messages.append(message.record["message"]), level="DEBUG"
    )
    try:
        yield messages
    finally:
        logger.remove(handler_id)
        logger.disable(LIBRARY_NAME)


@pytest.fixture
def override_settings(monkeypatch):
    """Temporarily override settings fields, e.g. override_settings(PRIMARY_FALLBACK=True)."""

    def _override(**values):
        for name, value in values.items():
            monkeypatch.setattr(settings, name, value)
        return settings

    return _override
