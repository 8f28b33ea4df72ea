"""
Loguru logging configuration.

The library logs under the "accept_language" name and stays silent until the
host application calls configure_logging (or logger.enable itself).

Features:
- Console logging for development
- Structured JSON logging for production
- Optional rotating log file
"""

import sys

from loguru import logger

from accept_language.models.config import get_settings

LIBRARY_NAME = "accept_language"

# Handler IDs added by configure_logging; host sinks are never touched
_handler_ids: list[int] = []


def configure_logging(
    environment: str | None = None,
    level: str | None = None,
    log_file: str | None = None,
) -> None:
    """
    Configure Loguru sinks for the library and enable its log messages.

    Only the sinks added by a previous call are replaced. Sinks registered
    by the host application, including Loguru's default one, are left alone,
    and the sinks added here only receive the library's own records.

    Args:
        environment: "development" for console, anything else for JSON.
            Defaults to the ENVIRONMENT setting.
        level: Minimum level. Defaults to the LOG_LEVEL setting, then to
            DEBUG in development and INFO elsewhere.
        log_file: Optional path of a rotating log file.
    """
    settings = get_settings()
    environment = environment or settings.ENVIRONMENT
    development = environment == "development"
    level = level or settings.LOG_LEVEL or ("DEBUG" if development else "INFO")

    _remove_handlers()

    log_format = (
        "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | "
        "<level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> | "
        "<level>{message}</level>"
    )

    if development:
        _handler_ids.append(
            logger.add(
                sys.stderr,
                format=log_format,
                level=level,
                filter=LIBRARY_NAME,
                colorize=True,
            )
        )
    else:
        # JSON format for production (machine-parseable)
        _handler_ids.append(
            logger.add(
                sys.stderr,
                format="{message}",
                level=level,
                filter=LIBRARY_NAME,
                serialize=True,
            )
        )

    if log_file:
        _handler_ids.append(
            logger.add(
                log_file,
                format=log_format if development else "{message}",
                level=level,
                filter=LIBRARY_NAME,
                rotation="10 MB",
                retention="7 days",
                serialize=not development,
            )
        )

    logger.enable(LIBRARY_NAME)


def reset_logging() -> None:
    """Remove the library's sinks and silence it again."""
    _remove_handlers()
    logger.disable(LIBRARY_NAME)


def _remove_handlers() -> None:
    while _handler_ids:
        logger.remove(_handler_ids.pop())
