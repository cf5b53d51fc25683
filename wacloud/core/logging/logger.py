"""
Rich-based logger with phone number and recipient context for wacloud.

Context is added as message prefixes by ``ContextLogger`` so the format
strings stay simple and work with any handler.
"""

from __future__ import annotations

import logging
import os
from datetime import datetime

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

from wacloud.core.config.settings import settings


class CompactFormatter(logging.Formatter):
    """Formatter that shortens long module names for better readability."""

    def format(self, record):
        if record.name.startswith("wacloud."):
            # wacloud.messaging.whatsapp.client.whatsapp_client -> client.whatsapp_client
            parts = record.name.split(".")
            if len(parts) > 2:
                record.name = ".".join(parts[-2:])

        return super().format(record)


_theme = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
    }
)
_console = Console(theme=_theme, stderr=True)


class ContextLogger:
    """
    Logger wrapper that adds phone number and recipient context to messages.

    Context is read fresh from the context variables on every call, falling
    back to the values bound on the instance.
    """

    def __init__(
        self,
        logger: logging.Logger,
        phone_number_id: str | None = None,
        recipient: str | None = None,
    ):
        self.logger = logger
        self.phone_number_id = phone_number_id or "---"
        self.recipient = recipient or "---"

    def _format_message(self, message: str) -> str:
        """Add context prefix to message."""
        from .context import get_current_phone_number_id, get_current_recipient

        current_phone = get_current_phone_number_id() or self.phone_number_id
        current_recipient = get_current_recipient() or self.recipient

        prefix = ""
        if current_phone and current_phone != "---":
            prefix += f"[P:{current_phone}]"
        if current_recipient and current_recipient != "---":
            prefix += f"[R:{current_recipient}]"
        return f"{prefix} {message}" if prefix else message

    def debug(self, message: str, *args, **kwargs) -> None:
        self.logger.debug(self._format_message(message), *args, **kwargs)

    def info(self, message: str, *args, **kwargs) -> None:
        self.logger.info(self._format_message(message), *args, **kwargs)

    def warning(self, message: str, *args, **kwargs) -> None:
        self.logger.warning(self._format_message(message), *args, **kwargs)

    def error(self, message: str, *args, **kwargs) -> None:
        self.logger.error(self._format_message(message), *args, **kwargs)

    def critical(self, message: str, *args, **kwargs) -> None:
        self.logger.critical(self._format_message(message), *args, **kwargs)

    def exception(self, message: str, *args, **kwargs) -> None:
        self.logger.exception(self._format_message(message), *args, **kwargs)

    def bind(self, **kwargs) -> ContextLogger:
        """
        Create a new ContextLogger with additional or updated context.

        Args:
            **kwargs: ``phone_number_id`` and/or ``recipient``

        Returns:
            New ContextLogger instance with updated context

        Example:
            client_logger = logger.bind(phone_number_id="106540352242922")
        """
        return ContextLogger(
            self.logger,
            phone_number_id=kwargs.get("phone_number_id", self.phone_number_id),
            recipient=kwargs.get("recipient", self.recipient),
        )


def setup_logging(
    *,
    level: str = "INFO",
    mode: str = "PROD",
    log_dir: str | None = None,
    console_fmt: str | None = None,
    file_fmt: str | None = None,
) -> None:
    """
    Initialize the root logger with Rich formatting.

    Parameters
    ----------
    level : str
        Logging level ("DEBUG", "INFO", "WARNING", "ERROR")
    mode : str
        "DEV" creates daily log files + console; anything else → console only
    log_dir : str, optional
        Directory for log files (DEV mode only)
    console_fmt : str, optional
        Console format string
    file_fmt : str, optional
        File format string
    """
    lvl = level.upper()
    lvl = lvl if lvl in ("DEBUG", "INFO", "WARNING", "ERROR") else "INFO"

    # RichHandler already shows level and time
    console_format = console_fmt or "[%(name)s] %(message)s"
    file_format = file_fmt or "%(asctime)s | %(levelname)s | %(name)s | %(message)s"

    rich_handler = RichHandler(
        console=_console,
        rich_tracebacks=True,
        tracebacks_show_locals=False,
        show_time=True,
        show_level=True,
        markup=False,
    )
    rich_handler.setFormatter(CompactFormatter(console_format))

    handlers: list[logging.Handler] = [rich_handler]

    if mode.upper() == "DEV" and log_dir:
        os.makedirs(log_dir, exist_ok=True)
        logfile = os.path.join(log_dir, f"wacloud_{datetime.now():%Y%m%d}.log")
        file_handler = logging.FileHandler(logfile, encoding="utf-8")
        file_handler.setFormatter(CompactFormatter(file_format))
        handlers.append(file_handler)

    logging.basicConfig(level=lvl, handlers=handlers, force=True)

    setup_logger = logging.getLogger("wacloud.logging")
    setup_logger.debug(f"Logging initialized ({lvl}, mode={mode.upper()})")


def setup_app_logging() -> None:
    """Initialize logging from the environment settings."""
    setup_logging(
        level=settings.log_level,
        mode="DEV" if settings.is_development else "PROD",
        log_dir=settings.log_dir if settings.is_development else None,
    )


def get_logger(name: str) -> ContextLogger:
    """
    Get a logger that automatically uses the current request context.

    Args:
        name: Logger name (usually __name__)

    Returns:
        ContextLogger instance with automatic context from context variables
    """
    from .context import get_current_phone_number_id, get_current_recipient

    return ContextLogger(
        logging.getLogger(name),
        phone_number_id=get_current_phone_number_id(),
        recipient=get_current_recipient(),
    )
