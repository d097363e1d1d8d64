"""Logging setup for burnttoast."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
COMMAND_LOGGER = "burnttoast.powershell"


def setup_logging(config: dict[str, Any]) -> None:
    """Configure root logging from the ``logging`` section of the config.

    When ``powershell.verbose`` is set, the command logger is lowered to INFO
    so echoed PowerShell commands show up even under a stricter root level.
    """
    settings = config.get("logging", {})
    level_name = str(settings.get("level", "INFO")).upper()
    level = getattr(logging, level_name, logging.INFO)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers: list[logging.Handler] = []
    if settings.get("console", True):
        console_handler = logging.StreamHandler()
        console_handler.setFormatter(formatter)
        handlers.append(console_handler)

    file_path = str(settings.get("file") or "").strip()
    if file_path:
        path = Path(file_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(path, encoding="utf-8")
        file_handler.setFormatter(formatter)
        handlers.append(file_handler)

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(level)
    for handler in handlers:
        root.addHandler(handler)
    if not handlers:
        root.addHandler(logging.NullHandler())

    command_logger = logging.getLogger(COMMAND_LOGGER)
    powershell = config.get("powershell", {})
    if isinstance(powershell, dict) and powershell.get("verbose", False):
        command_logger.setLevel(min(level, logging.INFO))
    else:
        command_logger.setLevel(logging.NOTSET)


__all__ = ["setup_logging"]
