from __future__ import annotations

import logging
import os
import sys
from dataclasses import dataclass
from typing import Optional

from PySide6.QtCore import QCoreApplication, QSettings
from PySide6.QtWidgets import QApplication

from playchat.config import DEFAULT_INTERVAL_MS

logger = logging.getLogger(__name__)

ORG_ID = "playchat"
APP_ID = "playchat"

VISIBLE_APP_NAME = "Romeo Juliet"

INTERVAL_KEY = "chat/interval_ms"
LOG_LEVEL_KEY = "logging/level"
LOG_FILE_KEY = "logging/file"


@dataclass
class AppSettings:
    interval_ms: int = DEFAULT_INTERVAL_MS
    log_level: int = logging.INFO
    log_file: Optional[str] = None


def load_settings(settings: QSettings | None = None) -> AppSettings:
    """Read user settings, falling back to defaults for missing or invalid values."""
    settings = settings if settings is not None else QSettings()
    result = AppSettings()

    raw_interval = settings.value(INTERVAL_KEY, DEFAULT_INTERVAL_MS)
    try:
        interval = int(raw_interval)
        if interval < 0:
            raise ValueError("negative interval")
        result.interval_ms = interval
    except (TypeError, ValueError):
        logger.warning(f"Invalid {INTERVAL_KEY}={raw_interval!r}, using {DEFAULT_INTERVAL_MS} ms.")

    raw_level = settings.value(LOG_LEVEL_KEY, "INFO")
    level = logging.getLevelName(str(raw_level).upper())
    if isinstance(level, int):
        result.log_level = level
    else:
        logger.warning(f"Invalid {LOG_LEVEL_KEY}={raw_level!r}, using INFO.")

    # Empty means console only
    raw_file = settings.value(LOG_FILE_KEY, "")
    if raw_file:
        result.log_file = str(raw_file)

    return result


def create_app() -> QApplication:
    """Create and configure the QApplication instance."""
    os.environ.setdefault("QT_ENABLE_HIGHDPI_SCALING", "1")

    QCoreApplication.setOrganizationName(ORG_ID)
    QCoreApplication.setApplicationName(APP_ID)
    QSettings.setDefaultFormat(QSettings.Format.IniFormat)

    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationDisplayName(VISIBLE_APP_NAME)
    return app
