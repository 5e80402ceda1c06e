"""
Configuration & Path Management
===============================
This module serves as the central registry for file paths and global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents hardcoded paths scattered throughout the code.
2. Deployment: It handles the logic required by PyInstaller (sys._MEIPASS) to
   find the bundled dialogue text when the app is frozen into an .exe.
3. Storage: It resolves the writable per-user directory for the message cache.

Exports:
    ASSETS_PATH (str): Absolute path to the assets directory.
    SOURCE_TEXT_PATH (str): Absolute path to the bundled dialogue text.
    DEFAULT_INTERVAL_MS (int): Pause between two messages.
"""
import logging
import os
import sys
from pathlib import Path

from PySide6.QtCore import QStandardPaths

logger = logging.getLogger(__name__)


def get_resource_path(relative_path: str) -> str:
    """
    Get absolute path to resource, works for dev and for PyInstaller.
    """
    if hasattr(sys, '_MEIPASS'):
        # PyInstaller temp folder
        base_path: str = getattr(sys, '_MEIPASS')
        return os.path.join(base_path, relative_path)

    # Development mode: config.py is in src/playchat/
    project_root: Path = Path(__file__).parent.parent.parent
    return os.path.join(str(project_root), relative_path)


def get_messages_dir() -> Path:
    """
    Writable directory holding the encoded message files.
    Requires the application/organisation names to be set first.
    """
    base = QStandardPaths.writableLocation(QStandardPaths.StandardLocation.AppDataLocation)
    if not base:
        raise RuntimeError("No writable application data location available.")
    return Path(base) / "messages"


# Global Constants
ASSETS_PATH: str = get_resource_path("assets")
SOURCE_TEXT_PATH: str = os.path.join(ASSETS_PATH, "romeojuliet.txt")

DEFAULT_INTERVAL_MS: int = 1000

if not os.path.exists(ASSETS_PATH):
    logger.warning(f"Assets path not found at {ASSETS_PATH}")
