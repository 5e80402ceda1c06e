import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session")
def qapp():
    app = QApplication.instance() or QApplication([])
    yield app


@pytest.fixture
def source_file(tmp_path):
    path = tmp_path / "dialogue.txt"
    path.write_text("Hello world\n\nGoodbye\n", encoding="utf-8")
    return path
