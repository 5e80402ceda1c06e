import logging

import pytest
from PySide6.QtCore import QSettings

from playchat.application import load_settings, INTERVAL_KEY, LOG_LEVEL_KEY, LOG_FILE_KEY
from playchat.config import DEFAULT_INTERVAL_MS, SOURCE_TEXT_PATH
from playchat.model.store import load_source_text, split_paragraphs


@pytest.fixture
def settings(tmp_path, qapp):
    return QSettings(str(tmp_path / "settings.ini"), QSettings.Format.IniFormat)


def test_defaults(settings):
    result = load_settings(settings)
    assert result.interval_ms == DEFAULT_INTERVAL_MS
    assert result.log_level == logging.INFO


def test_values_are_read(settings):
    settings.setValue(INTERVAL_KEY, 250)
    settings.setValue(LOG_LEVEL_KEY, "debug")

    result = load_settings(settings)

    assert result.interval_ms == 250
    assert result.log_level == logging.DEBUG


@pytest.mark.parametrize("bad", ["soon", "-5"])
def test_invalid_interval_falls_back(settings, bad):
    settings.setValue(INTERVAL_KEY, bad)
    assert load_settings(settings).interval_ms == DEFAULT_INTERVAL_MS


def test_invalid_log_level_falls_back(settings):
    settings.setValue(LOG_LEVEL_KEY, "chatty")
    assert load_settings(settings).log_level == logging.INFO


def test_bundled_dialogue_alternates_speakers():
    paragraphs = split_paragraphs(load_source_text(SOURCE_TEXT_PATH))
    assert len(paragraphs) > 10
    assert paragraphs[0].startswith("But, soft!")
    assert paragraphs[1].startswith("O Romeo, Romeo!")


def test_log_file_setting(settings, tmp_path):
    assert load_settings(settings).log_file is None

    settings.setValue(LOG_FILE_KEY, str(tmp_path / "chat.log"))

    assert load_settings(settings).log_file == str(tmp_path / "chat.log")
