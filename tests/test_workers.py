import time

from PySide6.QtCore import Qt

from playchat.controller.workers import ConversationWorker
from playchat.model import cipher


def _collect(worker):
    events = []
    worker.message_loaded.connect(lambda i, text: events.append(("message", i, text)))
    worker.exhausted.connect(lambda count: events.append(("exhausted", count)))
    worker.read_failed.connect(lambda reason: events.append(("read_failed", reason)))
    worker.write_failed.connect(lambda reason: events.append(("write_failed", reason)))
    worker.error_occurred.connect(lambda reason: events.append(("error_occurred", reason)))
    return events


def test_run_writes_then_streams_messages(qapp, source_file, tmp_path):
    messages_dir = tmp_path / "cache"
    worker = ConversationWorker(source_file, messages_dir, interval_ms=0)
    events = _collect(worker)

    worker.run()

    assert events == [
        ("message", 0, "Hello world"),
        ("message", 1, "Goodbye"),
        ("exhausted", 2),
    ]
    assert (messages_dir / "0.rot").read_text(encoding="utf-8") == cipher.encode("Hello world")


def test_missing_source_is_a_write_failure(qapp, tmp_path):
    worker = ConversationWorker(tmp_path / "missing.txt", tmp_path / "cache", interval_ms=0)
    events = _collect(worker)

    worker.run()

    assert len(events) == 1
    assert events[0][0] == "write_failed"


def test_unwritable_directory_is_a_write_failure(qapp, source_file, tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    worker = ConversationWorker(source_file, blocker, interval_ms=0)
    events = _collect(worker)

    worker.run()

    assert [e[0] for e in events] == ["write_failed"]


def test_stop_before_run_emits_nothing_after_write(qapp, source_file, tmp_path):
    worker = ConversationWorker(source_file, tmp_path / "cache", interval_ms=0)
    events = _collect(worker)

    worker.stop()
    worker.run()

    assert events == []
    # Materialisation still happened
    assert (tmp_path / "cache" / "1.rot").exists()


def test_stop_during_stream(qapp, source_file, tmp_path):
    worker = ConversationWorker(source_file, tmp_path / "cache", interval_ms=0)
    events = []

    def on_message(index, text):
        events.append(index)
        worker.stop()

    worker.message_loaded.connect(on_message)
    worker.exhausted.connect(lambda count: events.append("exhausted"))

    worker.run()

    assert events == [0]


def test_threaded_run_finishes(qapp, source_file, tmp_path):
    worker = ConversationWorker(source_file, tmp_path / "cache", interval_ms=0)
    worker.start()
    assert worker.wait(5000)
    assert worker.loader.next_index == 2


def test_unreadable_message_reports_read_failure(qapp, source_file, tmp_path):
    messages_dir = tmp_path / "cache"
    worker = ConversationWorker(source_file, messages_dir, interval_ms=0)
    events = _collect(worker)

    def break_next_file(index, text):
        # Replace 1.rot with something that exists but cannot be read
        if index == 0:
            (messages_dir / "1.rot").unlink()
            (messages_dir / "1.rot").mkdir()

    worker.message_loaded.connect(break_next_file)
    worker.run()

    assert [e[0] for e in events] == ["message", "read_failed"]
    assert "1.rot" in events[1][1]


def test_unexpected_error_is_reported(qapp, source_file, tmp_path):
    worker = ConversationWorker(source_file, tmp_path / "cache", interval_ms=0)
    events = _collect(worker)

    def explode(text):
        raise RuntimeError("boom")

    worker.store.write_all = explode
    worker.run()

    assert events == [("error_occurred", "boom")]


def test_messages_are_paced(qapp, source_file, tmp_path):
    worker = ConversationWorker(source_file, tmp_path / "cache", interval_ms=150)
    stamps = []
    worker.message_loaded.connect(lambda index, text: stamps.append(time.monotonic()))

    worker.run()

    assert len(stamps) == 2
    assert stamps[1] - stamps[0] >= 0.14


def test_stop_interrupts_long_pause(qapp, source_file, tmp_path):
    worker = ConversationWorker(source_file, tmp_path / "cache", interval_ms=10000)
    events = []
    # Slots run in the worker thread, no event loop needed here
    worker.message_loaded.connect(lambda index, text: events.append(index), Qt.ConnectionType.DirectConnection)
    worker.exhausted.connect(lambda count: events.append("exhausted"), Qt.ConnectionType.DirectConnection)
    worker.start()

    deadline = time.monotonic() + 5.0
    while not events and time.monotonic() < deadline:
        time.sleep(0.01)
    assert events == [0]

    started = time.monotonic()
    worker.stop()
    assert worker.wait(2000)

    assert time.monotonic() - started < 0.5
    assert events == [0]
