"""
Application Initialization
==========================
This module wires the conversation together and starts the Qt Event Loop.

Why is this file needed?
------------------------
It acts as the "Dependency Injection" root. It:
1. Instantiates the ConversationStore (Model).
2. Instantiates the Main Window (View).
3. Starts the ConversationWorker (Controller) and routes its signals.
"""
import logging
import sys

from playchat.application import create_app, load_settings
from playchat.config import SOURCE_TEXT_PATH, get_messages_dir
from playchat.controller.workers import ConversationWorker
from playchat.logging_config import setup_logging
from playchat.model.state import ConversationStore
from playchat.view.main_window import MainWindow

logger = logging.getLogger(__name__)


def connect_worker(worker: ConversationWorker, store: ConversationStore, window: MainWindow) -> None:
    """Route worker signals to the store (queued into the GUI thread) and the window."""
    worker.message_loaded.connect(store.append)
    worker.exhausted.connect(store.mark_finished)
    worker.read_failed.connect(store.mark_failed)
    worker.error_occurred.connect(store.mark_failed)
    worker.write_failed.connect(window.on_fatal_error)


def main() -> int:
    # 1. Create the Qt Application (also sets the names QSettings relies on)
    app = create_app()

    # 2. Logging with defaults first so settings warnings are formatted too
    setup_logging()
    settings = load_settings()
    setup_logging(level=settings.log_level, log_file=settings.log_file)

    # 3. Model and View
    store = ConversationStore()
    window = MainWindow(store)
    window.show()

    # 4. Background worker owning the message files
    try:
        messages_dir = get_messages_dir()
    except RuntimeError as e:
        window.on_fatal_error(str(e))
        return 1
    logger.info(f"Message cache directory: {messages_dir}")

    worker = ConversationWorker(
        source_path=SOURCE_TEXT_PATH,
        messages_dir=messages_dir,
        interval_ms=settings.interval_ms,
    )
    connect_worker(worker, store, window)

    def shutdown() -> None:
        worker.stop()
        worker.wait()

    app.aboutToQuit.connect(shutdown)
    worker.start()

    # 5. Start Event Loop
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
