"""
Main Application Window
=======================
Scrollable chat view. It only reads from the ConversationStore and redraws
on its signals, it never touches the message files.
"""
import logging
from typing import List

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QScrollArea, QMessageBox, QApplication
)

from playchat.application import VISIBLE_APP_NAME
from playchat.model.state import ConversationStore, ChatEntry
from playchat.view.widgets.message_bubble import MessageBubble

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, store: ConversationStore) -> None:
        super().__init__()
        self.store = store
        self.bubbles: List[MessageBubble] = []

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(420, 760)

        # --- SCROLLABLE MESSAGE COLUMN ---
        self.scroll = QScrollArea()
        self.scroll.setWidgetResizable(True)
        self.scroll.setHorizontalScrollBarPolicy(Qt.ScrollBarAlwaysOff)

        container = QWidget()
        self.messages_layout = QVBoxLayout(container)
        self.messages_layout.setContentsMargins(0, 25, 0, 25)
        self.messages_layout.addStretch()
        self.scroll.setWidget(container)
        self.setCentralWidget(self.scroll)

        self.statusBar().showMessage("Loading conversation...")

        # --- SIGNAL CONNECTIONS ---
        self.store.message_appended.connect(self.on_message_appended)
        self.store.finished.connect(self.on_conversation_finished)
        self.store.failed.connect(self.on_conversation_failed)

        # Messages already in the store (window created late)
        for entry in self.store.messages:
            self._add_bubble(entry)

    def _add_bubble(self, entry: ChatEntry) -> MessageBubble:
        bubble = MessageBubble(entry)
        # Keep the stretch as the last item
        self.messages_layout.insertWidget(self.messages_layout.count() - 1, bubble)
        self.bubbles.append(bubble)
        return bubble

    # --- SLOTS ---

    def on_message_appended(self, entry: ChatEntry) -> None:
        self._add_bubble(entry)
        # Scroll once the layout has accounted for the new bubble
        QTimer.singleShot(0, self.scroll_to_bottom)

    def scroll_to_bottom(self) -> None:
        bar = self.scroll.verticalScrollBar()
        bar.setValue(bar.maximum())

    def on_conversation_finished(self, count: int) -> None:
        self.statusBar().showMessage(f"Conversation finished ({count} messages).")

    def on_conversation_failed(self, reason: str) -> None:
        self.statusBar().showMessage("Conversation interrupted.")
        QMessageBox.warning(self, "Cannot load message", reason)

    def on_fatal_error(self, reason: str) -> None:
        logger.critical(f"Cannot prepare conversation: {reason}")
        QMessageBox.critical(self, "Cannot prepare conversation", reason)
        QApplication.exit(1)
