"""
Chat bubble widget: speaker name above a rounded text box.
"""
from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QVBoxLayout, QLabel

from playchat.model.state import ChatEntry

FONT_SIZE_PX = 16


class MessageBubble(QWidget):
    def __init__(self, entry: ChatEntry, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.entry = entry
        speaker = entry.speaker
        is_left = speaker.side == "left"

        layout = QVBoxLayout(self)
        layout.setSpacing(0)
        # Indent away from the other party's side
        if is_left:
            layout.setContentsMargins(10, 10, 30, 30)
        else:
            layout.setContentsMargins(30, 10, 10, 30)

        self.lbl_name = QLabel(speaker.display_name)
        self.lbl_name.setAlignment(Qt.AlignLeft if is_left else Qt.AlignRight)
        self.lbl_name.setStyleSheet(f"font-size: {FONT_SIZE_PX}px;")
        layout.addWidget(self.lbl_name)

        self.lbl_text = QLabel(entry.text)
        self.lbl_text.setWordWrap(True)
        self.lbl_text.setAlignment(Qt.AlignLeft | Qt.AlignTop)
        self.lbl_text.setTextInteractionFlags(Qt.TextSelectableByMouse)
        self.lbl_text.setStyleSheet(
            f"background-color: {speaker.color};"
            "border-radius: 20px;"
            "padding: 10px;"
            f"font-size: {FONT_SIZE_PX}px;"
        )
        layout.addWidget(self.lbl_text)

    @property
    def text(self) -> str:
        return self.lbl_text.text()
