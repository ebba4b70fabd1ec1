"""Component for presenting an event on the big screen."""

from __future__ import annotations

from typing import Callable

from PySide6.QtCore import QEvent, QObject, Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from trivia_app.constants.presentation_constants import (
    DEFAULT_SLIDE_FONT_SIZE,
    NAV_HINT_TEXT,
    REVIEW_BUTTON_TEMPLATE,
    ROUND_TAB_TEMPLATE,
)
from trivia_app.constants.ui_constants import EVENT_NOT_FOUND_MESSAGE, EXIT_BUTTON_TEXT
from trivia_app.core.presentation_manager import EventNotFoundError, PresentationManager
from trivia_app.core.services.presentation_navigator import PresentationView
from trivia_app.core.slide_renderer import render_slide_document
from trivia_app.ui.dialog_helpers import show_error

# Qt key codes translated to the key names the navigator binds.
_KEY_NAMES = {
    Qt.Key_Right: "ArrowRight",
    Qt.Key_Space: " ",
    Qt.Key_Return: "Enter",
    Qt.Key_Enter: "Enter",
    Qt.Key_Left: "ArrowLeft",
    Qt.Key_Escape: "Escape",
}


class PresentationPanel(QWidget):
    """Shows the current slide and turns clicks and keys into navigation."""

    def __init__(
        self,
        presentation_manager: PresentationManager,
        on_exit: Callable[[], None],
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.presentation_manager = presentation_manager
        self.on_exit = on_exit
        self._font_size: int = DEFAULT_SLIDE_FONT_SIZE
        self._round_tab_buttons: list[QPushButton] = []
        self._review_buttons: list[QPushButton] = []
        self._last_rendered: str | None = None

        self.setFocusPolicy(Qt.StrongFocus)
        self._build_ui()

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        # Top row: round tabs, slide counter, exit
        top_row = QHBoxLayout()
        self.round_tab_row = QHBoxLayout()
        top_row.addLayout(self.round_tab_row)
        top_row.addStretch()
        self.counter_label = QLabel("", self)
        top_row.addWidget(self.counter_label)
        self.exit_button = QPushButton(EXIT_BUTTON_TEXT, self)
        self.exit_button.setFocusPolicy(Qt.NoFocus)
        self.exit_button.clicked.connect(self._handle_exit)
        top_row.addWidget(self.exit_button)
        layout.addLayout(top_row)

        # Slide view with review buttons on the right
        body_row = QHBoxLayout()
        self.slide_view = QWebEngineView(self)
        self.slide_view.setFocusPolicy(Qt.NoFocus)
        self.slide_view.installEventFilter(self)
        self.slide_view.loadFinished.connect(self._install_view_filter)
        body_row.addWidget(self.slide_view, stretch=1)
        self.review_column = QVBoxLayout()
        body_row.addLayout(self.review_column)
        layout.addLayout(body_row, stretch=1)

        self.hint_label = QLabel(NAV_HINT_TEXT, self)
        self.hint_label.setAlignment(Qt.AlignCenter)
        layout.addWidget(self.hint_label)

    def start(self, event_id: str) -> bool:
        """Start presenting ``event_id``; returns False when it cannot be loaded."""
        try:
            view = self.presentation_manager.start_presentation(event_id)
        except EventNotFoundError:
            show_error(self, "Event not found", EVENT_NOT_FOUND_MESSAGE)
            return False
        self._rebuild_round_buttons()
        self._last_rendered = None
        self._show_view(view)
        self.setFocus()
        return True

    def set_font_size(self, size: int) -> None:
        self._font_size = size
        view = self.presentation_manager.get_view()
        if view is not None:
            self._last_rendered = None
            self._show_view(view)

    def refresh(self) -> None:
        """Pick up navigation that happened through the API."""
        view = self.presentation_manager.get_view()
        if view is not None:
            self._show_view(view)

    # --- Input ---

    def keyPressEvent(self, event) -> None:  # noqa: N802 - Qt override
        key_name = _KEY_NAMES.get(event.key())
        if key_name is None or not self.presentation_manager.has_active_presentation():
            super().keyPressEvent(event)
            return
        event.accept()
        self._apply(self.presentation_manager.handle_key(key_name))

    def eventFilter(self, watched: QObject, event: QEvent) -> bool:  # noqa: N802 - Qt override
        if event.type() == QEvent.MouseButtonRelease and self.presentation_manager.has_active_presentation():
            self._apply(self.presentation_manager.handle_click())
            return True
        if event.type() == QEvent.KeyPress:
            self.keyPressEvent(event)
            return True
        return super().eventFilter(watched, event)

    def _install_view_filter(self, _ok: bool) -> None:
        # The web view paints through a child widget that receives the input.
        proxy = self.slide_view.focusProxy()
        if proxy is not None:
            proxy.installEventFilter(self)

    def _handle_exit(self) -> None:
        self._apply(self.presentation_manager.exit())

    def _apply(self, view: PresentationView) -> None:
        if view.exit_requested:
            self.presentation_manager.end_presentation()
            self.on_exit()
            return
        self._show_view(view)

    # --- Rendering ---

    def _rebuild_round_buttons(self) -> None:
        for button in self._round_tab_buttons + self._review_buttons:
            button.deleteLater()
        self._round_tab_buttons = []
        self._review_buttons = []

        for entry in self.presentation_manager.get_round_index():
            number = entry.round_number
            tab = QPushButton(ROUND_TAB_TEMPLATE.format(number=number), self)
            tab.setCheckable(True)
            tab.setFocusPolicy(Qt.NoFocus)
            tab.setToolTip(entry.title)
            tab.clicked.connect(lambda _=False, n=number: self._apply(self.presentation_manager.jump_to_round(n)))
            self.round_tab_row.addWidget(tab)
            self._round_tab_buttons.append(tab)

            review = QPushButton(REVIEW_BUTTON_TEMPLATE.format(number=number), self)
            review.setCheckable(True)
            review.setFocusPolicy(Qt.NoFocus)
            review.clicked.connect(lambda _=False, n=number: self._apply(self.presentation_manager.review_round(n)))
            self.review_column.addWidget(review)
            self._review_buttons.append(review)

    def _show_view(self, view: PresentationView) -> None:
        self.counter_label.setText(view.counter_text)
        for button, tab in zip(self._round_tab_buttons, view.round_tabs):
            button.setChecked(tab.is_active)
        for button, review in zip(self._review_buttons, view.review_buttons):
            button.setChecked(review.is_active)

        html = render_slide_document(view, font_size=self._font_size)
        if html != self._last_rendered:
            self.slide_view.setHtml(html)
            self._last_rendered = html
