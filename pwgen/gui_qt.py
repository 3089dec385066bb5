"""
Qt GUI for pwgen.

One window: length slider, character class checkboxes, generate / copy
actions, strength indicator and a transient notification line.
"""

from __future__ import annotations

import dataclasses
import logging
import sys
from typing import Optional

from PySide6.QtCore import Qt, QTimer
from PySide6.QtGui import QFont, QGuiApplication, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QProgressBar,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from .charsets import CLASS_ORDER, CharacterClass
from .config import DEFAULT_CONFIG, PasswordConfig
from .generator import InvalidSelectionError, PasswordGeneratorError, generate
from .sources import get_random_source
from .strength import StrengthTier, score

logger = logging.getLogger(__name__)

CLASS_LABELS = {
    CharacterClass.UPPERCASE: "Uppercase (A-Z)",
    CharacterClass.LOWERCASE: "Lowercase (a-z)",
    CharacterClass.DIGIT: "Digits (0-9)",
    CharacterClass.SYMBOL: "Symbols (!@#$...)",
}

# Strength bar fill per tier (bar range is 0..3).
TIER_STEPS = {
    StrengthTier.WEAK: 1,
    StrengthTier.MEDIUM: 2,
    StrengthTier.STRONG: 3,
}

COPY_FEEDBACK_MS = 2000


def _set_style_property(widget: QWidget, name: str, value: object) -> None:
    widget.setProperty(name, value)
    # Re-polish so property selectors in the stylesheet are re-evaluated.
    widget.style().unpolish(widget)
    widget.style().polish(widget)


class GeneratorWidget(QWidget):
    """
    Controls + password display. Holds the only UI state (current
    selection and current password) and calls the core on every action.
    """

    def __init__(
        self,
        config: PasswordConfig | None = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.config = dataclasses.replace(config or DEFAULT_CONFIG)
        self.config.validate()
        self.rng = get_random_source(config=self.config)

        # Secure clipboard auto-clear
        self._clipboard_token: str | None = None
        self._clipboard_timer = QTimer(self)
        self._clipboard_timer.setSingleShot(True)
        self._clipboard_timer.timeout.connect(self._on_clipboard_timeout)

        self._notification_timer = QTimer(self)
        self._notification_timer.setSingleShot(True)
        self._notification_timer.timeout.connect(self._hide_notification)

        self._copy_feedback_timer = QTimer(self)
        self._copy_feedback_timer.setSingleShot(True)
        self._copy_feedback_timer.timeout.connect(self._reset_copy_button)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_options_group())
        layout.addWidget(self._build_notification_label())
        layout.addStretch()

        # Space generates a new password.
        self.generate_shortcut = QShortcut(QKeySequence(Qt.Key_Space), self)
        self.generate_shortcut.activated.connect(self.on_generate_clicked)

        self.on_generate_clicked()

    # -- groups --

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        row = QHBoxLayout()
        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)
        self.password_field.setPlaceholderText("Your password will appear here")
        row.addWidget(self.password_field, 1)

        self.copy_button = QPushButton("Copy")
        self.copy_button.setCursor(Qt.PointingHandCursor)
        self.copy_button.clicked.connect(self.copy_to_clipboard)
        row.addWidget(self.copy_button)
        layout.addLayout(row)

        strength_row = QHBoxLayout()
        self.strength_bar = QProgressBar()
        self.strength_bar.setRange(0, len(TIER_STEPS))
        self.strength_bar.setValue(0)
        self.strength_bar.setTextVisible(False)
        self.strength_bar.setFixedHeight(8)

        self.strength_label = QLabel("Strength: –")
        strength_row.addWidget(self.strength_bar, 1)
        strength_row.addWidget(self.strength_label)
        layout.addLayout(strength_row)

        group.setLayout(layout)
        return group

    def _build_options_group(self) -> QGroupBox:
        group = QGroupBox("Options")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        length_row = QHBoxLayout()
        length_row.addWidget(QLabel("Length"))
        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(self.config.min_length, self.config.max_length)
        self.length_slider.setValue(self.config.password_length)
        self.length_slider.valueChanged.connect(self.on_length_changed)
        length_row.addWidget(self.length_slider, 1)

        self.length_value_label = QLabel(str(self.config.password_length))
        self.length_value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.length_value_label.setMinimumWidth(28)
        length_row.addWidget(self.length_value_label)
        layout.addLayout(length_row)

        self.class_checks: dict[CharacterClass, QCheckBox] = {}
        for cls in CLASS_ORDER:
            check = QCheckBox(CLASS_LABELS[cls])
            check.setChecked(cls in self.config.selection)
            check.toggled.connect(self.on_option_changed)
            self.class_checks[cls] = check
            layout.addWidget(check)

        self.generate_button = QPushButton("Generate")
        gen_font = self.generate_button.font()
        gen_font.setPointSize(13)
        gen_font.setBold(True)
        self.generate_button.setFont(gen_font)
        self.generate_button.setCursor(Qt.PointingHandCursor)
        self.generate_button.clicked.connect(self.on_generate_clicked)
        layout.addWidget(self.generate_button)

        group.setLayout(layout)
        return group

    def _build_notification_label(self) -> QLabel:
        self.notification_label = QLabel("")
        self.notification_label.setObjectName("notification")
        self.notification_label.setAlignment(Qt.AlignCenter)
        self.notification_label.setWordWrap(True)
        self.notification_label.hide()
        return self.notification_label

    # -- state --

    def selected_classes(self) -> tuple[CharacterClass, ...]:
        return tuple(cls for cls, check in self.class_checks.items() if check.isChecked())

    def current_password(self) -> str:
        return self.password_field.text()

    # -- actions --

    def on_generate_clicked(self) -> None:
        length = self.length_slider.value()
        selection = self.selected_classes()

        try:
            password = generate(length, selection, rng=self.rng)
        except InvalidSelectionError as exc:
            self.notify(f"⚠️ {exc}")
            return
        except PasswordGeneratorError as exc:
            self.notify(f"❌ Error: {exc}")
            return
        except Exception as exc:  # noqa: BLE001
            logger.exception("Password generation failed")
            self.notify(f"❌ Error: {exc}")
            return

        self.password_field.setText(password)
        self.update_strength(password)

    def update_strength(self, password: str) -> None:
        tier = score(password)
        self.strength_bar.setValue(TIER_STEPS[tier])
        _set_style_property(self.strength_bar, "tier", tier.css_class)
        self.strength_label.setText(f"Strength: {tier.label}")

    def on_length_changed(self, value: int) -> None:
        self.length_value_label.setText(str(value))
        if self.current_password():
            self.on_generate_clicked()

    def on_option_changed(self, _checked: bool = False) -> None:
        if not self.selected_classes():
            return
        if self.current_password():
            self.on_generate_clicked()

    def copy_to_clipboard(self) -> None:
        password = self.current_password()
        if not password:
            self.notify("⚠️ No password to copy", 2000)
            return

        clipboard = QGuiApplication.clipboard()
        try:
            clipboard.setText(password)
        except Exception:  # noqa: BLE001
            # Windows clipboard can be temporarily locked by other apps
            logger.warning("Clipboard unavailable", exc_info=True)
            self.notify("❌ Could not copy to clipboard", 2000)
            return

        self._arm_secure_clipboard(password)

        self.copy_button.setText("Copied!")
        _set_style_property(self.copy_button, "copied", True)
        self._copy_feedback_timer.start(COPY_FEEDBACK_MS)
        self.notify("✅ Password copied!", 2000)

    def notify(self, message: str, duration_ms: int | None = None) -> None:
        self.notification_label.setText(message)
        self.notification_label.show()
        self._notification_timer.start(
            duration_ms if duration_ms is not None else self.config.notification_ms
        )

    # -- timers --

    def _hide_notification(self) -> None:
        self.notification_label.hide()

    def _reset_copy_button(self) -> None:
        self.copy_button.setText("Copy")
        _set_style_property(self.copy_button, "copied", False)

    def _arm_secure_clipboard(self, password: str) -> None:
        """
        Start a timer to clear the clipboard after a short interval.
        Only the value we placed there is cleared.
        """
        self._clipboard_token = password
        self._clipboard_timer.start(self.config.clipboard_clear_ms)

    def _on_clipboard_timeout(self) -> None:
        if not self._clipboard_token:
            return

        cb = QGuiApplication.clipboard()
        if cb.text() == self._clipboard_token:
            cb.clear()

        self._clipboard_token = None


class PasswordWindow(QMainWindow):
    def __init__(self, config: PasswordConfig | None = None) -> None:
        super().__init__()

        self.setWindowTitle("Password Generator")
        self.setMinimumSize(480, 420)
        self.resize(520, 460)

        self._apply_base_style()

        self.generator = GeneratorWidget(config)
        self.setCentralWidget(self.generator)

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #05070c;
            }
            QWidget {
                color: #e5e7eb;
                background-color: #05070c;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #1f2933;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #080b12;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #7dd3fc;
                font-weight: 600;
            }
            QLineEdit {
                border: 1px solid #1f2933;
                border-radius: 6px;
                padding: 6px 8px;
                background-color: #050810;
                selection-background-color: #38bdf8;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #0b1120;
                border: 1px solid #38bdf8;
            }
            QPushButton:pressed {
                background-color: #000000;
            }
            QPushButton[copied="true"] {
                border: 1px solid #22c55e;
                color: #22c55e;
            }
            QProgressBar {
                border: none;
                border-radius: 4px;
                background-color: #1f2933;
            }
            QProgressBar[tier="weak"]::chunk {
                background-color: #ef4444;
            }
            QProgressBar[tier="medium"]::chunk {
                background-color: #f59e0b;
            }
            QProgressBar[tier="strong"]::chunk {
                background-color: #22c55e;
            }
            QLabel#notification {
                padding: 6px;
                border-radius: 6px;
                background-color: #111827;
            }
            """
        )


def main() -> None:
    logging.basicConfig(level=logging.WARNING, format="%(levelname)s: %(message)s")
    app = QApplication(sys.argv)
    window = PasswordWindow()
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
