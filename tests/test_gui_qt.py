"""Tests for the Qt control surface."""

import dataclasses

import pytest

pytest.importorskip("pytestqt")

from PySide6.QtCore import Qt
from PySide6.QtGui import QGuiApplication, QKeySequence

from pwgen.charsets import CharacterClass
from pwgen.config import DEFAULT_CONFIG
from pwgen.gui_qt import GeneratorWidget, PasswordWindow


@pytest.fixture
def make_widget(qtbot):
    def _make(**changes):
        cfg = dataclasses.replace(DEFAULT_CONFIG, **changes)
        widget = GeneratorWidget(cfg)
        qtbot.addWidget(widget)
        return widget

    return _make


@pytest.fixture
def widget(make_widget):
    return make_widget()


def test_password_generated_on_start(widget):
    assert len(widget.current_password()) == 16
    assert widget.length_value_label.text() == "16"
    assert all(check.isChecked() for check in widget.class_checks.values())


def test_strength_indicator(widget):
    # 16 characters with all four classes is always Strong.
    assert widget.strength_label.text() == "Strength: Strong"
    assert widget.strength_bar.value() == 3
    assert widget.strength_bar.property("tier") == "strong"


def test_length_change_regenerates(widget):
    widget.length_slider.setValue(30)
    assert widget.length_value_label.text() == "30"
    assert len(widget.current_password()) == 30


def test_option_change_regenerates(widget):
    for cls in (CharacterClass.UPPERCASE, CharacterClass.SYMBOL, CharacterClass.LOWERCASE):
        widget.class_checks[cls].setChecked(False)
    assert widget.current_password().isdigit()
    assert widget.strength_label.text() == "Strength: Medium"


def test_unchecking_last_class_keeps_password(widget):
    for cls in (CharacterClass.UPPERCASE, CharacterClass.LOWERCASE, CharacterClass.SYMBOL):
        widget.class_checks[cls].setChecked(False)
    before = widget.current_password()

    widget.class_checks[CharacterClass.DIGIT].setChecked(False)
    assert widget.current_password() == before
    assert widget.notification_label.isHidden()


def test_generate_without_classes_notifies(widget):
    for check in widget.class_checks.values():
        check.setChecked(False)
    before = widget.current_password()

    widget.generate_button.click()
    assert widget.current_password() == before
    assert not widget.notification_label.isHidden()
    assert "Select at least one character class" in widget.notification_label.text()


def test_length_below_class_count_notifies(make_widget):
    widget = make_widget(min_length=2, password_length=4)
    before = widget.current_password()

    widget.length_slider.setValue(2)
    assert widget.current_password() == before
    assert "Error" in widget.notification_label.text()


def test_notification_hides(qtbot, widget):
    widget.notify("hello", 50)
    assert not widget.notification_label.isHidden()
    qtbot.waitUntil(widget.notification_label.isHidden, timeout=2000)


def test_copy_to_clipboard(qtbot, widget):
    widget.copy_button.click()
    assert QGuiApplication.clipboard().text() == widget.current_password()
    assert widget.copy_button.text() == "Copied!"
    assert "copied" in widget.notification_label.text()
    qtbot.waitUntil(lambda: widget.copy_button.text() == "Copy", timeout=4000)


def test_copy_without_password(widget):
    widget.password_field.clear()
    widget.copy_to_clipboard()
    assert "No password to copy" in widget.notification_label.text()


def test_clipboard_auto_clear(qtbot, make_widget):
    widget = make_widget(clipboard_clear_ms=50)
    widget.copy_to_clipboard()
    assert QGuiApplication.clipboard().text() == widget.current_password()
    qtbot.waitUntil(lambda: QGuiApplication.clipboard().text() == "", timeout=2000)


def test_clipboard_not_cleared_if_replaced(qtbot, make_widget):
    widget = make_widget(clipboard_clear_ms=50)
    widget.copy_to_clipboard()
    QGuiApplication.clipboard().setText("something else")
    qtbot.waitUntil(lambda: widget._clipboard_token is None, timeout=2000)
    assert QGuiApplication.clipboard().text() == "something else"


def test_space_shortcut_generates(widget):
    assert widget.generate_shortcut.key() == QKeySequence(Qt.Key_Space)
    seen = {widget.current_password()}
    for _ in range(5):
        widget.generate_shortcut.activated.emit()
        seen.add(widget.current_password())
    assert len(seen) > 1


def test_window_hosts_generator(qtbot):
    window = PasswordWindow()
    qtbot.addWidget(window)
    assert isinstance(window.centralWidget(), GeneratorWidget)
    assert window.windowTitle() == "Password Generator"
