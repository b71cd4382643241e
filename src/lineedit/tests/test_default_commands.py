# ---------------------------------------------------------------------------
# File: test_default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for default command registration.
#
# Notes:
#	- Headless: MemoryComposer only.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/31/2025	Paul G. LeDuc				Initial tests
# 01/13/2026	Paul G. LeDuc				Rewrite for LineEditWindow
# ---------------------------------------------------------------------------

from __future__ import annotations

from lineedit.app.default_commands import ABOUT, QUIT, register_default_commands
from lineedit.app.dispatcher import DispatchOutcome
from lineedit.app.window import LineEditWindow
from lineedit.ui.memory_composer import MemoryComposer


def _window() -> tuple[LineEditWindow, MemoryComposer]:
	composer = MemoryComposer()
	return LineEditWindow(composer), composer


def test_defaults_create_file_menu_without_buttons():
	w, composer = _window()

	menu = register_default_commands(w)

	assert menu.menu_title == "File"
	assert [e.label for e in menu.entries] == ["About", "Quit"]
	assert composer.controls == []
	assert w.commands.names() == [ABOUT, QUIT]
	assert all(c.enabled for c in w.commands)


def test_defaults_use_given_menu():
	w, composer = _window()
	menu = w.create_menu("Help")

	assert register_default_commands(w, menu) is menu
	assert len(composer.menus) == 1


def test_quit_accelerator_and_key():
	w, composer = _window()
	menu = register_default_commands(w)

	assert [e.accelerator for e in menu.entries] == [None, "q"]

	assert composer.press(("control",), "q") is DispatchOutcome.FIRED
	assert composer.closed is True


def test_about_reports_status():
	w, composer = _window()
	register_default_commands(w)

	assert composer.press((), "f1") is DispatchOutcome.FIRED
	assert composer.status_fields[0].text == "lineedit: edit linear data (2 commands)"
