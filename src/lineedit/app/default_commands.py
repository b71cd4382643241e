# ---------------------------------------------------------------------------
# File: default_commands.py
# ---------------------------------------------------------------------------
# Description:
#	Default commands every lineedit window gets.
#
# Notes:
#	- Menu-only (no buttons): the button region belongs to the tool.
#	- Registered then enabled straight away; nothing here depends on data.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/31/2025	Paul G. LeDuc				Initial coding / release
# 01/13/2026	Paul G. LeDuc				Register through LineEditWindow.add_command
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

from lineedit.ui.composer import MenuContainer

if TYPE_CHECKING:
	from lineedit.app.window import LineEditWindow


APP_NAME = "lineedit"

ABOUT = "app.about"
QUIT = "app.quit"


def register_default_commands(
	window: "LineEditWindow",
	menu: Optional[MenuContainer] = None,
) -> MenuContainer:
	"""
	Add About + Quit to `menu` (a new "File" menu if not given).
	"""
	target = menu if menu is not None else window.create_menu("File")

	def _about() -> None:
		window.report_status("%s: edit linear data (%d commands)", APP_NAME, len(window.commands))

	def _quit() -> None:
		window.close()

	window.add_command(ABOUT, target, "About", "f1", "Show application information", 0, 0, _about)
	window.add_command(QUIT, target, "Quit", "control-q", "Exit", 0, 0, _quit)

	window.enable_commands([ABOUT, QUIT])
	return target
