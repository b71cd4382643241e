# ---------------------------------------------------------------------------
# File: __main__.py
# ---------------------------------------------------------------------------
# Description:
#	Demo entry point: python -m lineedit
#
# ---------------------------------------------------------------------------

from __future__ import annotations

import math

from lineedit.app.config import AppConfig
from lineedit.app.default_commands import register_default_commands
from lineedit.app.window import LineEditWindow
from lineedit.core.logging import init_logging
from lineedit.ui.tk_composer import TkWindowComposer


def build_window(window: LineEditWindow) -> None:
	"""
	Add a couple of demo commands on top of the defaults.
	"""
	register_default_commands(window)
	edit = window.create_menu("Edit")

	line = window.create_empty_line("upper_zoom", "b-")

	def _generate() -> None:
		xs: list[float] = []
		ys: list[float] = []
		with window.waiting("Generating data"):
			for i in range(500):
				xs.append(i / 10.0)
				ys.append(math.sin(i / 10.0))
				if i % 50 == 0:
					window.update_wait(i / 500.0, "Sample %d of %d", i, 500)
		line.set_data(xs, ys)
		line.set_visible(True)
		window.enable_commands(["demo.clear"])
		window.enable_charts_control()
		window.report_status("Generated %d samples", len(xs))

	def _clear() -> None:
		line.set_visible(False)
		window.disable_commands(["demo.clear"])
		window.report_status("Cleared")

	window.add_command("demo.generate", edit, "Generate", "control-g", "Generate demo data", 1, 2, _generate)
	window.add_command("demo.clear", edit, "Clear", "delete", "Hide demo data", 1, 1, _clear)
	window.enable_commands(["demo.generate"])


def main() -> None:
	cfg = AppConfig({"window.title": "lineedit", "logging.level": "INFO"})
	init_logging(cfg)

	composer = TkWindowComposer(cfg)
	window = LineEditWindow(composer, cfg)
	build_window(window)
	composer.run()


if __name__ == "__main__":
	main()
