# ---------------------------------------------------------------------------
# File: test_window.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for LineEditWindow on top of MemoryComposer.
#
# Notes:
#	- Headless: no Tkinter, no matplotlib.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/17/2025	Paul G. LeDuc				Initial tests (App)
# 01/10/2026	Paul G. LeDuc				Rewrite for LineEditWindow
# 01/12/2026	Paul G. LeDuc				Cover waiting + chart control
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from lineedit.app.dispatcher import DispatchOutcome
from lineedit.app.errors import ProgressError, UnknownCommand
from lineedit.app.window import CHART_LAYOUT, STATUS_POSITION, LineEditWindow
from lineedit.ui.composer import GridRect
from lineedit.ui.memory_composer import MemoryComposer


class FakeZoomer:
	def __init__(self, full, zoom) -> None:
		self.full = full
		self.zoom = zoom
		self.mouse_inputs: list[int] = []

	def handle_mouse_input(self, chart_index: int) -> None:
		self.mouse_inputs.append(chart_index)


def _window(cfg=None, **kwargs) -> tuple[LineEditWindow, MemoryComposer]:
	composer = MemoryComposer()
	return LineEditWindow(composer, cfg, **kwargs), composer


# ---------------------------------------------------------------------------
# Layout
# ---------------------------------------------------------------------------

def test_window_builds_four_charts_and_status_field():
	w, composer = _window()

	assert [c.position for c in composer.charts] == list(CHART_LAYOUT.values())
	assert composer.charts[0].position == GridRect(1.0, 22.25, 23.0, 1.75)
	assert composer.charts[3].position == GridRect(1.0, 1.0, 17.0, 8.75)

	assert len(composer.status_fields) == 1
	assert composer.status_fields[0].position == STATUS_POSITION


def test_upper_charts_hide_x_tick_labels():
	w, _ = _window()

	assert w.charts["upper_full"].x_tick_labels is False
	assert w.charts["upper_zoom"].x_tick_labels is False
	assert w.charts["lower_full"].x_tick_labels is True
	assert w.charts["lower_zoom"].x_tick_labels is True


def test_charts_start_without_navigation():
	w, _ = _window()
	assert not any(c.interactive for c in w.charts.values())


def test_title_from_config():
	_, composer = _window({"window.title": "Trace editor"})
	assert composer.title == "Trace editor"


def test_keypress_handler_is_bound():
	w, composer = _window()
	assert composer.key_handler is not None


# ---------------------------------------------------------------------------
# Zoomer
# ---------------------------------------------------------------------------

def test_zoomer_gets_chart_pairs_and_view_only_chart():
	made: list[FakeZoomer] = []

	def _factory(full, zoom):
		z = FakeZoomer(full, zoom)
		made.append(z)
		return z

	w, _ = _window(zoomer_factory=_factory)

	assert w.zoomer is made[0]
	assert made[0].full == (w.charts["upper_full"], w.charts["lower_full"])
	assert made[0].zoom == (w.charts["upper_zoom"], w.charts["lower_zoom"])
	assert made[0].mouse_inputs == [2]


def test_no_zoomer_by_default():
	w, _ = _window()
	assert w.zoomer is None


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------

def test_add_enable_and_press():
	w, composer = _window()
	calls: list[str] = []

	w.add_command("clear", None, "Clear", "delete", "Clear all", 1, 1, lambda: calls.append("clear"))

	assert composer.press((), "delete") is DispatchOutcome.DISABLED
	composer.control_labeled("Clear").click()
	assert calls == []

	w.enable_commands(["clear"])

	assert composer.press((), "delete") is DispatchOutcome.FIRED
	composer.control_labeled("Clear").click()
	assert calls == ["clear", "clear"]

	w.disable_commands()
	assert w.handle_keypress([], "delete") is DispatchOutcome.DISABLED


def test_same_callback_on_every_surface():
	w, composer = _window()
	calls: list[str] = []
	menu = w.create_menu("Edit")

	w.add_command("undo", menu, "Undo", "control-z", "Undo", 2, 1, lambda: calls.append("undo"))
	w.enable_commands("undo")

	composer.controls[0].click()
	menu.entries[0].select()
	composer.press(("control",), "z")

	assert calls == ["undo", "undo", "undo"]
	assert menu.entries[0].accelerator == "z"


def test_rename_command_keeps_binding_and_state():
	w, composer = _window()
	menu = w.create_menu("Edit")
	w.add_command("save", menu, "Save", "control-s", "", 1, 1, lambda: None)

	w.rename_command("save", "Save As…")

	assert composer.controls[0].label == "Save As…"
	assert menu.entries[0].label == "Save As…"
	assert w.commands.get("save").key_binding == "control-s"
	assert w.commands.get("save").enabled is False


def test_enable_unknown_command_raises():
	w, _ = _window()
	with pytest.raises(UnknownCommand):
		w.enable_commands(["nope"])


def test_failing_command_shows_on_status_field():
	w, composer = _window()

	def _boom() -> None:
		raise RuntimeError("no data")

	w.add_command("fit", None, "Fit", "f", "", 1, 1, _boom)
	w.enable_commands()

	composer.controls[0].click()
	assert composer.status_fields[0].text == "Fit failed: no data"

	assert composer.press((), "f") is DispatchOutcome.FAILED


def test_shared_bindings_from_config():
	w, _ = _window({"keys.allow_shared_bindings": True})

	w.add_command("a", None, "A", "x", "", 0, 0, lambda: None)
	w.add_command("b", None, "B", "x", "", 0, 0, lambda: None)

	assert w.commands.names() == ["a", "b"]


# ---------------------------------------------------------------------------
# Charts
# ---------------------------------------------------------------------------

def test_create_empty_line_is_hidden():
	w, _ = _window()

	line = w.create_empty_line("upper_zoom", "b-")

	assert line.visible is False
	assert line.style == "b-"
	assert w.charts["upper_zoom"].lines == [line]


def test_create_empty_line_unknown_chart():
	w, _ = _window()
	with pytest.raises(KeyError):
		w.create_empty_line("sidebar", "r-")


def test_chart_control_toggles_all_charts():
	w, _ = _window()

	w.enable_charts_control()
	assert all(c.interactive for c in w.charts.values())

	w.disable_charts_control()
	assert not any(c.interactive for c in w.charts.values())


# ---------------------------------------------------------------------------
# Status / title
# ---------------------------------------------------------------------------

def test_report_status_formats_and_refreshes():
	w, composer = _window()
	before = composer.refresh_count

	text = w.report_status("Loaded %d points from %s", 120, "trace.csv")

	assert text == "Loaded 120 points from trace.csv"
	assert composer.status_fields[0].text == text
	assert composer.refresh_count == before + 1


def test_report_status_replaces_previous_text():
	w, composer = _window()

	w.report_status("one")
	w.report_status("two")

	assert composer.status_fields[0].text == "two"
	assert composer.status_fields[0].history == ["one", "two"]


def test_set_window_title():
	w, composer = _window()
	assert w.set_window_title("Editing %s", "run_7") == "Editing run_7"
	assert composer.title == "Editing run_7"


def test_mirror_logs_to_status():
	w, composer = _window({"status.mirror_logs": True})
	logger = logging.getLogger("lineedit.app.tool")

	try:
		logger.warning("Gap at %d", 40)
		assert composer.status_fields[0].text == "WARNING: Gap at 40"
	finally:
		w.close()


def test_closed_window_stops_mirroring_logs():
	base = logging.getLogger("lineedit.app")
	before = list(base.handlers)

	first, first_composer = _window({"status.mirror_logs": True})
	first.close()
	assert base.handlers == before

	second, second_composer = _window({"status.mirror_logs": True})
	try:
		assert second.handle_keypress(("shift",), "z") is DispatchOutcome.UNHANDLED

		assert second_composer.status_fields[0].text == 'WARNING: Unhandled key: "shift-z"'
		assert first_composer.status_fields[0].history == []
	finally:
		second.close()

	assert base.handlers == before


# ---------------------------------------------------------------------------
# Waiting
# ---------------------------------------------------------------------------

def test_wait_start_update_end():
	w, composer = _window()

	w.start_wait("Loading")
	assert composer.busy is True
	assert composer.progress[0].title == "Loading"

	w.update_wait(0.5, "Read %d of %d", 5, 10)
	w.end_wait()

	p = composer.progress[0]
	assert p.updates == [(0.0, "Loading"), (0.5, "Read 5 of 10")]
	assert p.dismissed is True
	assert composer.busy is False
	assert composer.busy_history == [True, False]


def test_waiting_context_cleans_up_on_error():
	w, composer = _window()

	with pytest.raises(RuntimeError):
		with w.waiting("Fitting"):
			raise RuntimeError("diverged")

	assert composer.progress[0].dismissed is True
	assert composer.busy is False
	assert w.progress.active is False


def test_update_wait_outside_wait_raises():
	w, _ = _window()
	with pytest.raises(ProgressError):
		w.update_wait(0.1, "x")


def test_close_closes_composer():
	w, composer = _window()
	w.close()
	assert composer.closed is True


def test_failing_command_ends_open_wait():
	w, composer = _window()

	def _load() -> None:
		w.start_wait("Loading")
		raise RuntimeError("file vanished")

	w.add_command("load", None, "Load", "control-l", "", 0, 0, _load)
	w.enable_commands()

	assert composer.press(("control",), "l") is DispatchOutcome.FAILED

	assert w.progress.active is False
	assert composer.progress[0].dismissed is True
	assert composer.busy is False
	assert composer.status_fields[0].text == "Load failed: file vanished"

	# Window still usable: a new wait can start
	with w.waiting("Again"):
		pass
	assert composer.busy_history == [True, False, True, False]


def test_failing_command_without_wait_leaves_progress_alone():
	w, composer = _window()

	def _boom() -> None:
		raise ValueError("bad")

	w.add_command("x", None, "X", "x", "", 1, 1, _boom)
	w.enable_commands()

	composer.controls[0].click()

	assert composer.progress == []
	assert composer.busy_history == []
