# ---------------------------------------------------------------------------
# File: test_status.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for StatusService and StatusLogHandler.
#
# Notes:
#	- Pure unit tests; no Tkinter dependency.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/27/2025	Paul G. LeDuc				Initial tests (StatusBar)
# 01/11/2026	Paul G. LeDuc				Rewrite for StatusService
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

from lineedit.services.status import StatusService, attach_status_logging
from lineedit.ui.composer import GridRect
from lineedit.ui.memory_composer import MemoryTextField


def _field() -> MemoryTextField:
	return MemoryTextField(position=GridRect(0, 0, 1, 1))


def test_report_without_sink_keeps_text():
	s = StatusService()

	assert s.report("%s: %d", "points", 3) == "points: 3"
	assert s.text == "points: 3"


def test_report_pushes_to_sink_refresh_and_listener():
	field = _field()
	refreshed: list[int] = []
	seen: list[str] = []

	s = StatusService(sink=field, refresh=lambda: refreshed.append(1), on_change=seen.append)
	s.report("Ready")

	assert field.text == "Ready"
	assert refreshed == [1]
	assert seen == ["Ready"]


def test_literal_percent_needs_escaping():
	s = StatusService()
	assert s.report("100%% done") == "100% done"


def test_attach_sink_shows_current_text():
	s = StatusService()
	s.set("Loaded")

	field = _field()
	s.attach_sink(field)

	assert field.text == "Loaded"


def test_clear():
	field = _field()
	s = StatusService(sink=field)

	s.set("x")
	s.clear()

	assert s.text == ""
	assert field.history == ["x", ""]


def test_status_log_handler_mirrors_warnings():
	s = StatusService()
	logger = logging.getLogger("lineedit.tests.status")
	logger.propagate = False
	h = attach_status_logging(s, logger)

	try:
		logger.info("quiet")
		assert s.text == ""

		logger.warning("Gap at %d", 5)
		assert s.text == "WARNING: Gap at 5"
	finally:
		logger.removeHandler(h)
		logger.propagate = True


def test_status_log_handler_never_raises(monkeypatch):
	class _Broken:
		def set_text(self, text: str) -> None:
			raise RuntimeError("widget destroyed")

	s = StatusService(sink=_Broken())  # type: ignore[arg-type]
	logger = logging.getLogger("lineedit.tests.status_broken")
	logger.propagate = False
	h = attach_status_logging(s, logger)

	errors: list[logging.LogRecord] = []
	monkeypatch.setattr(h, "handleError", errors.append)

	try:
		logger.error("boom")
	finally:
		logger.removeHandler(h)
		logger.propagate = True

	assert len(errors) == 1
