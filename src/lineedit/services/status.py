# ---------------------------------------------------------------------------
# File: status.py
# ---------------------------------------------------------------------------
# Description:
#	Status service for lineedit.
#
# Notes:
#	- StatusService owns the status text; the window's status field is its sink.
#	- report() uses printf-style formatting (fmt % args).
#	- Every report forces a display refresh so text shows up even while a
#	  long command keeps the UI thread busy.
#	- StatusLogHandler mirrors log records into the status field.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/03/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Single status field + printf reporting
# 01/12/2026	Paul G. LeDuc				Move log mirroring here (StatusLogHandler)
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from lineedit.ui.composer import TextFieldHandle


@dataclass(slots=True)
class StatusService:
	"""
	StatusService

	Holds the current status text and pushes it to an optional sink.
	"""
	sink: Optional[TextFieldHandle] = None
	refresh: Optional[Callable[[], None]] = None
	on_change: Optional[Callable[[str], None]] = None

	text: str = field(default="", init=False)

	def attach_sink(self, sink: Optional[TextFieldHandle]) -> None:
		self.sink = sink
		if sink is not None and self.text:
			sink.set_text(self.text)

	def report(self, fmt: str, *args: Any) -> str:
		"""
		Format and show a status message. Returns the rendered text.
		"""
		return self.set(fmt % args)

	def set(self, text: str) -> str:
		self.text = text
		if self.sink is not None:
			self.sink.set_text(text)
		if self.refresh is not None:
			self.refresh()
		if self.on_change is not None:
			self.on_change(text)
		return text

	def clear(self) -> None:
		self.set("")


class StatusLogHandler(logging.Handler):
	"""
	Mirrors formatted log records into the status field.

	Never raises from emit(); a broken status field must not break logging.
	"""

	def __init__(self, status: StatusService, *, level: int = logging.WARNING) -> None:
		super().__init__(level=level)
		self._status = status

	def emit(self, record: logging.LogRecord) -> None:
		try:
			self._status.set(self.format(record))
		except Exception:
			self.handleError(record)


def attach_status_logging(
	status: StatusService,
	logger: logging.Logger,
	*,
	level: int = logging.WARNING,
	fmt: str = "%(levelname)s: %(message)s",
) -> StatusLogHandler:
	h = StatusLogHandler(status, level=level)
	h.setFormatter(logging.Formatter(fmt))
	logger.addHandler(h)
	return h
