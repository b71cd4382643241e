# ---------------------------------------------------------------------------
# File: progress.py
# ---------------------------------------------------------------------------
# Description:
#	Modal progress protocol for long synchronous commands.
#
# Notes:
#	- start(message) -> update(fraction, message)* -> end()
#	- While active the window shows a busy pointer and a modal overlay that
#	  blocks other input. There is no cancellation.
#	- waiting() guarantees end() on every exit path, including errors.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/12/2026	Paul G. LeDuc				Initial coding / release
# 01/14/2026	Paul G. LeDuc				Clear busy pointer if the overlay cannot be built
# ---------------------------------------------------------------------------

from __future__ import annotations

from contextlib import contextmanager
from typing import Iterator, Optional

from lineedit.app.errors import ProgressError
from lineedit.core.logging import get_app_logger
from lineedit.ui.composer import ProgressHandle, WindowComposer


class ProgressService:
	def __init__(self, composer: WindowComposer) -> None:
		self._composer = composer
		self._handle: Optional[ProgressHandle] = None
		self._log = get_app_logger("progress")

	@property
	def active(self) -> bool:
		return self._handle is not None

	def start(self, message: str) -> None:
		if self._handle is not None:
			raise ProgressError("Progress already started")

		self._composer.set_busy(True)
		self._composer.refresh()

		handle: Optional[ProgressHandle] = None
		try:
			handle = self._composer.create_modal_progress(message)
			handle.update(0.0, message)
		except Exception:
			# No wait is running; put the pointer back before propagating.
			try:
				if handle is not None:
					handle.dismiss()
			finally:
				self._composer.set_busy(False)
			raise

		self._handle = handle
		self._log.debug("Wait started: %s", message)

	def update(self, fraction: float, message: str) -> None:
		if self._handle is None:
			raise ProgressError("update() called before start()")

		if not 0.0 <= fraction <= 1.0:
			raise ValueError(f"Progress fraction must be within [0, 1], got {fraction!r}")

		self._handle.update(fraction, message)
		self._composer.refresh()

	def end(self) -> None:
		handle = self._handle
		if handle is None:
			raise ProgressError("end() called before start()")

		self._handle = None
		try:
			handle.dismiss()
		finally:
			self._composer.set_busy(False)
			self._log.debug("Wait ended")

	@contextmanager
	def waiting(self, message: str) -> Iterator["ProgressService"]:
		self.start(message)
		try:
			yield self
		finally:
			self.end()
