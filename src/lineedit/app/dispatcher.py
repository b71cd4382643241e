# ---------------------------------------------------------------------------
# File: dispatcher.py
# ---------------------------------------------------------------------------
# Description:
#	Keypress dispatch for lineedit (raw key -> canonical key -> command).
#
# Notes:
#	- Resolution scans commands in registration order; the first command
#	  whose key_binding matches is the only candidate (first match wins).
#	- No match:
#		"alt-alt" (bare Alt press)	-> ignored, no diagnostic
#		anything else				-> WARNING 'Unhandled key: "<key>"'
#	- Match but disabled -> swallowed silently (no callback, no diagnostic).
#	- Match and enabled  -> callback runs exactly once via CommandInvoker.
#	- CommandInvoker is the error boundary: a failing callback is logged,
#	  reported on the status field, and never escapes into the UI loop.
#	  A wait (modal progress) the callback left open is ended first.
#	- A keypress arriving while a callback is still running through the
#	  dispatcher is refused instead of recursing.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/01/2026	Paul G. LeDuc				Initial coding / release (KeyRouter)
# 01/03/2026	Paul G. LeDuc				Add telemetry (keys.pressed, key.unhandled)
# 01/10/2026	Paul G. LeDuc				Replace layered KeyRouter with EventDispatcher
# 01/11/2026	Paul G. LeDuc				Add CommandInvoker error boundary
# 01/12/2026	Paul G. LeDuc				Refuse reentrant keypresses
# 01/14/2026	Paul G. LeDuc				End an open wait when a callback fails
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from enum import Enum
from typing import Optional, Sequence

from lineedit.app.commands import Command, CommandRegistry
from lineedit.app.keys import BARE_ALT, canonical_key
from lineedit.core.logging import get_app_logger
from lineedit.core.telemetry import Telemetry
from lineedit.services.progress import ProgressService
from lineedit.services.status import StatusService


class DispatchOutcome(Enum):
	FIRED = "fired"
	FAILED = "failed"
	DISABLED = "disabled"
	UNHANDLED = "unhandled"
	SUPPRESSED = "suppressed"
	REENTRANT = "reentrant"


class CommandInvoker:
	"""
	CommandInvoker

	Runs a command's callback and contains any exception it raises.
	"""

	def __init__(
		self,
		*,
		status: StatusService | None = None,
		progress: ProgressService | None = None,
		telemetry: Telemetry | None = None,
		logger: logging.Logger | None = None,
	) -> None:
		self._status = status
		self._progress = progress
		self._telemetry = telemetry or Telemetry(False)
		self._log = logger or get_app_logger("commands")

	def invoke(self, command: Command, source: str = "key") -> bool:
		"""
		Returns True if the callback completed, False if it raised.
		"""
		attrs = {"command": command.name, "source": source}
		try:
			with self._telemetry.timer("command.duration_ms", attrs):
				command.callback()
		except Exception as ex:
			self._log.exception("Command %r (%s) failed", command.name, source)
			self._telemetry.event("command.failed", {**attrs, "error": type(ex).__name__})
			self._end_open_wait(command)
			if self._status is not None:
				self._status.report("%s failed: %s", command.label, ex)
			return False
		return True

	def _end_open_wait(self, command: Command) -> None:
		if self._progress is None or not self._progress.active:
			return
		try:
			self._progress.end()
		except Exception:
			self._log.exception("Could not end wait left open by %r", command.name)


class EventDispatcher:
	"""
	EventDispatcher

	Turns (modifiers, key) into at most one command invocation.
	"""

	def __init__(
		self,
		registry: CommandRegistry,
		invoker: CommandInvoker | None = None,
		*,
		telemetry: Telemetry | None = None,
		logger: logging.Logger | None = None,
	) -> None:
		self._registry = registry
		self._invoker = invoker or CommandInvoker(telemetry=telemetry)
		self._telemetry = telemetry or Telemetry(False)
		self._log = logger or get_app_logger("keys")

		self._dispatching: Optional[str] = None

	@property
	def busy(self) -> bool:
		return self._dispatching is not None

	def handle_keypress(self, modifiers: Sequence[str], key: str) -> DispatchOutcome:
		keyseq = canonical_key(modifiers, key)

		if self._dispatching is not None:
			self._log.warning(
				"Ignoring key %r while command %r is running", keyseq, self._dispatching
			)
			return DispatchOutcome.REENTRANT

		self._telemetry.counter("keys.pressed", 1, {"keyseq": keyseq})

		command = self.resolve(keyseq)

		if command is None:
			if keyseq == BARE_ALT:
				return DispatchOutcome.SUPPRESSED
			self._log.warning('Unhandled key: "%s"', keyseq)
			self._telemetry.event("key.unhandled", {"keyseq": keyseq})
			return DispatchOutcome.UNHANDLED

		if not command.enabled:
			return DispatchOutcome.DISABLED

		self._dispatching = command.name
		try:
			ok = self._invoker.invoke(command, "key")
		finally:
			self._dispatching = None

		self._telemetry.event("command.dispatched", {
			"command": command.name,
			"keyseq": keyseq,
			"ok": ok,
		})
		return DispatchOutcome.FIRED if ok else DispatchOutcome.FAILED

	def resolve(self, keyseq: str) -> Optional[Command]:
		"""
		First registered command bound to keyseq, enabled or not.
		"""
		for command in self._registry:
			if command.key_binding == keyseq:
				return command
		return None
