# ---------------------------------------------------------------------------
# File: errors.py
# ---------------------------------------------------------------------------
# Description:
#	Exceptions raised by the command spine.
#
# Notes:
#	- Each error also derives from the builtin a caller would naturally catch
#	  (ValueError for bad registrations, KeyError for lookups).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/11/2026	Paul G. LeDuc				Add DuplicateKeyBinding + ProgressError
# ---------------------------------------------------------------------------

from __future__ import annotations


class CommandError(Exception):
	"""Base class for command registry / dispatch errors."""


class DuplicateCommand(CommandError, ValueError):
	def __init__(self, name: str) -> None:
		super().__init__(f"Duplicate command name: {name!r}")
		self.name = name


class UnknownCommand(CommandError, KeyError):
	def __init__(self, name: str) -> None:
		super().__init__(f"Unknown command name: {name!r}")
		self.name = name

	def __str__(self) -> str:
		# KeyError.__str__ would repr() the message
		return str(self.args[0])


class InvalidKeyBinding(CommandError, ValueError):
	pass


class DuplicateKeyBinding(CommandError, ValueError):
	def __init__(self, key_binding: str, existing: str, name: str) -> None:
		super().__init__(
			f"Key binding {key_binding!r} for {name!r} is already bound to {existing!r}"
		)
		self.key_binding = key_binding
		self.existing = existing
		self.name = name


class ProgressError(RuntimeError):
	"""Progress protocol misuse (update/end without start, double start)."""
