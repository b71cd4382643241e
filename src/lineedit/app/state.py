# ---------------------------------------------------------------------------
# File: state.py
# ---------------------------------------------------------------------------
# Description:
#	StateSynchronizer: enable/disable commands and every bound surface.
#
# Notes:
#	- The only writer of Command.enabled.
#	- Names are validated before anything changes; an unknown name leaves
#	  every command and surface as it was.
#	- An empty selection means "every registered command".
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from lineedit.app.commands import Command, CommandRegistry
from lineedit.app.errors import UnknownCommand
from lineedit.core.logging import get_app_logger


_log = get_app_logger("state")


@dataclass(slots=True)
class StateSynchronizer:
	registry: CommandRegistry

	def set_enabled(self, names: Iterable[str] | str, enabled: bool) -> None:
		commands = self._select(names)

		for command in commands:
			command.enabled = enabled
			for surface in command.surfaces():
				surface.set_enabled(enabled)

		_log.debug(
			"%s %d command(s): %s",
			"Enabled" if enabled else "Disabled",
			len(commands),
			", ".join(c.name for c in commands),
		)

	def enable(self, names: Iterable[str] | str = ()) -> None:
		self.set_enabled(names, True)

	def disable(self, names: Iterable[str] | str = ()) -> None:
		self.set_enabled(names, False)

	def _select(self, names: Iterable[str] | str) -> list[Command]:
		# A bare string is one name, not a sequence of characters.
		requested = [names] if isinstance(names, str) else list(names)

		if not requested:
			return self.registry.commands()

		missing = [n for n in requested if not self.registry.has(n)]
		if missing:
			raise UnknownCommand(missing[0])

		seen: set[str] = set()
		out: list[Command] = []
		for name in requested:
			if name in seen:
				continue
			seen.add(name)
			out.append(self.registry.require(name))
		return out
