# ---------------------------------------------------------------------------
# File: commands.py
# ---------------------------------------------------------------------------
# Description:
#	Command record + registry for lineedit.
#
# Notes:
#	- One ordered dict (name -> Command) is the single source of truth.
#	  Each Command owns its optional surfaces (clickable control, menu entry).
#	- Registration order is dispatch order (dict insertion order).
#	- Surfaces are created through the injected WindowComposer and start disabled.
#	- Command.enabled is written by StateSynchronizer only.
#	- Surface activation goes through `runner` so clicks and menu picks share
#	  the dispatcher's error boundary.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/30/2025	Paul G. LeDuc				Initial coding / release
# 12/30/2025	Paul G. LeDuc				Add Command + CommandRegistry
# 01/09/2026	Paul G. LeDuc				Commands own their surfaces + key binding
# 01/10/2026	Paul G. LeDuc				Raise DuplicateCommand / UnknownCommand
# 01/11/2026	Paul G. LeDuc				Reject shared key bindings unless allowed
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Iterator, Optional, Protocol

from lineedit.app.errors import (
	DuplicateCommand,
	DuplicateKeyBinding,
	InvalidKeyBinding,
	UnknownCommand,
)
from lineedit.app.keys import accelerator_hint, tooltip_text
from lineedit.core.logging import get_app_logger
from lineedit.core.telemetry import Telemetry
from lineedit.ui.composer import (
	ControlHandle,
	ControlSlot,
	MenuContainer,
	MenuHandle,
	WindowComposer,
)


class CommandAction(Protocol):
	"""
	Boxed invocable bound to a command. Called with no arguments.
	"""
	def __call__(self) -> Any: ...


CommandRunner = Callable[["Command", str], Any]

_FIXED_FIELDS = frozenset({"name", "key_binding", "callback"})


@dataclass(slots=True, eq=False)
class Command:
	"""
	Command

	- name:			Unique identifier, stable for the window's lifetime.
	- label:		Text shown on the control / menu entry (renamable).
	- key_binding:	Canonical key string, e.g. "control-s".
	- callback:		Invoked on click, menu pick or keypress.
	- tooltip:		Tooltip text as supplied (without the key rendering).
	- control:		Clickable-control handle, if a grid slot was given.
	- menu_entry:	Menu-entry handle, if a menu target was given.
	- enabled:		Starts False. StateSynchronizer is the only writer.
	"""
	name: str
	label: str
	key_binding: str
	callback: CommandAction
	tooltip: str = ""

	control: Optional[ControlHandle] = None
	menu_entry: Optional[MenuHandle] = None

	enabled: bool = field(default=False, init=False)

	def __setattr__(self, attr: str, value: Any) -> None:
		if attr in _FIXED_FIELDS and hasattr(self, attr):
			raise AttributeError(f"Command.{attr} cannot be reassigned")
		object.__setattr__(self, attr, value)

	def surfaces(self) -> tuple[ControlHandle | MenuHandle, ...]:
		out: list[ControlHandle | MenuHandle] = []
		if self.control is not None:
			out.append(self.control)
		if self.menu_entry is not None:
			out.append(self.menu_entry)
		return tuple(out)


def _run_directly(command: Command, source: str) -> Any:
	return command.callback()


class CommandRegistry:
	"""
	CommandRegistry

	Stores commands by name (in registration order) and materializes their
	visual surfaces through the WindowComposer.
	"""

	def __init__(
		self,
		composer: WindowComposer,
		*,
		runner: CommandRunner | None = None,
		allow_shared_bindings: bool = False,
		telemetry: Telemetry | None = None,
	) -> None:
		self._composer = composer
		self._runner: CommandRunner = runner or _run_directly
		self._allow_shared_bindings = allow_shared_bindings
		self._telemetry = telemetry or Telemetry(False)
		self._log = get_app_logger("commands")

		self._commands: dict[str, Command] = {}

	# -----------------------------------------------------------------------
	# Registration
	# -----------------------------------------------------------------------

	def register(
		self,
		name: str,
		menu_target: MenuContainer | None,
		label: str,
		key_binding: str,
		tooltip: str,
		grid_column: int,
		grid_row: int,
		callback: CommandAction,
	) -> Command:
		"""
		Register a command and build its surfaces.

		A clickable control is created when grid_column and grid_row are both
		nonzero; a menu entry when menu_target is a MenuContainer. Neither is
		required: keyboard-only commands are fine.

		Raises:
			ValueError:				name is empty
			DuplicateCommand:		name already registered
			InvalidKeyBinding:		key_binding empty / not a string
			DuplicateKeyBinding:	key_binding taken (unless shared bindings allowed)
			TypeError:				callback not callable
		"""
		if not name:
			raise ValueError("Command name must be a non-empty string")

		if name in self._commands:
			raise DuplicateCommand(name)

		if not isinstance(key_binding, str) or not key_binding:
			raise InvalidKeyBinding(f"Key binding for {name!r} must be a non-empty string")

		if not callable(callback):
			raise TypeError(f"Callback for {name!r} is not callable")

		if not self._allow_shared_bindings:
			existing = self.find_by_binding(key_binding)
			if existing is not None:
				raise DuplicateKeyBinding(key_binding, existing.name, name)

		command = Command(
			name=name,
			label=label,
			key_binding=key_binding,
			callback=callback,
			tooltip=tooltip,
		)

		if grid_column and grid_row:
			command.control = self._composer.create_clickable_control(
				ControlSlot(column=grid_column, row=grid_row),
				label,
				tooltip_text(tooltip, key_binding),
				lambda n=name: self._activate(n, "control"),
			)

		if isinstance(menu_target, MenuContainer):
			command.menu_entry = self._composer.create_menu_entry(
				menu_target,
				label,
				lambda n=name: self._activate(n, "menu"),
				accelerator=accelerator_hint(key_binding),
			)
		elif menu_target is not None:
			self._log.warning("Ignoring menu target for %r: %r is not a menu", name, menu_target)

		self._commands[name] = command

		self._log.debug("Registered command %r (%s)", name, key_binding)
		self._telemetry.event("command.registered", {
			"command": name,
			"key_binding": key_binding,
			"control": command.control is not None,
			"menu": command.menu_entry is not None,
		})
		return command

	def rename(self, name: str, new_label: str) -> None:
		"""
		Change the label shown on a command's surfaces.
		"""
		command = self.require(name)
		command.label = new_label
		for surface in command.surfaces():
			surface.set_label(new_label)

	# -----------------------------------------------------------------------
	# Lookup
	# -----------------------------------------------------------------------

	def has(self, name: str) -> bool:
		return name in self._commands

	def get(self, name: str) -> Optional[Command]:
		return self._commands.get(name)

	def require(self, name: str) -> Command:
		command = self._commands.get(name)
		if command is None:
			raise UnknownCommand(name)
		return command

	def names(self) -> list[str]:
		return list(self._commands.keys())

	def commands(self) -> list[Command]:
		return list(self._commands.values())

	def find_by_binding(self, key_binding: str) -> Optional[Command]:
		"""
		First command (in registration order) bound to key_binding.
		"""
		for command in self._commands.values():
			if command.key_binding == key_binding:
				return command
		return None

	def __iter__(self) -> Iterator[Command]:
		return iter(list(self._commands.values()))

	def __len__(self) -> int:
		return len(self._commands)

	def __contains__(self, name: object) -> bool:
		return name in self._commands

	# -----------------------------------------------------------------------
	# Surface activation
	# -----------------------------------------------------------------------

	def _activate(self, name: str, source: str) -> Any:
		command = self.require(name)
		return self._runner(command, source)
