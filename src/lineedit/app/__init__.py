# ---------------------------------------------------------------------------
# File: app/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public app package surface for lineedit.
#
# Notes:
#   - Uses lazy exports so importing lineedit.app.errors (etc.) does not pull
#     in the window and its services.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	"AppConfig",
	"Command",
	"CommandRegistry",
	"DispatchOutcome",
	"EventDispatcher",
	"LineEditWindow",
	"StateSynchronizer",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"AppConfig": ("lineedit.app.config", "AppConfig"),
	"Command": ("lineedit.app.commands", "Command"),
	"CommandRegistry": ("lineedit.app.commands", "CommandRegistry"),
	"DispatchOutcome": ("lineedit.app.dispatcher", "DispatchOutcome"),
	"EventDispatcher": ("lineedit.app.dispatcher", "EventDispatcher"),
	"LineEditWindow": ("lineedit.app.window", "LineEditWindow"),
	"StateSynchronizer": ("lineedit.app.state", "StateSynchronizer"),
}

def __getattr__(name: str) -> Any:
	try:
		mod_name, attr_name = _EXPORTS[name]
	except KeyError as ex:
		raise AttributeError(f"module {__name__!r} has no attribute {name!r}") from ex

	import importlib
	mod = importlib.import_module(mod_name)
	return getattr(mod, attr_name)

def __dir__() -> list[str]:
	return sorted(set(list(globals().keys()) + list(__all__)))

if TYPE_CHECKING:
	from lineedit.app.config import AppConfig
	from lineedit.app.commands import Command, CommandRegistry
	from lineedit.app.dispatcher import DispatchOutcome, EventDispatcher
	from lineedit.app.state import StateSynchronizer
	from lineedit.app.window import LineEditWindow
