# ---------------------------------------------------------------------------
# File: ui/__init__.py
# ---------------------------------------------------------------------------
# Description:
#   Public UI package surface for lineedit.
#
# Notes:
#   - Lazy exports (PEP 562): importing lineedit.ui must not import tkinter,
#     matplotlib or ttkthemes unless TkWindowComposer is actually used.
#   - Do NOT import from lineedit.ui inside ui modules; import specific modules instead.
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import TYPE_CHECKING, Any

__all__ = [
	# Interface
	"WindowComposer", "MenuContainer", "GridRect", "ControlSlot",

	# Implementations
	"MemoryComposer",
	"TkWindowComposer",
]

_EXPORTS: dict[str, tuple[str, str]] = {
	"WindowComposer": ("lineedit.ui.composer", "WindowComposer"),
	"MenuContainer": ("lineedit.ui.composer", "MenuContainer"),
	"GridRect": ("lineedit.ui.composer", "GridRect"),
	"ControlSlot": ("lineedit.ui.composer", "ControlSlot"),

	"MemoryComposer": ("lineedit.ui.memory_composer", "MemoryComposer"),
	"TkWindowComposer": ("lineedit.ui.tk_composer", "TkWindowComposer"),
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
	from lineedit.ui.composer import WindowComposer, MenuContainer, GridRect, ControlSlot
	from lineedit.ui.memory_composer import MemoryComposer
	from lineedit.ui.tk_composer import TkWindowComposer
