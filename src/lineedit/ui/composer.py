# ---------------------------------------------------------------------------
# File: composer.py
# ---------------------------------------------------------------------------
# Description:
#	WindowComposer interface for lineedit.
#
# Notes:
#	- The command spine talks to the toolkit only through these protocols.
#	- All calls happen on the single UI thread and are synchronous.
#	- Positions are in window grid units (origin bottom-left). Geometry is
#	  the composer's business; the core only passes positions through.
#	- Clickable controls and menu entries are created disabled.
#	- Charts are created non-interactive (mouse input ignored).
#	- Implementations:
#		lineedit.ui.tk_composer.TkWindowComposer	(tkinter + matplotlib)
#		lineedit.ui.memory_composer.MemoryComposer	(headless, tests/scripts)
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Add MenuContainer + key binding hook
# 01/12/2026	Paul G. LeDuc				Add busy pointer, title and refresh
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Protocol, Sequence, runtime_checkable


OnActivate = Callable[[], None]
KeyHandler = Callable[[Sequence[str], str], Any]


@dataclass(frozen=True, slots=True)
class GridRect:
	"""
	Rectangle in grid units: x, y of the bottom-left corner, then width, height.
	"""
	x: float
	y: float
	width: float
	height: float


@dataclass(frozen=True, slots=True)
class ControlSlot:
	"""
	Column/row slot in the button region (both 1-based).
	"""
	column: int
	row: int


# ---------------------------------------------------------------------------
# Handles
# ---------------------------------------------------------------------------

@runtime_checkable
class LineHandle(Protocol):
	def set_visible(self, visible: bool) -> None: ...
	def set_data(self, xdata: Sequence[float], ydata: Sequence[float]) -> None: ...


@runtime_checkable
class ChartHandle(Protocol):
	def set_interactive(self, interactive: bool) -> None: ...
	def hide_x_tick_labels(self) -> None: ...
	def add_line(self, style: str) -> LineHandle: ...


@runtime_checkable
class TextFieldHandle(Protocol):
	def set_text(self, text: str) -> None: ...


@runtime_checkable
class ProgressHandle(Protocol):
	def update(self, fraction: float, message: str) -> None: ...
	def dismiss(self) -> None: ...


@runtime_checkable
class ControlHandle(Protocol):
	def set_enabled(self, enabled: bool) -> None: ...
	def set_label(self, label: str) -> None: ...


@runtime_checkable
class MenuHandle(Protocol):
	def set_enabled(self, enabled: bool) -> None: ...
	def set_label(self, label: str) -> None: ...


@runtime_checkable
class MenuContainer(Protocol):
	"""
	A menu that can hold command entries (e.g., a "File" cascade).
	"""
	@property
	def menu_title(self) -> str: ...


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------

class WindowComposer(Protocol):
	def create_chart(self, position: GridRect) -> ChartHandle: ...

	def create_status_field(self, position: GridRect) -> TextFieldHandle: ...

	def create_modal_progress(self, title: str) -> ProgressHandle: ...

	def create_clickable_control(
		self,
		position: ControlSlot,
		label: str,
		tooltip: str,
		on_activate: OnActivate,
	) -> ControlHandle: ...

	def create_menu(self, label: str) -> MenuContainer: ...

	def create_menu_entry(
		self,
		container: MenuContainer,
		label: str,
		on_activate: OnActivate,
		accelerator: Optional[str] = None,
	) -> MenuHandle: ...

	def bind_keypress(self, handler: KeyHandler) -> None: ...

	def set_title(self, title: str) -> None: ...

	def set_busy(self, busy: bool) -> None: ...

	def refresh(self) -> None: ...

	def close(self) -> None: ...
