# ---------------------------------------------------------------------------
# File: memory_composer.py
# ---------------------------------------------------------------------------
# Description:
#	Headless WindowComposer that records everything in memory.
#
# Notes:
#	- No Tk, no display. Used by the test-suite and handy for scripting.
#	- Controls and menu entries start disabled, like the Tk ones; click() /
#	  select() on a disabled surface does nothing (as a greyed-out widget).
#	- press() feeds a keypress into whatever handler bind_keypress() got.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/10/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Record title / busy / refresh calls
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional, Sequence

from lineedit.ui.composer import ControlSlot, GridRect, KeyHandler, OnActivate


@dataclass(eq=False)
class MemoryLine:
	style: str
	visible: bool = False
	xdata: tuple[float, ...] = ()
	ydata: tuple[float, ...] = ()

	def set_visible(self, visible: bool) -> None:
		self.visible = visible

	def set_data(self, xdata: Sequence[float], ydata: Sequence[float]) -> None:
		self.xdata = tuple(xdata)
		self.ydata = tuple(ydata)


@dataclass(eq=False)
class MemoryChart:
	position: GridRect
	interactive: bool = False
	x_tick_labels: bool = True
	lines: list[MemoryLine] = field(default_factory=list)

	def set_interactive(self, interactive: bool) -> None:
		self.interactive = interactive

	def hide_x_tick_labels(self) -> None:
		self.x_tick_labels = False

	def add_line(self, style: str) -> MemoryLine:
		line = MemoryLine(style=style)
		self.lines.append(line)
		return line


@dataclass(eq=False)
class MemoryTextField:
	position: GridRect
	text: str = ""
	history: list[str] = field(default_factory=list)

	def set_text(self, text: str) -> None:
		self.text = text
		self.history.append(text)


@dataclass(eq=False)
class MemoryProgress:
	title: str
	updates: list[tuple[float, str]] = field(default_factory=list)
	dismissed: bool = False

	def update(self, fraction: float, message: str) -> None:
		self.updates.append((fraction, message))

	def dismiss(self) -> None:
		self.dismissed = True


@dataclass(eq=False)
class MemoryControl:
	position: ControlSlot
	label: str
	tooltip: str
	on_activate: OnActivate
	enabled: bool = False

	def set_enabled(self, enabled: bool) -> None:
		self.enabled = enabled

	def set_label(self, label: str) -> None:
		self.label = label

	def click(self) -> None:
		if self.enabled:
			self.on_activate()


@dataclass(eq=False)
class MemoryMenu:
	menu_title: str
	entries: list["MemoryMenuEntry"] = field(default_factory=list)


@dataclass(eq=False)
class MemoryMenuEntry:
	container: MemoryMenu
	label: str
	on_activate: OnActivate
	accelerator: Optional[str] = None
	enabled: bool = False

	def set_enabled(self, enabled: bool) -> None:
		self.enabled = enabled

	def set_label(self, label: str) -> None:
		self.label = label

	def select(self) -> None:
		if self.enabled:
			self.on_activate()


class MemoryComposer:
	"""
	MemoryComposer

	In-memory WindowComposer.
	"""

	def __init__(self) -> None:
		self.charts: list[MemoryChart] = []
		self.status_fields: list[MemoryTextField] = []
		self.progress: list[MemoryProgress] = []
		self.controls: list[MemoryControl] = []
		self.menus: list[MemoryMenu] = []

		self.key_handler: Optional[KeyHandler] = None
		self.title: str = ""
		self.busy: bool = False
		self.busy_history: list[bool] = []
		self.refresh_count: int = 0
		self.closed: bool = False

	# -----------------------------------------------------------------------
	# WindowComposer
	# -----------------------------------------------------------------------

	def create_chart(self, position: GridRect) -> MemoryChart:
		chart = MemoryChart(position=position)
		self.charts.append(chart)
		return chart

	def create_status_field(self, position: GridRect) -> MemoryTextField:
		tf = MemoryTextField(position=position)
		self.status_fields.append(tf)
		return tf

	def create_modal_progress(self, title: str) -> MemoryProgress:
		p = MemoryProgress(title=title)
		self.progress.append(p)
		return p

	def create_clickable_control(
		self,
		position: ControlSlot,
		label: str,
		tooltip: str,
		on_activate: OnActivate,
	) -> MemoryControl:
		control = MemoryControl(position=position, label=label, tooltip=tooltip, on_activate=on_activate)
		self.controls.append(control)
		return control

	def create_menu(self, label: str) -> MemoryMenu:
		menu = MemoryMenu(menu_title=label)
		self.menus.append(menu)
		return menu

	def create_menu_entry(
		self,
		container: Any,
		label: str,
		on_activate: OnActivate,
		accelerator: Optional[str] = None,
	) -> MemoryMenuEntry:
		entry = MemoryMenuEntry(
			container=container,
			label=label,
			on_activate=on_activate,
			accelerator=accelerator,
		)
		container.entries.append(entry)
		return entry

	def bind_keypress(self, handler: KeyHandler) -> None:
		self.key_handler = handler

	def set_title(self, title: str) -> None:
		self.title = title

	def set_busy(self, busy: bool) -> None:
		self.busy = busy
		self.busy_history.append(busy)

	def refresh(self) -> None:
		self.refresh_count += 1

	def close(self) -> None:
		self.closed = True

	# -----------------------------------------------------------------------
	# Test helpers
	# -----------------------------------------------------------------------

	def press(self, modifiers: Sequence[str], key: str) -> Any:
		if self.key_handler is None:
			raise RuntimeError("No key handler bound")
		return self.key_handler(modifiers, key)

	def control_labeled(self, label: str) -> MemoryControl:
		for control in self.controls:
			if control.label == label:
				return control
		raise LookupError(f"No control labeled {label!r}")
