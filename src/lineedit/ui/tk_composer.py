# ---------------------------------------------------------------------------
# File: tk_composer.py
# ---------------------------------------------------------------------------
# Description:
#	Tkinter WindowComposer for lineedit.
#
# Notes:
#	- Root window is a ttkthemes.ThemedTk (theme from cfg "theme").
#	- Charts are matplotlib Axes inside one Figure embedded with
#	  FigureCanvasTkAgg. The canvas fills the window; buttons and the status
#	  field are placed on top of it with place().
#	- Grid positions (origin bottom-left) are converted to Tk relative
#	  placement (origin top-left) by to_relative().
#	- Menu entries are addressed by index inside their tk.Menu.
#	- Accelerators on menu entries are display-only; the key itself is
#	  delivered through bind_keypress() like every other key.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/18/2025	Paul G. LeDuc				Add ctor args + geometry guards (App)
# 01/11/2026	Paul G. LeDuc				Initial coding / release (TkWindowComposer)
# 01/12/2026	Paul G. LeDuc				Add modal progress window + busy pointer
# 01/13/2026	Paul G. LeDuc				Button tooltips
# ---------------------------------------------------------------------------

from __future__ import annotations

from typing import Any, Optional, Sequence

import tkinter as tk
from tkinter import ttk

from matplotlib.backends.backend_tkagg import FigureCanvasTkAgg
from matplotlib.figure import Figure
from ttkthemes import ThemedTk

from lineedit.app.config import AppConfig
from lineedit.app.keys import split_tk_event
from lineedit.core.logging import get_app_logger
from lineedit.ui.composer import ControlSlot, GridRect, KeyHandler, OnActivate


DEFAULT_GRID_SIZE = 25

# Button region geometry, grid units
_BUTTON_X0 = 17.5
_BUTTON_PITCH = 1.75
_BUTTON_WIDTH = 1.5
_BUTTON_HEIGHT = 0.8

_log = get_app_logger("tk")


# ---------------------------------------------------------------------------
# Geometry helpers (pure)
# ---------------------------------------------------------------------------

def control_rect(slot: ControlSlot) -> GridRect:
	"""
	Grid rectangle for a button in the button region.
	"""
	return GridRect(
		x=slot.column * _BUTTON_PITCH + _BUTTON_X0,
		y=slot.row + 1.0,
		width=_BUTTON_WIDTH,
		height=_BUTTON_HEIGHT,
	)


def to_relative(rect: GridRect, grid_size: int = DEFAULT_GRID_SIZE) -> dict[str, float]:
	"""
	Convert a grid rectangle into Tk place() keyword arguments.
	"""
	g = float(grid_size)
	return {
		"relx": rect.x / g,
		"rely": 1.0 - (rect.y + rect.height) / g,
		"relwidth": rect.width / g,
		"relheight": rect.height / g,
	}


def to_figure_fraction(rect: GridRect, grid_size: int = DEFAULT_GRID_SIZE) -> list[float]:
	"""
	Convert a grid rectangle into a matplotlib [left, bottom, width, height].
	"""
	g = float(grid_size)
	return [rect.x / g, rect.y / g, rect.width / g, rect.height / g]


def accelerator_label(hint: Optional[str]) -> str:
	if not hint:
		return ""
	return f"Ctrl+{hint.upper()}"


# ---------------------------------------------------------------------------
# Handles
# ---------------------------------------------------------------------------

class TkLine:
	def __init__(self, line: Any, canvas: FigureCanvasTkAgg) -> None:
		self.line = line
		self._canvas = canvas

	def set_visible(self, visible: bool) -> None:
		self.line.set_visible(visible)
		self._canvas.draw_idle()

	def set_data(self, xdata: Sequence[float], ydata: Sequence[float]) -> None:
		self.line.set_data(xdata, ydata)
		self.line.axes.relim()
		self.line.axes.autoscale_view()
		self._canvas.draw_idle()


class TkChart:
	def __init__(self, axes: Any, canvas: FigureCanvasTkAgg) -> None:
		self.axes = axes
		self._canvas = canvas
		self.interactive = False

		axes.grid(True)
		axes.set_navigate(False)

	def set_interactive(self, interactive: bool) -> None:
		self.interactive = interactive
		self.axes.set_navigate(interactive)

	def hide_x_tick_labels(self) -> None:
		self.axes.tick_params(axis="x", labelbottom=False)
		self._canvas.draw_idle()

	def add_line(self, style: str) -> TkLine:
		# Hidden and not pickable until populated.
		(line,) = self.axes.plot([0], [0], style, visible=False, picker=False)
		return TkLine(line, self._canvas)


class TkTextField:
	def __init__(self, entry: ttk.Entry) -> None:
		self.entry = entry

	def set_text(self, text: str) -> None:
		self.entry.configure(state="normal")
		self.entry.delete(0, "end")
		self.entry.insert(0, text)
		self.entry.configure(state="readonly")


class TkProgress:
	"""
	Modal progress window (Toplevel + determinate Progressbar).
	"""

	def __init__(self, root: tk.Misc, title: str) -> None:
		top = tk.Toplevel(root)
		top.title(title)
		top.transient(root.winfo_toplevel())
		top.resizable(False, False)
		top.protocol("WM_DELETE_WINDOW", lambda: None)	# no cancellation

		self._label = ttk.Label(top, text=title, anchor="w")
		self._label.pack(fill="x", padx=12, pady=(12, 4))

		self._bar = ttk.Progressbar(top, orient="horizontal", mode="determinate", maximum=1.0, length=320)
		self._bar.pack(fill="x", padx=12, pady=(4, 12))

		self.top = top
		top.update_idletasks()
		try:
			top.grab_set()
		except tk.TclError:
			# Window not viewable yet on some window managers
			_log.debug("Progress window grab failed", exc_info=True)

	def update(self, fraction: float, message: str) -> None:
		self._bar.configure(value=fraction)
		self._label.configure(text=message)
		self.top.update_idletasks()

	def dismiss(self) -> None:
		try:
			self.top.grab_release()
		finally:
			self.top.destroy()


class _Tooltip:
	"""
	Hover tooltip for a widget.
	"""

	def __init__(self, widget: tk.Widget, text: str) -> None:
		self._widget = widget
		self._text = text
		self._tip: Optional[tk.Toplevel] = None
		widget.bind("<Enter>", self._show, add="+")
		widget.bind("<Leave>", self._hide, add="+")

	def _show(self, event: tk.Event) -> None:
		if self._tip is not None or not self._text:
			return
		x = self._widget.winfo_rootx() + 12
		y = self._widget.winfo_rooty() + self._widget.winfo_height() + 4
		tip = tk.Toplevel(self._widget)
		tip.wm_overrideredirect(True)
		tip.wm_geometry(f"+{x}+{y}")
		tk.Label(
			tip,
			text=self._text,
			relief="solid",
			borderwidth=1,
			background="#ffffe0",
			padx=4,
			pady=2,
		).pack()
		self._tip = tip

	def _hide(self, event: tk.Event) -> None:
		if self._tip is not None:
			self._tip.destroy()
			self._tip = None


class TkControl:
	def __init__(self, button: ttk.Button, tooltip: str) -> None:
		self.button = button
		self.tooltip = _Tooltip(button, tooltip)

	def set_enabled(self, enabled: bool) -> None:
		self.button.state(["!disabled"] if enabled else ["disabled"])

	def set_label(self, label: str) -> None:
		self.button.configure(text=label)


class TkMenuContainer:
	def __init__(self, menu: tk.Menu, menu_title: str) -> None:
		self.menu = menu
		self.menu_title = menu_title


class TkMenuEntry:
	def __init__(self, menu: tk.Menu, index: int) -> None:
		self.menu = menu
		self.index = index

	def set_enabled(self, enabled: bool) -> None:
		self.menu.entryconfigure(self.index, state=("normal" if enabled else "disabled"))

	def set_label(self, label: str) -> None:
		self.menu.entryconfigure(self.index, label=label)


# ---------------------------------------------------------------------------
# Composer
# ---------------------------------------------------------------------------

class TkWindowComposer:
	"""
	TkWindowComposer

	Owns the Tk root, the menubar and the matplotlib canvas.
	"""

	def __init__(
		self,
		cfg: AppConfig | dict[str, Any] | None = None,
		*,
		root: tk.Tk | None = None,
	) -> None:
		self.cfg = AppConfig.coerce(cfg)
		self.grid_size = self.cfg.get_int("window.grid_size", DEFAULT_GRID_SIZE)

		self.root: tk.Tk = root if root is not None else ThemedTk(theme=self.cfg.get("theme", "arc"))

		# Ensure Tk has computed screen dimensions
		self.root.update_idletasks()
		self._apply_geometry(self.cfg.get("window.width"), self.cfg.get("window.height"))

		self.menubar = tk.Menu(self.root, tearoff=0)
		self.root.configure(menu=self.menubar)

		self.figure = Figure()
		self.canvas = FigureCanvasTkAgg(self.figure, master=self.root)
		self.canvas.get_tk_widget().place(relx=0.0, rely=0.0, relwidth=1.0, relheight=1.0)

	# -----------------------------------------------------------------------
	# WindowComposer
	# -----------------------------------------------------------------------

	def create_chart(self, position: GridRect) -> TkChart:
		axes = self.figure.add_axes(to_figure_fraction(position, self.grid_size))
		return TkChart(axes, self.canvas)

	def create_status_field(self, position: GridRect) -> TkTextField:
		entry = ttk.Entry(self.root, state="readonly")
		entry.place(**to_relative(position, self.grid_size))
		return TkTextField(entry)

	def create_modal_progress(self, title: str) -> TkProgress:
		return TkProgress(self.root, title)

	def create_clickable_control(
		self,
		position: ControlSlot,
		label: str,
		tooltip: str,
		on_activate: OnActivate,
	) -> TkControl:
		button = ttk.Button(self.root, text=label, command=on_activate)
		button.state(["disabled"])
		button.place(**to_relative(control_rect(position), self.grid_size))
		return TkControl(button, tooltip)

	def create_menu(self, label: str) -> TkMenuContainer:
		menu = tk.Menu(self.menubar, tearoff=0)
		self.menubar.add_cascade(label=label, menu=menu)
		return TkMenuContainer(menu, label)

	def create_menu_entry(
		self,
		container: Any,
		label: str,
		on_activate: OnActivate,
		accelerator: Optional[str] = None,
	) -> TkMenuEntry:
		menu: tk.Menu = container.menu
		menu.add_command(
			label=label,
			command=on_activate,
			accelerator=accelerator_label(accelerator),
			state="disabled",
		)
		index = menu.index("end")
		if index is None:
			raise RuntimeError(f"Menu entry {label!r} was not added")
		return TkMenuEntry(menu, int(index))

	def bind_keypress(self, handler: KeyHandler) -> None:
		def _on_key(event: tk.Event) -> None:
			modifiers, key = split_tk_event(event)
			handler(modifiers, key)

		self.root.bind_all("<KeyPress>", _on_key)

	def set_title(self, title: str) -> None:
		self.root.title(title)

	def set_busy(self, busy: bool) -> None:
		self.root.configure(cursor=("watch" if busy else ""))
		self.root.update_idletasks()

	def refresh(self) -> None:
		self.canvas.draw_idle()
		self.root.update_idletasks()

	def close(self) -> None:
		self.root.destroy()

	# -----------------------------------------------------------------------
	# Runtime
	# -----------------------------------------------------------------------

	def run(self) -> None:
		self.canvas.draw_idle()
		self.root.mainloop()

	# -----------------------------------------------------------------------
	# Window setup
	# -----------------------------------------------------------------------

	def _apply_geometry(self, width: Any, height: Any) -> None:
		"""
		Default: full screen width, 95% of the height, leaving room for the
		OS task bar. Explicit sizes are clamped to the screen.
		"""
		screen_w = self.root.winfo_screenwidth()
		screen_h = self.root.winfo_screenheight()

		if width is None and height is None:
			win_w = screen_w
			win_h = int(screen_h * 0.95)
		else:
			req_w = int(width) if width is not None else screen_w
			req_h = int(height) if height is not None else screen_h

			win_w = max(1, min(req_w, screen_w))
			win_h = max(1, min(req_h, screen_h))

		x = max(0, (screen_w - win_w) // 2)
		self.root.geometry(f"{win_w}x{win_h}+{x}+0")

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} grid={self.grid_size}>"
