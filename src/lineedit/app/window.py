# ---------------------------------------------------------------------------
# File: window.py
# ---------------------------------------------------------------------------
# Description:
#	LineEditWindow: base window for tools that edit linear data.
#
# Notes:
#	- Two "full" charts along the top show the whole data length; two
#	  "zoom" charts down the left show a zoomed section. The area to the
#	  right of the zoom charts is the button region (see add_command).
#	- Panning / zooming belongs to an external zoomer; the window only builds
#	  it (zoomer_factory) and hands it the charts.
#	- Child tools talk to the window through the methods below; the command
#	  spine (registry, synchronizer, dispatcher) is reachable as attributes
#	  for tests and advanced wiring.
#	- Positions are 25 x 25 grid units, origin bottom-left.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/17/2025	Paul G. LeDuc				Initial coding / release (App)
# 12/30/2025	Paul G. LeDuc				Add command + keymap ownership
# 01/10/2026	Paul G. LeDuc				Rework App into toolkit-neutral LineEditWindow
# 01/12/2026	Paul G. LeDuc				Add wait (progress) helpers + chart control
# 01/13/2026	Paul G. LeDuc				Wire zoomer factory
# 01/14/2026	Paul G. LeDuc				Detach status log mirror on close; end waits on failure
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterable, Iterator, Optional, Protocol

from lineedit.app.commands import Command, CommandAction, CommandRegistry
from lineedit.app.config import AppConfig
from lineedit.app.dispatcher import CommandInvoker, DispatchOutcome, EventDispatcher
from lineedit.app.state import StateSynchronizer
from lineedit.core.logging import get_app_logger
from lineedit.core.telemetry import Telemetry, telemetry_from_config
from lineedit.services.progress import ProgressService
from lineedit.services.status import StatusService, attach_status_logging
from lineedit.ui.composer import (
	ChartHandle,
	GridRect,
	LineHandle,
	MenuContainer,
	WindowComposer,
)


class Zoomer(Protocol):
	def handle_mouse_input(self, chart_index: int) -> None: ...


ZoomerFactory = Callable[[tuple[ChartHandle, ...], tuple[ChartHandle, ...]], Zoomer]


FULL_CHARTS: tuple[str, ...] = ("upper_full", "lower_full")
ZOOM_CHARTS: tuple[str, ...] = ("upper_zoom", "lower_zoom")

CHART_LAYOUT: dict[str, GridRect] = {
	"upper_full": GridRect(1.0, 22.25, 23.0, 1.75),
	"lower_full": GridRect(1.0, 20.0, 23.0, 1.75),
	"upper_zoom": GridRect(1.0, 10.25, 17.0, 8.75),
	"lower_zoom": GridRect(1.0, 1.0, 17.0, 8.75),
}

STATUS_POSITION = GridRect(19.25, 1.0, 5.0, 0.8)

# 1-based index into the zoom charts; that chart is view-only, so every
# mouse click in it is a pan/zoom instruction.
VIEW_ONLY_ZOOM_CHART = 2


class LineEditWindow:
	"""
	LineEditWindow

	Composes charts, status field, progress overlay and the command spine
	on top of a WindowComposer.
	"""

	def __init__(
		self,
		composer: WindowComposer,
		cfg: AppConfig | dict[str, Any] | None = None,
		*,
		zoomer_factory: ZoomerFactory | None = None,
		telemetry: Telemetry | None = None,
	) -> None:
		self.cfg = AppConfig.coerce(cfg)
		self.composer = composer
		self.log = get_app_logger("window")
		self.telemetry = telemetry or telemetry_from_config(self.cfg, get_app_logger("telemetry"))

		# -------------------------------------------------------------------
		# Charts
		# -------------------------------------------------------------------

		self.charts: dict[str, ChartHandle] = {
			name: composer.create_chart(pos) for name, pos in CHART_LAYOUT.items()
		}

		# Upper charts butt against the ones below; only the bottom of each
		# pair carries X tick labels.
		self.charts["upper_full"].hide_x_tick_labels()
		self.charts["upper_zoom"].hide_x_tick_labels()

		# -------------------------------------------------------------------
		# Status + progress
		# -------------------------------------------------------------------

		self.status = StatusService(
			sink=composer.create_status_field(STATUS_POSITION),
			refresh=composer.refresh,
		)
		self._status_log_handler: Optional[logging.Handler] = None
		if self.cfg.get_bool("status.mirror_logs", False):
			self._status_log_handler = attach_status_logging(self.status, get_app_logger())

		self.progress = ProgressService(composer)

		# -------------------------------------------------------------------
		# Command spine
		# -------------------------------------------------------------------

		self.invoker = CommandInvoker(
			status=self.status,
			progress=self.progress,
			telemetry=self.telemetry,
		)
		self.commands = CommandRegistry(
			composer,
			runner=self.invoker.invoke,
			allow_shared_bindings=self.cfg.get_bool("keys.allow_shared_bindings", False),
			telemetry=self.telemetry,
		)
		self.states = StateSynchronizer(self.commands)
		self.dispatcher = EventDispatcher(self.commands, self.invoker, telemetry=self.telemetry)

		# -------------------------------------------------------------------
		# Zoomer
		# -------------------------------------------------------------------

		self.zoomer: Optional[Zoomer] = None
		if zoomer_factory is not None:
			full = tuple(self.charts[n] for n in FULL_CHARTS)
			zoom = tuple(self.charts[n] for n in ZOOM_CHARTS)
			self.zoomer = zoomer_factory(full, zoom)
			self.zoomer.handle_mouse_input(VIEW_ONLY_ZOOM_CHART)

		# All keypresses in the window go through the dispatcher.
		composer.bind_keypress(self.dispatcher.handle_keypress)

		title = self.cfg.get("window.title", None)
		if title:
			composer.set_title(str(title))

	# -----------------------------------------------------------------------
	# Commands
	# -----------------------------------------------------------------------

	def add_command(
		self,
		name: str,
		menu: MenuContainer | None,
		label: str,
		key: str,
		tooltip: str,
		col: int,
		row: int,
		callback: CommandAction,
	) -> Command:
		"""
		Create a command with a button and/or menu entry plus a shortcut.

		The same callback runs on click, menu pick and keypress. The button is
		only built when col and row are both nonzero. New commands start
		disabled; see enable_commands().
		"""
		return self.commands.register(name, menu, label, key, tooltip, col, row, callback)

	def enable_commands(self, names: Iterable[str] | str = ()) -> None:
		"""
		Enable the named commands (all commands when names is empty).
		"""
		self.states.enable(names)

	def disable_commands(self, names: Iterable[str] | str = ()) -> None:
		"""
		Grey out the named commands (all commands when names is empty).
		"""
		self.states.disable(names)

	def rename_command(self, name: str, label: str) -> None:
		self.commands.rename(name, label)

	def create_menu(self, label: str) -> MenuContainer:
		return self.composer.create_menu(label)

	def handle_keypress(self, modifiers: Iterable[str], key: str) -> DispatchOutcome:
		return self.dispatcher.handle_keypress(tuple(modifiers), key)

	# -----------------------------------------------------------------------
	# Charts
	# -----------------------------------------------------------------------

	def create_empty_line(self, chart_name: str, style: str) -> LineHandle:
		"""
		Add a hidden line to chart_name for later population.
		"""
		chart = self.charts.get(chart_name)
		if chart is None:
			raise KeyError(f"Unknown chart: {chart_name!r}")
		return chart.add_line(style)

	def enable_charts_control(self) -> None:
		for chart in self.charts.values():
			chart.set_interactive(True)

	def disable_charts_control(self) -> None:
		for chart in self.charts.values():
			chart.set_interactive(False)

	# -----------------------------------------------------------------------
	# Status / title
	# -----------------------------------------------------------------------

	def report_status(self, fmt: str, *args: Any) -> str:
		return self.status.report(fmt, *args)

	def set_window_title(self, fmt: str, *args: Any) -> str:
		title = fmt % args
		self.composer.set_title(title)
		return title

	# -----------------------------------------------------------------------
	# Waiting (modal progress)
	# -----------------------------------------------------------------------

	def start_wait(self, message: str) -> None:
		self.progress.start(message)

	def update_wait(self, progress: float, fmt: str, *args: Any) -> None:
		self.progress.update(progress, fmt % args)

	def end_wait(self) -> None:
		self.progress.end()

	@contextmanager
	def waiting(self, message: str) -> Iterator[ProgressService]:
		"""
		with window.waiting("Loading..."):
			...

		The overlay is always removed, even if the body raises.
		"""
		with self.progress.waiting(message) as progress:
			yield progress

	# -----------------------------------------------------------------------
	# Lifetime
	# -----------------------------------------------------------------------

	def close(self) -> None:
		# The app logger outlives this window
		if self._status_log_handler is not None:
			get_app_logger().removeHandler(self._status_log_handler)
			self._status_log_handler = None
		self.composer.close()

	def __repr__(self) -> str:
		return f"<{self.__class__.__name__} commands={len(self.commands)}>"
