# ---------------------------------------------------------------------------
# File: telemetry.py
# Description:
#	Lightweight telemetry for lineedit.
#
#	Emits:
#		- events	(command.registered, command.dispatched, key.unhandled, command.failed)
#		- counters	(keys.pressed)
#		- timers	(command.duration_ms)
#
#	Backends are "sinks". Telemetry never decides anything; dispatch results
#	must not depend on whether it is enabled.
#
# Notes:
#	- Safe to call when disabled (NullSink).
#	- LogSink writes through stdlib logging.
#	- MemorySink is for tests.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Build from AppConfig; timer reports on error too
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True, slots=True)
class TelemetryEvent:
	name: str
	timestamp: float
	attrs: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class TelemetryMetric:
	name: str
	value: float
	attrs: Dict[str, Any] = field(default_factory=dict)


class TelemetrySink(Protocol):
	def emit_event(self, event: TelemetryEvent) -> None: ...
	def emit_metric(self, metric: TelemetryMetric) -> None: ...


# ---------------------------------------------------------------------------
# Sinks
# ---------------------------------------------------------------------------

class NullSink:
	def emit_event(self, event: TelemetryEvent) -> None:
		return

	def emit_metric(self, metric: TelemetryMetric) -> None:
		return


class LogSink:
	"""
	Writes events and metrics as DEBUG records on the given logger.
	"""

	def __init__(self, logger: logging.Logger) -> None:
		self._log = logger

	def emit_event(self, event: TelemetryEvent) -> None:
		self._log.debug("telemetry.event %s %s", event.name, event.attrs)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self._log.debug("telemetry.metric %s=%s %s", metric.name, metric.value, metric.attrs)


class MemorySink:
	"""
	Keeps everything in lists for test assertions.
	"""

	def __init__(self) -> None:
		self.events: list[TelemetryEvent] = []
		self.metrics: list[TelemetryMetric] = []

	def emit_event(self, event: TelemetryEvent) -> None:
		self.events.append(event)

	def emit_metric(self, metric: TelemetryMetric) -> None:
		self.metrics.append(metric)

	def event_names(self) -> list[str]:
		return [e.name for e in self.events]

	def clear(self) -> None:
		self.events.clear()
		self.metrics.clear()


# ---------------------------------------------------------------------------
# Facade
# ---------------------------------------------------------------------------

class Telemetry:
	"""
	Telemetry facade used throughout the application.
	"""

	def __init__(self, enabled: bool = False, sink: Optional[TelemetrySink] = None) -> None:
		self._enabled = enabled
		self._sink: TelemetrySink = sink if sink is not None else NullSink()

	@property
	def enabled(self) -> bool:
		return self._enabled

	def event(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_event(TelemetryEvent(name=name, timestamp=time.time(), attrs=dict(attrs or {})))

	def counter(self, name: str, value: int = 1, attrs: Optional[Dict[str, Any]] = None) -> None:
		if not self._enabled:
			return
		self._sink.emit_metric(TelemetryMetric(name=name, value=float(value), attrs=dict(attrs or {})))

	def timer(self, name: str, attrs: Optional[Dict[str, Any]] = None) -> "_TelemetryTimer":
		return _TelemetryTimer(self, name, dict(attrs or {}))


class _TelemetryTimer:
	"""
	Context manager reporting elapsed milliseconds as a metric.

	The metric is emitted whether or not the body raised; exceptions are
	never suppressed.
	"""

	def __init__(self, telemetry: Telemetry, name: str, attrs: Dict[str, Any]) -> None:
		self._telemetry = telemetry
		self._name = name
		self._attrs = attrs
		self._start = 0.0

	def __enter__(self) -> "_TelemetryTimer":
		self._start = time.perf_counter()
		return self

	def __exit__(self, exc_type, exc, tb) -> None:
		elapsed_ms = (time.perf_counter() - self._start) * 1000.0
		attrs = dict(self._attrs)
		attrs["ok"] = exc_type is None
		self._telemetry.counter(self._name, value=int(elapsed_ms), attrs=attrs)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

def telemetry_from_config(cfg: Any | None, logger: logging.Logger | None = None) -> Telemetry:
	"""
	Build a Telemetry instance from config.

	Keys:
		telemetry_enabled:	bool (default False)
		telemetry_sink:		"null" | "log" (default "null")
	"""
	getter = getattr(cfg, "get", None)
	if not callable(getter):
		return Telemetry(False)

	if not bool(getter("telemetry_enabled", False)):
		return Telemetry(False)

	if getter("telemetry_sink", "null") == "log":
		return Telemetry(True, LogSink(logger or logging.getLogger("lineedit.telemetry")))

	return Telemetry(True, NullSink())
