# ---------------------------------------------------------------------------
# File: config.py
# ---------------------------------------------------------------------------
# Description:
#	AppConfig for lineedit.
#
# Notes:
#	Known keys:
#		window.title				str   (default: unset, toolkit default title)
#		window.grid_size			int   (default 25)
#		theme						str   (default "arc")
#		keys.allow_shared_bindings	bool  (default False)
#		status.mirror_logs			bool  (default False)
#		logging.*					see lineedit.core.logging
#		telemetry_enabled			bool  (default False)
#		telemetry_sink				"null" | "log"
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Split out of app.py
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class AppConfig:
	"""
	Light wrapper for config options.
	"""
	options: dict[str, Any] | None = None

	def get(self, key: str, default: Any = None) -> Any:
		if self.options is None:
			return default
		return self.options.get(key, default)

	def get_bool(self, key: str, default: bool = False) -> bool:
		return bool(self.get(key, default))

	def get_int(self, key: str, default: int) -> int:
		value = self.get(key, default)
		try:
			return int(value)
		except (TypeError, ValueError):
			return default

	@classmethod
	def coerce(cls, cfg: "AppConfig | dict[str, Any] | None") -> "AppConfig":
		if isinstance(cfg, AppConfig):
			return cfg
		return cls(dict(cfg) if cfg else None)
