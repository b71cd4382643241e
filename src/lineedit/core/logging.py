# ---------------------------------------------------------------------------
# File: logging.py
# ---------------------------------------------------------------------------
# Description:
#	Core logging helpers for lineedit (stdlib logging).
#
# Notes:
#	- Safe to call before any window exists (no Tk dependencies).
#	- Idempotent initialization (won't duplicate handlers).
#	- Settings are read from AppConfig (or any dict-like) using dotted keys:
#		"logging.level"		(default: "INFO")
#		"logging.console"	(default: True)
#		"logging.file"		(default: None)
#		"logging.file_mode"	(default: "a")
#		"logging.format"	(default: standard format)
#		"logging.datefmt"	(default: "%Y-%m-%d %H:%M:%S")
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Initial coding / release
# 01/10/2026	Paul G. LeDuc				Collapse settings into _LogSettings
# ---------------------------------------------------------------------------

from __future__ import annotations

from dataclasses import dataclass
from typing import Any
import logging
import os


APP_LOGGER_BASE = "lineedit.app"

DEFAULT_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DEFAULT_DATEFMT = "%Y-%m-%d %H:%M:%S"

_ACTIVE: "_LogSettings | None" = None


@dataclass(frozen=True, slots=True)
class _LogSettings:
	level: int = logging.INFO
	console: bool = True
	file: str | None = None
	file_mode: str = "a"
	fmt: str = DEFAULT_FORMAT
	datefmt: str = DEFAULT_DATEFMT


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def get_logger(name: str) -> logging.Logger:
	return logging.getLogger(name)


def get_app_logger(component: str | None = None) -> logging.Logger:
	"""
	Return an application-scoped logger.

	Examples:
		get_app_logger()			-> lineedit.app
		get_app_logger("keys")		-> lineedit.app.keys
		get_app_logger("commands")	-> lineedit.app.commands
	"""
	if component:
		return logging.getLogger(f"{APP_LOGGER_BASE}.{component}")
	return logging.getLogger(APP_LOGGER_BASE)


def init_logging(cfg: Any | None = None) -> None:
	"""
	Configure the root logger from cfg.

	Calling again with identical settings is a no-op; different settings
	replace the handlers installed by the previous call.
	"""
	global _ACTIVE

	settings = _settings_from(cfg)
	if _ACTIVE == settings:
		return

	root = logging.getLogger()
	root.setLevel(settings.level)

	for h in list(root.handlers):
		root.removeHandler(h)

	formatter = logging.Formatter(fmt=settings.fmt, datefmt=settings.datefmt)

	if settings.console:
		ch = logging.StreamHandler()
		ch.setLevel(settings.level)
		ch.setFormatter(formatter)
		root.addHandler(ch)

	if settings.file:
		parent = os.path.dirname(os.path.abspath(settings.file))
		os.makedirs(parent, exist_ok=True)
		fh = logging.FileHandler(settings.file, mode=settings.file_mode, encoding="utf-8")
		fh.setLevel(settings.level)
		fh.setFormatter(formatter)
		root.addHandler(fh)

	_ACTIVE = settings


# ---------------------------------------------------------------------------
# Internals
# ---------------------------------------------------------------------------

def _cfg_get(cfg: Any | None, key: str, default: Any = None) -> Any:
	if cfg is None:
		return default
	getter = getattr(cfg, "get", None)
	if callable(getter):
		return getter(key, default)
	return default


def _settings_from(cfg: Any | None) -> _LogSettings:
	log_file = _cfg_get(cfg, "logging.file", None)
	return _LogSettings(
		level=_coerce_level(_cfg_get(cfg, "logging.level", "INFO")),
		console=bool(_cfg_get(cfg, "logging.console", True)),
		file=str(log_file) if log_file else None,
		file_mode=_coerce_file_mode(_cfg_get(cfg, "logging.file_mode", "a")),
		fmt=str(_cfg_get(cfg, "logging.format", DEFAULT_FORMAT)),
		datefmt=str(_cfg_get(cfg, "logging.datefmt", DEFAULT_DATEFMT)),
	)


def _coerce_level(level: Any) -> int:
	"""
	Accept ints, digit strings and level names ("debug", "WARNING").
	"""
	if isinstance(level, int):
		return level

	if isinstance(level, str):
		val = level.strip().upper()
		if val.isdigit():
			return int(val)
		resolved = logging.getLevelName(val)
		if isinstance(resolved, int):
			return resolved

	return logging.INFO


def _coerce_file_mode(mode: Any) -> str:
	# Only append or truncate.
	if isinstance(mode, str) and mode.strip().lower() in ("a", "w"):
		return mode.strip().lower()
	return "a"


# ---------------------------------------------------------------------------
# Test helper
# ---------------------------------------------------------------------------

def _reset_logging_for_tests() -> None:
	global _ACTIVE
	_ACTIVE = None
