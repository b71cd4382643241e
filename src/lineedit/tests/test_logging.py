# ---------------------------------------------------------------------------
# File: test_logging.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for lineedit.core.logging.
#
# Notes:
#	- init_logging() touches the root logger; the fixture puts it back.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/11/2026	Paul G. LeDuc				Initial tests
# ---------------------------------------------------------------------------

from __future__ import annotations

import logging

import pytest

from lineedit.app.config import AppConfig
from lineedit.core.logging import (
	_coerce_file_mode,
	_coerce_level,
	_reset_logging_for_tests,
	get_app_logger,
	init_logging,
)


@pytest.fixture
def root_logger():
	root = logging.getLogger()
	saved_level = root.level
	saved_handlers = list(root.handlers)
	_reset_logging_for_tests()

	yield root

	for h in list(root.handlers):
		root.removeHandler(h)
		if h not in saved_handlers:
			h.close()
	for h in saved_handlers:
		root.addHandler(h)
	root.setLevel(saved_level)
	_reset_logging_for_tests()


def test_get_app_logger_names():
	assert get_app_logger().name == "lineedit.app"
	assert get_app_logger("keys").name == "lineedit.app.keys"


@pytest.mark.parametrize(
	"value,expected",
	[
		(logging.DEBUG, logging.DEBUG),
		("warning", logging.WARNING),
		(" ERROR ", logging.ERROR),
		("15", 15),
		("nonsense", logging.INFO),
		(None, logging.INFO),
	],
)
def test_coerce_level(value, expected):
	assert _coerce_level(value) == expected


def test_coerce_file_mode():
	assert _coerce_file_mode("W") == "w"
	assert _coerce_file_mode("r+") == "a"
	assert _coerce_file_mode(None) == "a"


def test_init_logging_console_only(root_logger):
	init_logging(AppConfig({"logging.level": "debug"}))

	assert root_logger.level == logging.DEBUG
	assert len(root_logger.handlers) == 1
	assert isinstance(root_logger.handlers[0], logging.StreamHandler)


def test_init_logging_is_idempotent(root_logger):
	cfg = AppConfig({"logging.level": "info"})

	init_logging(cfg)
	first = list(root_logger.handlers)
	init_logging(cfg)

	assert root_logger.handlers == first


def test_init_logging_writes_file(root_logger, tmp_path):
	log_file = tmp_path / "logs" / "lineedit.log"

	init_logging({"logging.console": False, "logging.file": str(log_file), "logging.file_mode": "w"})
	get_app_logger("tests").info("hello file")

	for h in root_logger.handlers:
		h.flush()

	assert len(root_logger.handlers) == 1
	assert "hello file" in log_file.read_text(encoding="utf-8")
