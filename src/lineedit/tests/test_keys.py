# ---------------------------------------------------------------------------
# File: test_keys.py
# ---------------------------------------------------------------------------
# Description:
#	Unit tests for canonical key strings and Tk event translation.
#
# Notes:
#	- Tk events are faked with SimpleNamespace(state=..., keysym=...).
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 12/30/2025	Paul G. LeDuc				Initial tests (KeyMap)
# 01/10/2026	Paul G. LeDuc				Rewrite for canonical key strings
# ---------------------------------------------------------------------------

from __future__ import annotations

from types import SimpleNamespace

import pytest

from lineedit.app.keys import (
	accelerator_hint,
	canonical_key,
	normalize_key_name,
	split_tk_event,
	tooltip_text,
)


@pytest.mark.parametrize(
	"modifiers,key,expected",
	[
		((), "z", "z"),
		(("control",), "s", "control-s"),
		(("shift",), "z", "shift-z"),
		(("shift", "control"), "a", "shift-control-a"),
		(("control", "shift"), "a", "control-shift-a"),
		(("alt",), "alt", "alt-alt"),
		([], "leftarrow", "leftarrow"),
	],
)
def test_canonical_key(modifiers, key, expected):
	assert canonical_key(modifiers, key) == expected


def test_canonical_key_is_deterministic():
	assert canonical_key(("control", "alt"), "x") == canonical_key(["control", "alt"], "x")


@pytest.mark.parametrize(
	"keysym,expected",
	[
		("S", "s"),
		("Left", "leftarrow"),
		("Prior", "pageup"),
		("Next", "pagedown"),
		("Alt_L", "alt"),
		("Control_R", "control"),
		("F1", "f1"),
		("Delete", "delete"),
	],
)
def test_normalize_key_name(keysym, expected):
	assert normalize_key_name(keysym) == expected


def test_split_tk_event_plain_key():
	ev = SimpleNamespace(state=0, keysym="a")
	assert split_tk_event(ev, platform="linux") == ((), "a")


def test_split_tk_event_control_shift_in_fixed_order():
	ev = SimpleNamespace(state=0x0004 | 0x0001, keysym="Z")
	assert split_tk_event(ev, platform="linux") == (("control", "shift"), "z")


def test_split_tk_event_bare_alt_reports_alt_alt():
	ev = SimpleNamespace(state=0, keysym="Alt_L")
	mods, key = split_tk_event(ev, platform="linux")

	assert (mods, key) == (("alt",), "alt")
	assert canonical_key(mods, key) == "alt-alt"


def test_split_tk_event_platform_masks():
	# Same state bit means different things per platform
	ev = SimpleNamespace(state=0x0008, keysym="x")

	assert split_tk_event(ev, platform="linux") == (("alt",), "x")
	assert split_tk_event(ev, platform="darwin") == (("command",), "x")
	assert split_tk_event(ev, platform="win32") == ((), "x")


def test_split_tk_event_arrow_key():
	ev = SimpleNamespace(state=0x0004, keysym="Right")
	assert split_tk_event(ev, platform="linux") == (("control",), "rightarrow")


@pytest.mark.parametrize(
	"binding,expected",
	[
		("control-s", "s"),
		("control-f1", "f1"),
		("control-shift-z", None),
		("shift-s", None),
		("s", None),
		("control-", None),
	],
)
def test_accelerator_hint(binding, expected):
	assert accelerator_hint(binding) == expected


def test_tooltip_text():
	assert tooltip_text("Undo", "control-z") == 'Undo ("control-z")'
	assert tooltip_text("", "x") == ' ("x")'


def test_canonical_key_lower_cases_base_key_only():
	assert canonical_key(("control",), "S") == "control-s"
	assert canonical_key(("shift",), "PageUp") == "shift-pageup"
