# ---------------------------------------------------------------------------
# File: keys.py
# ---------------------------------------------------------------------------
# Description:
#	Canonical key strings for lineedit.
#
# Notes:
#	- A canonical key string is every modifier followed by "-", in the order
#	  the input source reports them, then the lowercase base key:
#		("control",), "s"			-> "control-s"
#		("shift", "control"), "a"	-> "shift-control-a"
#	- Modifier order is never sorted; the input source owns it.
#	- split_tk_event() is the Tk input source. It reports modifiers in a fixed
#	  order (control, shift, alt, command) and uses the same key names for
#	  arrows / paging as the bindings (leftarrow, pageup, ...).
#	- A bare modifier press reports that modifier as both modifier and key,
#	  e.g. Alt on its own is "alt-alt".
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/09/2026	Paul G. LeDuc				Replace KeyMap with canonical key strings
# 01/10/2026	Paul G. LeDuc				Add Tk event translation
# 01/11/2026	Paul G. LeDuc				Add accelerator_hint for menu entries
# 01/14/2026	Paul G. LeDuc				Lower-case the base key in canonical_key
# ---------------------------------------------------------------------------

from __future__ import annotations

import sys
from typing import Any, Iterable, Optional


BARE_ALT = "alt-alt"

CONTROL_PREFIX = "control-"

MODIFIER_ORDER: tuple[str, ...] = ("control", "shift", "alt", "command")

# Tk event.state masks per platform
_STATE_MASKS: dict[str, tuple[tuple[str, int], ...]] = {
	"darwin": (("control", 0x0004), ("shift", 0x0001), ("alt", 0x0010), ("command", 0x0008)),
	"win32": (("control", 0x0004), ("shift", 0x0001), ("alt", 0x20000)),
	"default": (("control", 0x0004), ("shift", 0x0001), ("alt", 0x0008)),
}

_MODIFIER_KEYSYMS: dict[str, str] = {
	"control_l": "control",
	"control_r": "control",
	"shift_l": "shift",
	"shift_r": "shift",
	"alt_l": "alt",
	"alt_r": "alt",
	"option_l": "alt",
	"option_r": "alt",
	"meta_l": "command",
	"meta_r": "command",
	"command": "command",
}

_KEY_NAMES: dict[str, str] = {
	"left": "leftarrow",
	"right": "rightarrow",
	"up": "uparrow",
	"down": "downarrow",
	"prior": "pageup",
	"next": "pagedown",
	"kp_add": "add",
	"kp_subtract": "subtract",
	"kp_enter": "return",
}


def canonical_key(modifiers: Iterable[str], key: str) -> str:
	"""
	Build the canonical key string.

	Deterministic and order-preserving; modifiers are used exactly as given,
	the base key is lower-cased ("S" and "s" are the same key).
	"""
	return "".join(f"{m}-" for m in modifiers) + key.lower()


def normalize_key_name(keysym: str) -> str:
	name = keysym.lower()
	if name in _MODIFIER_KEYSYMS:
		return _MODIFIER_KEYSYMS[name]
	return _KEY_NAMES.get(name, name)


def split_tk_event(event: Any, *, platform: str | None = None) -> tuple[tuple[str, ...], str]:
	"""
	Translate a Tk KeyPress event into (modifiers, key).
	"""
	plat = platform if platform is not None else sys.platform
	masks = _STATE_MASKS.get(plat, _STATE_MASKS["default"])

	state = int(getattr(event, "state", 0) or 0)
	keysym = str(getattr(event, "keysym", "") or "")

	held = {name for name, mask in masks if state & mask}

	key = normalize_key_name(keysym)
	if key in MODIFIER_ORDER:
		# Tk reports state from before the press
		held.add(key)

	modifiers = tuple(m for m in MODIFIER_ORDER if m in held)
	return modifiers, key


def accelerator_hint(key_binding: str) -> Optional[str]:
	"""
	Return X for bindings of the form "control-X", else None.

	"control-shift-z" has no hint; only single-key control chords do.
	"""
	if not key_binding.startswith(CONTROL_PREFIX):
		return None
	rest = key_binding[len(CONTROL_PREFIX):]
	if not rest or "-" in rest:
		return None
	return rest


def tooltip_text(tooltip: str, key_binding: str) -> str:
	return f'{tooltip} ("{key_binding}")'
