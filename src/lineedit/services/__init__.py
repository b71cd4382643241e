# ---------------------------------------------------------------------------
# File: __init__.py
# Description:
#	Public service exports for lineedit.
#
#	Services are UI-agnostic capabilities the window hands to commands
#	(status text, modal progress). They talk to the toolkit only through
#	WindowComposer handles.
#
# ---------------------------------------------------------------------------
# Revision History
# ---------------------------------------------------------------------------
# Date			Author						Change
# ---------------------------------------------------------------------------
# 01/03/2026	Paul G. LeDuc				Initial coding / release
# 01/12/2026	Paul G. LeDuc				Add ProgressService
# ---------------------------------------------------------------------------

from .progress import ProgressService
from .status import StatusLogHandler, StatusService

__all__ = [
	"ProgressService",
	"StatusLogHandler",
	"StatusService",
]
