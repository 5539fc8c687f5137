"""phaseline: calendar timeline layout for project portfolios.

Row packing, date/pixel mapping, two-pane scroll sync and today focus.
Library users import from `phaseline` or `phaseline.api`; both expose the
same names.
"""

from __future__ import annotations

from .api import *  # noqa: F401,F403
from . import api as _api

__version__ = "0.3.0"

__all__ = list(_api.__all__)
