"""
Environment configuration for the command line.

Environment variables
- REGGIE_CASE_STYLE: default output style, any name accepted by Style.parse
- REGGIE_CASE_SKIP_INVALID: if true, invalid inputs are logged and skipped
"""

import os

from lfp_types import to_bool

from reggie_case.formats import Style

_ENV_STYLE = "REGGIE_CASE_STYLE"
_ENV_SKIP_INVALID = "REGGIE_CASE_SKIP_INVALID"


def style(default: Style = Style.LOWER_CAMEL) -> Style:
    """Return the configured default style, raising ValueError for bad names."""
    value = os.getenv(_ENV_STYLE, "").strip()
    return Style.parse(value) if value else default


def skip_invalid(default: bool = False) -> bool:
    return to_bool(os.getenv(_ENV_SKIP_INVALID), default=default)
