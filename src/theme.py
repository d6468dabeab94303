"""Color helpers for the priority and urgency cells.

Decisions:
- Cells are single spaces painted with a bright ANSI background color.
- Disables automatically when not a TTY unless FORCE_COLOR=1.
- Honors NO_COLOR for complete disable.
- With color off, a cell shows its letter code instead of a blank block.
"""
from __future__ import annotations
import os, sys

_FORCE = os.environ.get("FORCE_COLOR", "").lower() in {"1", "true", "yes", "on"}
_NO_COLOR = os.environ.get("NO_COLOR") is not None
_ENABLE = (_FORCE or sys.stdout.isatty()) and not _NO_COLOR

def _code(part: str) -> str:
    """Generate ANSI escape code for a given style part."""
    return f"\033[{part}m"

RESET = _code('0')

# Bright background colors (xterm 100-107 range)
BG_RED = _code('101')
BG_GREEN = _code('102')
BG_YELLOW = _code('103')
BG_BLUE = _code('104')

PRIORITY_COLOR = {
    'C': BG_RED,
    'H': BG_YELLOW,
    'N': BG_GREEN,
    'L': BG_BLUE,
}

DUE_COLOR = {
    'O': BG_RED,
    'T': BG_YELLOW,
    'I': BG_GREEN,
}

def color_enabled() -> bool:
    return _ENABLE

def block(style: str, fallback: str, use_color: bool) -> str:
    """One-character cell: a colored space, or ``fallback`` without color."""
    if not use_color:
        return fallback
    return style + ' ' + RESET

__all__ = [
    'block','color_enabled','RESET','BG_RED','BG_GREEN','BG_YELLOW','BG_BLUE',
    'PRIORITY_COLOR','DUE_COLOR'
]
