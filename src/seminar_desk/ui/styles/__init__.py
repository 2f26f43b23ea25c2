"""
UI styles - dark theme design system.

This package provides:
- COLORS, CAPACITY_COLORS: Color palette dictionaries
- SPACING, RADIUS, FONTS, UI, ICONS: Dimension constants
- format_* / *_variant: Session display helpers
- get_stylesheet: QSS stylesheet generator
"""

from .colors import COLORS, CAPACITY_COLORS
from .dimensions import SPACING, RADIUS, FONTS, UI, ICONS
from .utils import (
    format_date,
    format_session_when,
    format_remaining,
    capacity_variant,
    slots_variant,
)
from .stylesheet import get_stylesheet

__all__ = [
    # Colors
    "COLORS",
    "CAPACITY_COLORS",
    # Dimensions
    "SPACING",
    "RADIUS",
    "FONTS",
    "UI",
    "ICONS",
    # Utilities
    "format_date",
    "format_session_when",
    "format_remaining",
    "capacity_variant",
    "slots_variant",
    # Stylesheet
    "get_stylesheet",
]
