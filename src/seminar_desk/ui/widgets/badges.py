"""
Pill badges for session type and status.
"""

from PyQt6.QtWidgets import QLabel, QWidget

from ...models import SessionStatus, SessionType
from ..styles import COLORS, SPACING, FONTS, RADIUS


class Badge(QLabel):
    """Rounded pill label."""

    def __init__(
        self,
        text: str,
        bg_color: str,
        text_color: str,
        parent: QWidget | None = None,
    ):
        super().__init__(text.upper(), parent)
        self.setStyleSheet(f"""
            padding: 2px {SPACING["sm"]}px;
            font-size: {FONTS["size_xs"]}px;
            font-weight: {FONTS["weight_bold"]};
            background-color: {bg_color};
            color: {text_color};
            border: none;
            border-radius: {RADIUS["sm"]}px;
            letter-spacing: 0.5px;
        """)


class TypeBadge(Badge):
    """Oral / Poster badge."""

    TYPE_MAP = {
        SessionType.ORAL: ("type_oral_bg", "type_oral"),
        SessionType.POSTER: ("type_poster_bg", "type_poster"),
    }

    def __init__(self, session_type: SessionType, parent: QWidget | None = None):
        bg_key, fg_key = self.TYPE_MAP[session_type]
        super().__init__(session_type.short_label, COLORS[bg_key], COLORS[fg_key], parent)
        self.session_type = session_type


class StatusBadge(Badge):
    """Session status badge coloured by the status variant."""

    VARIANTS = {
        "success": (COLORS["success_muted"], COLORS["success"]),
        "warning": (COLORS["warning_muted"], COLORS["warning"]),
        "error": (COLORS["error_muted"], COLORS["error"]),
        "neutral": (COLORS["bg_elevated"], COLORS["text_muted"]),
    }

    def __init__(self, status: SessionStatus, parent: QWidget | None = None):
        bg, fg = self.VARIANTS.get(status.variant, self.VARIANTS["neutral"])
        super().__init__(status.label, bg, fg, parent)
        self.status = status
