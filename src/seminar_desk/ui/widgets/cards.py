"""
Metric cards for the coordinator dashboard.
"""

from PyQt6.QtWidgets import (
    QFrame,
    QLabel,
    QVBoxLayout,
    QHBoxLayout,
    QWidget,
    QGraphicsDropShadowEffect,
)
from PyQt6.QtCore import Qt
from PyQt6.QtGui import QColor

from ..styles import COLORS, SPACING, FONTS, RADIUS, UI


class MetricCard(QFrame):
    """Single number with a caption underneath."""

    ACCENT_MAP = {
        "primary": COLORS["accent_primary"],
        "success": COLORS["accent_success"],
        "warning": COLORS["accent_warning"],
        "error": COLORS["accent_error"],
        "muted": COLORS["text_primary"],
    }

    def __init__(
        self,
        value: str,
        label: str,
        accent: str = "primary",
        parent: QWidget | None = None,
    ):
        super().__init__(parent)
        self.setStyleSheet(f"""
            QFrame {{
                background-color: {COLORS["bg_surface"]};
                border: none;
                border-radius: {RADIUS["md"]}px;
            }}
        """)
        self.setMinimumWidth(UI["card_min_width"])
        self.setMinimumHeight(UI["card_min_height"])
        self.setMaximumWidth(UI["card_max_width"])

        shadow = QGraphicsDropShadowEffect(self)
        shadow.setBlurRadius(16)
        shadow.setOffset(0, 4)
        shadow.setColor(QColor(0, 0, 0, 80))
        self.setGraphicsEffect(shadow)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(
            SPACING["lg"], SPACING["md"], SPACING["lg"], SPACING["md"]
        )
        layout.setSpacing(SPACING["xs"])
        layout.setAlignment(Qt.AlignmentFlag.AlignCenter)

        self._value_label = QLabel(value)
        self._value_label.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._value_label.setStyleSheet(f"""
            font-size: {FONTS["size_2xl"]}px;
            font-weight: {FONTS["weight_bold"]};
            color: {self.ACCENT_MAP.get(accent, COLORS["text_primary"])};
            background: transparent;
        """)
        layout.addWidget(self._value_label)

        self._caption = QLabel(label.upper())
        self._caption.setAlignment(Qt.AlignmentFlag.AlignCenter)
        self._caption.setStyleSheet(f"""
            font-size: {FONTS["size_xs"]}px;
            font-weight: {FONTS["weight_semibold"]};
            color: {COLORS["text_muted"]};
            letter-spacing: 0.5px;
            background: transparent;
        """)
        layout.addWidget(self._caption)

    def value(self) -> str:
        return self._value_label.text()

    def set_value(self, value: str) -> None:
        self._value_label.setText(value)


class MetricsRow(QWidget):
    """Horizontal row of MetricCards addressed by key."""

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self._layout = QHBoxLayout(self)
        self._layout.setContentsMargins(0, SPACING["sm"], 0, SPACING["sm"])
        self._layout.setSpacing(SPACING["md"])
        self._cards: dict[str, MetricCard] = {}

    def add_metric(
        self,
        key: str,
        value: str,
        label: str,
        accent: str = "primary",
    ) -> MetricCard:
        card = MetricCard(value, label, accent)
        self._cards[key] = card
        self._layout.addWidget(card)
        return card

    def update_metric(self, key: str, value: str) -> None:
        if key in self._cards:
            self._cards[key].set_value(value)

    def metric(self, key: str) -> str:
        return self._cards[key].value()

    def add_stretch(self) -> None:
        self._layout.addStretch()

