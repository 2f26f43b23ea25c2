"""
Color palette - dark theme with layered backgrounds.
"""

COLORS = {
    # Backgrounds (layered depth)
    "bg_base": "#0d0d0d",  # Window background
    "bg_surface": "#1a1a1a",  # Cards, panels
    "bg_elevated": "#222222",  # Inputs, header
    "bg_hover": "#2a2a2a",  # Hovered card
    "bg_active": "#303030",
    "bg_selected": "rgba(59, 130, 246, 0.16)",  # Selected card
    # Text hierarchy
    "text_primary": "#f5f5f5",
    "text_secondary": "#b3b3b3",
    "text_muted": "#737373",
    # Accent colors
    "accent_primary": "#3b82f6",  # Blue 500
    "accent_primary_hover": "#60a5fa",  # Blue 400
    "accent_success": "#22c55e",
    "accent_warning": "#f59e0b",
    "accent_error": "#ef4444",
    # Semantic colors with muted backgrounds
    "success": "#22c55e",
    "success_muted": "rgba(34, 197, 94, 0.20)",
    "warning": "#f59e0b",
    "warning_muted": "rgba(245, 158, 11, 0.20)",
    "error": "#ef4444",
    "error_muted": "rgba(239, 68, 68, 0.20)",
    "info": "#3b82f6",
    "info_muted": "rgba(59, 130, 246, 0.20)",
    # Session types
    "type_oral": "#a855f7",  # Violet 500
    "type_oral_bg": "rgba(168, 85, 247, 0.20)",
    "type_poster": "#06b6d4",  # Cyan 500
    "type_poster_bg": "rgba(6, 182, 212, 0.20)",
    # Borders
    "border_subtle": "rgba(255, 255, 255, 0.08)",
    "border_default": "rgba(255, 255, 255, 0.12)",
    "border_strong": "rgba(255, 255, 255, 0.18)",
    "border_accent": "rgba(59, 130, 246, 0.6)",
    # Sidebar
    "sidebar_bg": "#111111",
    "sidebar_hover": "rgba(255, 255, 255, 0.04)",
    "sidebar_active": "rgba(59, 130, 246, 0.12)",
    "sidebar_active_border": "#3b82f6",
}

# Capacity display: full sessions use the danger colour
CAPACITY_COLORS = {
    "danger": COLORS["error"],
    "neutral": COLORS["text_secondary"],
    "success": COLORS["success"],
}
