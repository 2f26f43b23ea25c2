"""
Spacing, typography, and UI constants (8px base grid).
"""

SPACING = {
    "xs": 4,
    "sm": 8,
    "md": 16,
    "lg": 24,
    "xl": 32,
    "2xl": 48,
}

RADIUS = {
    "sm": 6,  # Badges, buttons
    "md": 8,  # Cards, inputs
    "lg": 12,  # Containers
}

FONTS = {
    "family": "-apple-system, BlinkMacSystemFont, 'Segoe UI', Roboto, Helvetica, Arial, sans-serif",
    # Sizes
    "size_xs": 11,
    "size_sm": 12,
    "size_base": 13,
    "size_md": 14,
    "size_lg": 16,
    "size_xl": 18,
    "size_2xl": 24,
    # Weights
    "weight_normal": 400,
    "weight_medium": 500,
    "weight_semibold": 600,
    "weight_bold": 700,
}

UI = {
    # Window
    "window_min_width": 1024,
    "window_min_height": 600,
    # Regions
    "header_height": 64,
    "status_bar_height": 32,
    "sidebar_width": 230,
    "nav_item_height": 44,
    # Schedule
    "session_card_max_height": 120,
    "detail_panel_width": 350,
    "detail_label_width": 110,
    "splitter_list_size": 600,
    # Metric cards
    "card_min_width": 130,
    "card_min_height": 90,
    "card_max_width": 180,
}

ICONS = {
    # Navigation
    "schedule": "📅",
    "registration": "📝",
    "status": "📋",
    "assigned": "📋",
    "dashboard": "📊",
    "session_management": "🗓",
    "reports": "📈",
    "login": "🔐",
    "logout": "🚪",
    # Session cards
    "date": "📅",
    "venue": "📍",
    "oral": "🎤",
    "poster": "🖼",
    "capacity": "👥",
    # Misc
    "logo": "🎓",
    "empty": "○",
}
