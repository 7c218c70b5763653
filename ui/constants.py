"""
Shared constants for storefront and admin views
"""

# ===== BRAND COLORS =====
PRIMARY = "#8D6E63"
DARK = "#3E2723"
TEXT = "#5D4037"
BORDER = "#D7CCC8"
CREAM = "#FDFBF7"

# ===== RESPONSIVE LAYOUT CONSTANTS =====
BREAKPOINT = 800  # Mobile vs Desktop threshold (px)

# Grid settings for desktop
DESKTOP_COLUMNS = 3
MOBILE_COLUMNS = 1

GRID_SPACING = 10
GRID_RUN_SPACING = 10

# Status chip colors
STATUS_COLORS = {
    "pending": "orange",
    "confirmed": "blue",
    "completed": "green",
    "cancelled": "red",
    "unread": "red",
    "read": "grey",
    "replied": "green",
    "active": "green",
    "inactive": "grey",
}
