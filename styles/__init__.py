"""Shared style constants for SIGTUNE."""

COLORS = {
    "accent": "#cc9a06",
    "primary": "#ffc72c",
    "highlight": "#ffd700",
    "muted": "#b3b3b3",
    "dim": "#535353",
    "inactive": "#2a2a2a",
    "error": "#e22134",
}

COLOR_ACCENT = COLORS["accent"]
COLOR_PRIMARY = COLORS["primary"]
COLOR_HIGHLIGHT = COLORS["highlight"]
COLOR_MUTED = COLORS["muted"]
COLOR_DIM = COLORS["dim"]
COLOR_INACTIVE = COLORS["inactive"]
COLOR_ERROR = COLORS["error"]
