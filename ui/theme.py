"""
AutoClicker look — compact dark theme.
"""

# ── Colors ──────────────────────────────────────────────────────────
BG_WINDOW     = "#10131C"
BG_PANEL      = "#141720"
BG_INPUT      = "#0D0F18"
BG_BUTTON     = "#1C2030"

BORDER        = "#252840"
BORDER_BRIGHT = "#3A3F60"

ACCENT        = "#7C5CFC"
ACCENT_HOVER  = "#9B80FF"

GREEN         = "#00E676"
GREEN_HOVER   = "#00FF8C"
RED           = "#FF3D57"
RED_HOVER     = "#FF6070"
ORANGE        = "#FF9100"

TEXT_PRIMARY   = "#E8EAFF"
TEXT_SECONDARY = "#7B84A8"
TEXT_MUTED     = "#444A6A"

# ── Fonts ────────────────────────────────────────────────────────────
FONT_FAMILY = "Segoe UI"

FONT_H2     = (FONT_FAMILY, 13, "bold")
FONT_H3     = (FONT_FAMILY, 11, "bold")
FONT_BODY   = (FONT_FAMILY, 11)
FONT_SMALL  = (FONT_FAMILY, 10)
FONT_LABEL  = (FONT_FAMILY, 8, "bold")

# ── Layout ───────────────────────────────────────────────────────────
WINDOW_SIZE = "240x300"
PAD         = 14

NOTICE_MS   = 4000
