"""Centralized style constants shared by the HTML and PDF renderers."""

from __future__ import annotations

from inspection_reports.models import ColorToken

# ── Rating label -> color token ──────────────────────────────────────
# Exact, case-sensitive labels.  "Fair" has no entry and falls
# through to neutral gray like any unknown label.

RATING_COLORS: dict[str, ColorToken] = {
    "Excellent": ColorToken.ACCENT_STRONG,
    "Very Good": ColorToken.ACCENT_MEDIUM,
    "Good": ColorToken.WARNING,
    "Poor": ColorToken.DANGER,
}

DEFAULT_RATING_COLOR = ColorToken.NEUTRAL_GRAY

# ── Color token -> hex ───────────────────────────────────────────────
# Kept as plain hex so each renderer can convert to whatever color object
# its library requires (CSS string, reportlab HexColor).

TOKEN_HEX: dict[ColorToken, str] = {
    ColorToken.ACCENT_STRONG: "#059669",
    ColorToken.ACCENT_MEDIUM: "#10B981",
    ColorToken.WARNING: "#F59E0B",
    ColorToken.DANGER: "#DC2626",
    ColorToken.NEUTRAL_GRAY: "#6B7280",
}

# ── Layout colors ────────────────────────────────────────────────────

BRAND_COLOR = "#059669"
HEADING_TEXT_COLOR = "#111827"
LABEL_TEXT_COLOR = "#374151"
BODY_TEXT_COLOR = "#4B5563"
MUTED_TEXT_COLOR = "#6B7280"
AREA_BG_COLOR = "#F9FAFB"
DIVIDER_COLOR = "#E5E7EB"

# Hex alpha suffix for tinted rating badges (``#05966920``).
BADGE_TINT_ALPHA = "20"
