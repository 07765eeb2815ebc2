# ui/palette.py
from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Tuple


@dataclass(frozen=True)
class Palette:
    """Colors for one page theme."""

    bg: str
    card_bg: str
    border: str
    text: str
    muted_text: str
    accent: str
    heading: str
    chart_template: str


ACCENT = "#f97316"
ACCENT_DARK = "#ea580c"

PALETTES = {
    "dark": Palette(
        bg="#161E2E",
        card_bg="#232F3E",
        border="rgba(249,115,22,0.2)",
        text="#e2e8f0",
        muted_text="#94a3b8",
        accent=ACCENT,
        heading="#fb923c",
        chart_template="plotly_dark",
    ),
    "light": Palette(
        bg="#FFFFFF",
        card_bg="#FFFFFF",
        border="#fed7aa",
        text="#1e293b",
        muted_text="#475569",
        accent=ACCENT,
        heading=ACCENT_DARK,
        chart_template="plotly_white",
    ),
}


def get_palette(theme: str = "dark") -> Palette:
    return PALETTES.get(theme, PALETTES["dark"])


def get_active_palette() -> Palette:
    from .ui_settings import get_settings

    return get_palette(get_settings().theme)


# Tailwind utility color names used by the portfolio document.
TAILWIND_COLORS: Dict[str, str] = {
    "orange-400": "#fb923c",
    "orange-500": "#f97316",
    "orange-600": "#ea580c",
    "orange-700": "#c2410c",
    "yellow-500": "#eab308",
    "yellow-700": "#a16207",
    "blue-400": "#60a5fa",
    "blue-500": "#3b82f6",
    "blue-600": "#2563eb",
    "blue-700": "#1d4ed8",
    "blue-800": "#1e40af",
    "cyan-500": "#06b6d4",
    "cyan-600": "#0891b2",
    "sky-500": "#0ea5e9",
    "sky-700": "#0369a1",
    "teal-500": "#14b8a6",
    "teal-700": "#0f766e",
    "green-400": "#4ade80",
    "green-500": "#22c55e",
    "green-600": "#16a34a",
    "green-700": "#15803d",
    "green-800": "#166534",
    "emerald-500": "#10b981",
    "lime-500": "#84cc16",
    "lime-700": "#4d7c0f",
    "purple-500": "#a855f7",
    "purple-600": "#9333ea",
    "purple-700": "#7e22ce",
    "indigo-500": "#6366f1",
    "indigo-700": "#4338ca",
    "fuchsia-500": "#d946ef",
    "fuchsia-700": "#a21caf",
    "pink-500": "#ec4899",
    "red-400": "#f87171",
    "red-500": "#ef4444",
    "red-600": "#dc2626",
    "red-700": "#b91c1c",
    "red-900": "#7f1d1d",
    "gray-500": "#6b7280",
    "gray-700": "#374151",
}

DEFAULT_GRADIENT: Tuple[str, str] = ("#f97316", "#c2410c")

_GRADIENT_PATTERN = re.compile(r"from-(\S+)\s+to-(\S+)")


def gradient_colors(
    css_class: str | None, default: Tuple[str, str] = DEFAULT_GRADIENT
) -> Tuple[str, str]:
    """Translate ``"from-x-500 to-y-700"`` into a pair of hex colors.

    Unknown color names fall back to the matching end of ``default``.
    """

    match = _GRADIENT_PATTERN.search(css_class or "")
    if not match:
        return default
    start = TAILWIND_COLORS.get(match.group(1), default[0])
    end = TAILWIND_COLORS.get(match.group(2), default[1])
    return start, end


def gradient_css(css_class: str | None, default: Tuple[str, str] = DEFAULT_GRADIENT) -> str:
    start, end = gradient_colors(css_class, default)
    return f"linear-gradient(90deg, {start}, {end})"


__all__ = [
    "Palette",
    "PALETTES",
    "TAILWIND_COLORS",
    "DEFAULT_GRADIENT",
    "get_palette",
    "get_active_palette",
    "gradient_colors",
    "gradient_css",
]
