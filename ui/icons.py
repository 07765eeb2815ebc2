"""Icon-name lookup tables for the portfolio sections.

The document refers to icons by name (``"Trophy"``, ``"github"``...). Each
table maps those names to a glyph; unknown names resolve to the table default.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping


@dataclass(frozen=True)
class IconTable:
    glyphs: Mapping[str, str]
    default: str

    def resolve(self, name: str | None) -> str:
        if not name:
            return self.default
        return self.glyphs.get(str(name), self.default)


@dataclass(frozen=True)
class TechBadge:
    icon: str
    color: str


CONTACT_ICONS = IconTable(
    glyphs={"email": "✉️", "phone": "📞", "linkedin": "💼", "github": "🐙"},
    default="🔗",
)

STAT_ICONS = IconTable(
    glyphs={"Code2": "💻", "GitBranch": "🌿", "Award": "🏅", "Rocket": "🚀"},
    default="💻",
)

ACHIEVEMENT_ICONS = IconTable(
    glyphs={
        "Trophy": "🏆",
        "Target": "🎯",
        "Zap": "⚡",
        "Star": "⭐",
        "Shield": "🛡️",
        "Sparkles": "✨",
        "Brain": "🧠",
        "Bot": "🤖",
    },
    default="⭐",
)

SKILL_GROUP_ICONS = IconTable(
    glyphs={
        "Terminal": "⌨️",
        "Server": "🖥️",
        "Database": "🗄️",
        "Zap": "⚡",
        "ShieldCheck": "🛡️",
        "Brain": "🧠",
        "Tool": "🔧",
        "Wrench": "🔧",
    },
    default="🧩",
)

TECH_BADGES: Mapping[str, TechBadge] = {
    "Java": TechBadge("☕", "#f97316"),
    "Kotlin": TechBadge("🇰", "#a855f7"),
    "Swift": TechBadge("🐦", "#ec4899"),
    "Bright Script": TechBadge("📺", "#eab308"),
    "HTML/CSS/JS": TechBadge("🌐", "#3b82f6"),
    "Spring Boot": TechBadge("🍃", "#16a34a"),
    "Angular 11": TechBadge("🅰️", "#dc2626"),
    "Hibernate/JPA": TechBadge("🐘", "#6366f1"),
    "MySQL": TechBadge("🐬", "#0ea5e9"),
    "Docker": TechBadge("🐳", "#60a5fa"),
    "Jenkins": TechBadge("⚙️", "#6b7280"),
    "Apache Solr": TechBadge("🔥", "#b91c1c"),
    "Selenium": TechBadge("🧪", "#4ade80"),
    "Snyk": TechBadge("🔒", "#a855f7"),
    "OMID Library": TechBadge("👁️", "#8b5cf6"),
    "Android/iOS": TechBadge("📱", "#14b8a6"),
    "CTV": TechBadge("🎬", "#fb923c"),
}

DEFAULT_TECH_BADGE = TechBadge("🔹", "#94a3b8")


def tech_badge(name: str | None) -> TechBadge:
    if not name:
        return DEFAULT_TECH_BADGE
    return TECH_BADGES.get(str(name), DEFAULT_TECH_BADGE)


__all__ = [
    "IconTable",
    "TechBadge",
    "CONTACT_ICONS",
    "STAT_ICONS",
    "ACHIEVEMENT_ICONS",
    "SKILL_GROUP_ICONS",
    "TECH_BADGES",
    "DEFAULT_TECH_BADGE",
    "tech_badge",
]
