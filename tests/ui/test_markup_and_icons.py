from __future__ import annotations

import pytest

from ui.icons import (
    ACHIEVEMENT_ICONS,
    CONTACT_ICONS,
    DEFAULT_TECH_BADGE,
    SKILL_GROUP_ICONS,
    STAT_ICONS,
    tech_badge,
)
from ui.markup import split_bold, to_html


def test_split_bold_marks_bold_segments() -> None:
    assert split_bold("Built **payments** for **2M** users") == [
        ("Built ", False),
        ("payments", True),
        (" for ", False),
        ("2M", True),
        (" users", False),
    ]


@pytest.mark.parametrize(
    ("text", "expected"),
    [
        ("", []),
        (None, []),
        ("plain", [("plain", False)]),
        ("**all bold**", [("all bold", True)]),
        ("unbalanced **marker", [("unbalanced **marker", False)]),
        ("****", []),
    ],
)
def test_split_bold_edge_cases(text, expected) -> None:
    assert split_bold(text) == expected


def test_to_html_escapes_and_wraps_bold() -> None:
    assert to_html("Cut <b>costs</b> by **40%**") == (
        "Cut &lt;b&gt;costs&lt;/b&gt; by <strong>40%</strong>"
    )


def test_icon_tables_resolve_known_names() -> None:
    assert CONTACT_ICONS.resolve("email") == "✉️"
    assert STAT_ICONS.resolve("Rocket") == "🚀"
    assert ACHIEVEMENT_ICONS.resolve("Trophy") == "🏆"
    assert SKILL_GROUP_ICONS.resolve("Tool") == SKILL_GROUP_ICONS.resolve("Wrench")


@pytest.mark.parametrize("table", [CONTACT_ICONS, STAT_ICONS, ACHIEVEMENT_ICONS, SKILL_GROUP_ICONS])
@pytest.mark.parametrize("name", [None, "", "DoesNotExist"])
def test_icon_tables_fall_back_to_default(table, name) -> None:
    assert table.resolve(name) == table.default


def test_tech_badge_lookup() -> None:
    assert tech_badge("Docker").icon == "🐳"
    assert tech_badge("COBOL") == DEFAULT_TECH_BADGE
    assert tech_badge(None) == DEFAULT_TECH_BADGE
