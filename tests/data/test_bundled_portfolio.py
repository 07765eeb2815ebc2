from __future__ import annotations

from data import load_fallback_portfolio

SECTIONS = (
    "personalInfo",
    "stats",
    "education",
    "experience",
    "skillProgress",
    "technicalSkills",
    "achievements",
    "aiProjects",
    "projects",
)


def test_bundled_document_has_every_section() -> None:
    document = load_fallback_portfolio()
    for section in SECTIONS:
        assert section in document, section


def test_bundled_skill_levels_are_percentages() -> None:
    document = load_fallback_portfolio()
    levels = [skill["level"] for skill in document["skillProgress"]]
    levels += [
        skill["level"] for group in document["technicalSkills"] for skill in group["skills"]
    ]
    assert levels
    assert all(0 <= level <= 100 for level in levels)


def test_each_call_returns_a_fresh_copy() -> None:
    first = load_fallback_portfolio()
    second = load_fallback_portfolio()

    assert first == second
    assert first is not second
    assert first["projects"] is not second["projects"]
