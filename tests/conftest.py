from __future__ import annotations

import importlib
from typing import Any, Dict

import pytest

from tests.fixtures.common import RecordingStorage
from tests.fixtures.streamlit import FakeStreamlit
from tests.fixtures.time import FakeTime

_ST_MODULES = ("ui.ui_settings", "ui.sections", "ui.page", "ui.footer")


@pytest.fixture
def fake_time() -> FakeTime:
    """Provide a deterministic fake clock for time-sensitive tests."""

    return FakeTime()


@pytest.fixture
def recording_storage() -> RecordingStorage:
    return RecordingStorage()


@pytest.fixture
def fake_st(monkeypatch: pytest.MonkeyPatch) -> FakeStreamlit:
    """Swap the ``st`` reference of every UI module for a recording double."""

    fake = FakeStreamlit()
    for name in _ST_MODULES:
        module = importlib.import_module(name)
        monkeypatch.setattr(module, "st", fake)
    return fake


@pytest.fixture
def sample_document() -> Dict[str, Any]:
    return {
        "personalInfo": {
            "name": "Jamie Doe",
            "title": "Platform Engineer",
            "photo": "https://example.com/me.png",
            "contacts": [
                {"type": "email", "value": "jamie@example.com", "href": "mailto:jamie@example.com"},
                {"type": "fax", "value": "n/a"},
            ],
        },
        "stats": [{"icon": "Rocket", "label": "Launches", "value": "12", "suffix": "+"}],
        "education": [
            {"degree": "BSc", "institution": "Uni", "location": "Lisbon", "period": "2010-2014"}
        ],
        "experience": [
            {
                "position": "Engineer",
                "company": "Acme",
                "location": "Remote",
                "period": "2020-now",
                "responsibilities": ["Built **payments** stack"],
            }
        ],
        "skillProgress": [
            {"name": "Python", "level": 90, "color": "from-blue-500 to-blue-700"},
            {"name": "Go", "level": 140, "color": "nonsense"},
        ],
        "technicalSkills": [
            {"title": "Backend", "icon": "Server", "skills": [{"name": "Django", "level": 80}]}
        ],
        "achievements": [
            {"icon": "Trophy", "title": "Award", "description": "Won **twice**", "color": "from-red-500 to-red-700"}
        ],
        "aiProjects": [
            {"icon": "Bot", "title": "Agent", "gradient": "from-purple-500 to-pink-500", "techs": ["Docker"], "highlights": ["Cut costs"]}
        ],
        "projects": [
            {"title": "First", "period": "2021", "techs": ["Java"], "highlights": ["One"]},
            {"title": "Second", "period": "2022", "techs": [], "highlights": []},
        ],
    }
