from __future__ import annotations

import re
from pathlib import Path

from shared import __version__
from ui.footer import get_version


def test_version_matches_pyproject() -> None:
    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    match = re.search(r'^version\s*=\s*"([^"]+)"', pyproject.read_text(encoding="utf-8"), re.MULTILINE)

    assert match is not None
    assert match.group(1) == __version__


def test_footer_reports_package_version() -> None:
    assert get_version() == __version__
