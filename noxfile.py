"""Sesiones de QA locales para el portafolio personal."""

from __future__ import annotations

import nox

SOURCE_DIRS = ("shared", "services", "infrastructure", "data", "ui", "app.py")
TEST_DIRS = ("tests",)

nox.options.reuse_existing_virtualenvs = True
nox.options.sessions = ("lint", "typecheck", "tests", "security")


def _install_project(session: nox.Session, *extra: str, extras: str = "test") -> None:
    """Instala el proyecto en modo editable junto con las dependencias extra."""

    session.install("-e", f".[{extras}]")
    if extra:
        session.install(*extra)


@nox.session
def lint(session: nox.Session) -> None:
    """Ejecuta flake8 sobre el código y los tests."""

    _install_project(session, "flake8>=7.0.0")
    session.run("flake8", "--max-line-length=120", *SOURCE_DIRS, *TEST_DIRS)


@nox.session
def typecheck(session: nox.Session) -> None:
    """Valida los tipos usando mypy."""

    _install_project(session, "mypy>=1.11.0", "types-requests")
    session.run("mypy", "--ignore-missing-imports", *SOURCE_DIRS)


@nox.session
def tests(session: nox.Session) -> None:
    """Ejecuta la suite de pytest con cobertura."""

    _install_project(session)
    session.run(
        "pytest",
        *(f"--cov={name.removesuffix('.py')}" for name in SOURCE_DIRS),
        "--cov-report=term-missing",
        *session.posargs,
    )


@nox.session
def security(session: nox.Session) -> None:
    """Ejecuta verificaciones de seguridad con bandit y pip-audit."""

    _install_project(session, "bandit>=1.7.9", "pip-audit>=2.7.3")
    session.run("bandit", "-q", "-r", *SOURCE_DIRS)
    session.run("pip-audit")
