"""Project version shown in the page footer."""

# Keep in sync with ``pyproject.toml``'s ``project.version``.
__version__ = "1.2.0"

__all__ = ["__version__"]
