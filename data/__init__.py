"""Static data shipped with the application."""

from .loaders import load_fallback_portfolio

__all__ = ["load_fallback_portfolio"]
