"""Screens for Narrow Search."""

from narrow_search.screens.main import MainScreen

__all__ = ["MainScreen"]
