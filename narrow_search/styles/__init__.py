"""Shared styles for Narrow Search."""

from narrow_search.styles.base import BASE_CSS

__all__ = ["BASE_CSS"]
