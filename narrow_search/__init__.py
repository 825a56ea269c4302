"""Narrow Search: incremental search suggestions for a chat client."""

__version__ = "0.1.0"
