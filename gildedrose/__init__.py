"""Gilded Rose inventory: daily quality and sell-in updates for shop items."""

__version__ = "0.1.0"
