"""Command-line interface adapters.

Provides CLI commands for the Gilded Rose inventory:
- simulate: Run the inventory forward a number of days
- inspect: Show the rule category an item name resolves to
- categories: List every category and its matching rule
"""
