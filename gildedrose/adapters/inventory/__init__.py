"""Inventory adapters for loading the starting items.

Implementations support:
- Fixture (the canonical nine-item shop)
- JSON file (an array of name/sell_in/quality records)
"""
