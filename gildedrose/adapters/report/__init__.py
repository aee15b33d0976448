"""Report adapters for publishing the inventory state.

Implementations support multiple output channels:
- Stdout (the classic day-by-day listing)
- Markdown file (one table per day)
"""
