"""External adapters for the Gilded Rose inventory system.

This package contains everything that touches the outside world and
provides implementations of the core port interfaces.

Adapter Organization:

- inventory/: Sources of starting items (built-in fixture, JSON file)
- report/: Outputs for the day-by-day inventory state (stdout, markdown)
- cli/: Command-line interface commands
"""
