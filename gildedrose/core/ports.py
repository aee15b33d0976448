"""Port interfaces for the Gilded Rose inventory system.

These abstract base classes define the boundaries between core
domain logic and external adapters. Implementations live in the
adapters/ package.

Port Interface Categories:

1. **Driven Ports** (core calls out to adapters)
   - InventoryPort: Load the starting items
   - ReportPort: Publish the inventory state for each day

2. **Driving Ports** (adapters call into core)
   - SimulationPort: Run the inventory forward a number of days
"""

from abc import ABC, abstractmethod
from typing import Any

from .models import DayReport, Item


# ============================================================================
# DRIVEN PORTS (Core calls out to adapters)
# ============================================================================


class InventoryPort(ABC):
    """Port for loading the items a simulation starts from.

    Implementations must return fresh Item objects on every call, so
    that two simulations never share mutable state.
    """

    @abstractmethod
    def load_items(self) -> list[Item]:
        """Load the starting inventory.

        Returns:
            List of Item objects in display order.

        Raises:
            ValueError: If the source holds invalid records.
            OSError: If the source cannot be read.
        """


class ReportPort(ABC):
    """Port for publishing inventory state to an output channel."""

    @abstractmethod
    def report_day(self, report: DayReport) -> None:
        """Publish the state of the inventory at the end of a day.

        Args:
            report: Immutable snapshot of every item for that day.
        """

    @abstractmethod
    def report_summary(self, stats: dict[str, Any]) -> None:
        """Publish a summary once the simulation has finished.

        Args:
            stats: Dictionary with keys days, item_count,
                category_counts, worthless_count and max_quality_count.
        """


# ============================================================================
# DRIVING PORTS (Adapters call into core)
# ============================================================================


class SimulationPort(ABC):
    """Entry point for running the inventory forward in time."""

    @abstractmethod
    def run(self, days: int) -> list[DayReport]:
        """Simulate the given number of days.

        Args:
            days: Number of day updates to apply. Zero reports only the
                starting inventory.

        Returns:
            One DayReport per day, starting at day 0.

        Raises:
            ValueError: If days is negative.
            OSError: If the starting inventory cannot be read.
        """
