"""Fake/mock implementations of core ports for testing.

These in-memory implementations allow core domain logic to be tested
without external dependencies:

- FakeInventoryPort: Canned starting items
- FakeReportPort: Captured day reports and summaries for assertion
- FakeSimulationPort: Captured simulation runs
"""

from .inventory import FakeInventoryPort
from .report import FakeReportPort
from .simulation import FakeSimulationPort

__all__ = [
    "FakeInventoryPort",
    "FakeReportPort",
    "FakeSimulationPort",
]
