"""Test suite for the Gilded Rose inventory.

Organized into three categories:

1. core/: Unit tests for core domain logic
   - No external dependencies, fast execution
   - Uses in-memory fakes for ports

2. adapters/: Tests for adapter implementations
   - Inventory sources, report outputs and CLI commands

3. fakes/: Port implementations for testing
   - In-memory implementations of InventoryPort and ReportPort
"""
