"""Composition root for the Gilded Rose inventory.

This module is the ONLY location that imports both core domain logic
and concrete adapter implementations. All wiring of dependencies
happens here, creating a clear entry point for the application.

Module Structure:
- Configuration loading via config module
- Adapter instantiation
- Core service initialization
- Entry point selection (simulate or interactive CLI)
"""

import json
import logging
import sys
from typing import Any

from gildedrose.adapters.cli.commands import CLICommandHandler
from gildedrose.adapters.inventory.fixture import FixtureInventoryAdapter
from gildedrose.adapters.inventory.json_file import JsonFileInventoryAdapter
from gildedrose.adapters.report.markdown import MarkdownReportAdapter
from gildedrose.adapters.report.stdout import StdoutReportAdapter
from gildedrose.config import Settings, load_settings
from gildedrose.core.ports import InventoryPort, ReportPort
from gildedrose.core.simulation import SimulationService
from gildedrose.core.updater import DayUpdater


def _run_cli_interactive(cli_handler: CLICommandHandler) -> None:
    """Run interactive CLI loop.

    Provides a REPL-like interface for inventory commands.

    Args:
        cli_handler: CLICommandHandler instance for executing commands.
    """
    logger = logging.getLogger(__name__)
    logger.info("Starting interactive CLI. Type 'help' for available commands or 'exit' to quit.")

    while True:
        try:
            command_line = input("gildedrose> ").strip()

            if not command_line:
                continue

            if command_line.lower() == "exit":
                logger.info("Exiting CLI")
                break

            if command_line.lower() == "help":
                _print_cli_help()
                continue

            parts = command_line.split(maxsplit=1)
            command = parts[0].lower()
            args_str = parts[1] if len(parts) > 1 else ""

            try:
                args = json.loads(args_str) if args_str else {}
            except json.JSONDecodeError:
                logger.error("Invalid JSON arguments. Use 'help' for command syntax.")
                continue

            try:
                result = _execute_cli_command(cli_handler, command, args)
                print(json.dumps(result, indent=2, default=str))
            except (ValueError, TypeError) as e:
                print(json.dumps({"status": "error", "message": str(e)}, indent=2))

        except EOFError:
            logger.info("EOF received, exiting CLI")
            break
        except KeyboardInterrupt:
            logger.info("Interrupted by user")
            continue


def _execute_cli_command(
    cli_handler: CLICommandHandler,
    command: str,
    args: dict[str, Any],
) -> dict[str, Any]:
    """Execute a CLI command.

    Args:
        cli_handler: CLICommandHandler instance.
        command: Command name.
        args: Command arguments.

    Returns:
        Command result dictionary.

    Raises:
        ValueError: If command is not recognized or a parameter is missing
            or invalid.
    """
    if command == "simulate":
        if "days" not in args:
            raise ValueError("Missing required parameter: days")
        days = args["days"]
        if isinstance(days, bool) or not isinstance(days, int):
            raise ValueError(f"days must be an integer, got {days!r}")
        return cli_handler.simulate(
            days=days,
            output_format=args.get("format", "json"),
            verbose=args.get("verbose", False),
        )

    elif command == "inspect":
        if "name" not in args:
            raise ValueError("Missing required parameter: name")
        return cli_handler.inspect(name=args["name"])

    elif command == "categories":
        return cli_handler.categories()

    else:
        raise ValueError(f"Unknown command: {command}. Use 'help' for available commands.")


def _print_cli_help() -> None:
    """Print CLI help message."""
    help_text = """
Available Commands (JSON format):

  simulate
    Run the inventory forward and show the final state.
    Format options: json, text

    Example: simulate {"days": 10, "format": "text"}

  inspect
    Show which rule category an item name falls under.

    Example: inspect {"name": "Conjured Mana Cake"}

  categories
    List every category and its name-matching rule.

    Example: categories

  help
    Show this help message.

  exit
    Exit the CLI.

Provide the JSON after the command name on the same line.
    """
    print(help_text)


def configure_logging(log_level: str, log_format: str) -> None:
    """Configure application logging.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL).
        log_format: Log format (json, text).
    """
    level = getattr(logging, log_level, logging.INFO)

    if log_format == "json":
        format_str = '{"time": "%(asctime)s", "level": "%(levelname)s", "message": "%(message)s"}'
    else:
        format_str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=level,
        format=format_str,
        handlers=[
            logging.StreamHandler(sys.stdout),
        ],
    )


def build_inventory(settings: Settings) -> InventoryPort:
    """Select the inventory adapter from configuration."""
    if settings.inventory_backend == "json":
        return JsonFileInventoryAdapter(path=settings.inventory_path)
    return FixtureInventoryAdapter()


def build_report(settings: Settings) -> ReportPort:
    """Select the report adapter from configuration."""
    if settings.report_backend == "markdown":
        return MarkdownReportAdapter(report_dir=settings.report_output_dir)
    return StdoutReportAdapter(verbose=settings.debug)


def bootstrap(settings: Settings | None = None) -> None:
    """Load configuration, wire adapters, and start the application.

    This is the composition root: the single place where all components
    are instantiated and wired together.

    Steps:
    1. Load configuration from environment
    2. Configure logging
    3. Instantiate adapters with configuration
    4. Initialize core services
    5. Select and start run mode
    """
    # Step 1: Load configuration
    if settings is None:
        settings = load_settings()

    # Step 2: Configure logging
    configure_logging(settings.log_level, settings.log_format)
    logger = logging.getLogger(__name__)

    # Step 3: Instantiate adapters
    inventory = build_inventory(settings)
    report = build_report(settings)
    logger.info(
        f"Inventory adapter: {settings.inventory_backend}, "
        f"report adapter: {settings.report_backend}"
    )

    # Step 4: Initialize core services
    updater = DayUpdater(conjured_decay_rate=settings.conjured_decay_rate)
    simulation = SimulationService(
        inventory=inventory,
        report=report,
        updater=updater,
    )

    # Step 5: Start run mode
    logger.info(f"Starting in {settings.run_mode} mode...")
    if settings.run_mode == "cli":
        _run_cli_interactive(CLICommandHandler(simulation))
    else:
        simulation.run(settings.days)


def main() -> None:
    """Application entry point.

    Exit codes:
        0: Successful run
        1: Fatal configuration or runtime error
        130: Interrupted by user (SIGINT/KeyboardInterrupt)
    """
    logger = logging.getLogger(__name__)
    try:
        bootstrap()
    except KeyboardInterrupt:
        logger.warning("Shutdown requested by user (SIGINT)")
        sys.exit(130)
    except Exception as e:
        logger.error(f"Fatal error: {e}", exc_info=True)
        sys.exit(1)


if __name__ == "__main__":
    main()
