# ============================================================================
# Planimetry - Command Line Interface
#
# Purpose: CLI entry point for figure areas and the logging demo
# Inputs: Command-line arguments
# Outputs: Figure listings, areas, console and file log entries
# Dependencies: argparse, config, geometry, sinks
# Usage: python -m Planimetry.cli demo
#        python -m Planimetry.cli area triangle 0,0 3,0 0,4
#
# Changelog:
#   2026-03-10: Initial CLI with 'demo' and 'area' commands
#   2026-03-12: demo falls back to console-only logging when the log file
#               cannot be opened
#   2026-03-14: demo builds its sinks from config.sink via create_sinks;
#               CLI overrides are validated against the config models
# ============================================================================

import argparse
import sys
from contextlib import ExitStack
from typing import Any, Dict, List, Optional

from pydantic import ValidationError

from Planimetry import __version__
from Planimetry.config import Config
from Planimetry.errors import ConfigurationError, PlanimetryError, SinkOpenFailedError
from Planimetry.geometry import ConvexQuadrilateral, Figure, Point, Triangle
from Planimetry.logging_utils import get_logger, setup_logging
from Planimetry.sinks import ConsoleSink, FileSink, LogSink, create_sinks

logger = get_logger(__name__)

FIGURE_TYPES = {
    "triangle": Triangle,
    "quad": ConvexQuadrilateral,
}


def parse_point(text: str) -> Point:
    """
    Parse an "X,Y" argument into a Point.

    Raises:
        argparse.ArgumentTypeError: If the text is not two comma-separated numbers
    """
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected X,Y but got {text!r}")
    try:
        return Point(float(parts[0]), float(parts[1]))
    except ValueError as e:
        raise argparse.ArgumentTypeError(f"coordinates must be numbers: {text!r}") from e


def create_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the CLI.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="planimetry",
        description="Planar figure areas with console and file logging",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML config file (default: configs/default.yaml if present)",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Diagnostic logging level (overrides config)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    demo_parser = subparsers.add_parser(
        "demo",
        help="Show the sample triangle and quadrilateral and log to console and file",
    )
    demo_parser.add_argument(
        "--log-file",
        type=str,
        default=None,
        help="File sink path (overrides config; default: log.txt)",
    )
    demo_parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable ANSI colour on console log lines",
    )
    demo_parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places for areas (overrides config; default: 2)",
    )

    area_parser = subparsers.add_parser(
        "area",
        help="Compute the area of a figure given its vertices",
    )
    area_parser.add_argument(
        "figure",
        choices=sorted(FIGURE_TYPES),
        help="Figure type",
    )
    area_parser.add_argument(
        "points",
        type=parse_point,
        nargs="+",
        metavar="X,Y",
        help="Vertices in winding order",
    )
    area_parser.add_argument(
        "--precision",
        type=int,
        default=None,
        help="Decimal places for the area (overrides config; default: 2)",
    )

    return parser


def load_config(args: argparse.Namespace) -> Config:
    """
    Load config from --config or the default location, then apply CLI overrides.

    Overrides are validated against the same models as file values.

    Raises:
        FileNotFoundError: If --config names a missing file
        ConfigurationError: If a file value or a CLI override is invalid
    """
    config = Config.from_yaml(args.config) if args.config else Config.from_default()

    overrides: Dict[str, Dict[str, Any]] = {"logging": {}, "display": {}, "sink": {}}
    if args.log_level:
        overrides["logging"]["level"] = args.log_level
    if getattr(args, "precision", None) is not None:
        overrides["display"]["precision"] = args.precision
    if getattr(args, "log_file", None):
        overrides["sink"]["file_path"] = args.log_file
    if getattr(args, "no_color", False):
        overrides["sink"]["console_color"] = False

    data = config.model_dump()
    for section, values in overrides.items():
        data[section].update(values)
    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigurationError("Invalid command-line option", details=str(e)) from e


def print_figure(figure: Figure, precision: int) -> None:
    print(figure.describe())
    for line in figure.display():
        print(line)
    print(f"Area: {figure.area():.{precision}f}\n")


def open_sinks(config: Config) -> List[LogSink]:
    """
    Build the configured sinks, dropping file logging if the file cannot be opened.

    Returns:
        Sinks selected by config.sink.type (possibly only the console sink, or none)
    """
    try:
        return create_sinks(config.sink)
    except SinkOpenFailedError as e:
        logger.warning(f"File logging disabled: {e}")
        print(f"\n⚠ File logging disabled: {e.message}\n", file=sys.stderr)
        if config.sink.type == "both":
            return [ConsoleSink(color=config.sink.console_color)]
        return []


def demo_command(config: Config) -> int:
    """
    Execute the 'demo' command.

    Console sinks receive the start message; file sinks receive each
    figure's vertex count and are released when the command finishes.

    Args:
        config: Loaded configuration

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    triangle = Triangle((0, 0), (3, 0), (0, 4))
    quad = ConvexQuadrilateral((1, 1), (5, 1), (6, 4), (2, 4))
    figures: List[Figure] = [triangle, quad]

    for figure in figures:
        print_figure(figure, config.display.precision)

    sinks = open_sinks(config)
    file_sinks = [s for s in sinks if isinstance(s, FileSink)]

    with ExitStack() as stack:
        for sink in sinks:
            stack.enter_context(sink)

        for sink in sinks:
            if isinstance(sink, ConsoleSink):
                sink.log_info("Program started.")

        for file_sink in file_sinks:
            for figure in figures:
                file_sink.log_info(f"{figure.name} has {figure.vertex_count} vertices.")

    for file_sink in file_sinks:
        print(f"Log written to {file_sink.path}")
    return 0


def area_command(args: argparse.Namespace, config: Config) -> int:
    """
    Execute the 'area' command.

    Returns:
        Exit code (0 for success, 1 if the vertices are rejected)
    """
    figure_cls = FIGURE_TYPES[args.figure]
    try:
        figure = figure_cls(*args.points)
    except PlanimetryError as e:
        logger.error(f"Invalid {args.figure}: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1

    print_figure(figure, config.display.precision)
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main CLI entry point.

    Returns:
        Exit code
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    try:
        config = load_config(args)
    except (FileNotFoundError, PlanimetryError) as e:
        print(f"\n✗ Configuration error: {e}\n", file=sys.stderr)
        return 1

    setup_logging(config.logging)

    try:
        if args.command == "demo":
            return demo_command(config)
        if args.command == "area":
            return area_command(args, config)
    except PlanimetryError as e:
        logger.error(f"{args.command} failed: {e}")
        print(f"\n✗ Error: {e}\n", file=sys.stderr)
        return 1
    except Exception as e:
        logger.exception(f"Unexpected error during {args.command}")
        print(f"\n✗ Unexpected error: {e}\n", file=sys.stderr)
        return 2

    parser.print_help()
    return 1


if __name__ == "__main__":
    sys.exit(main())
