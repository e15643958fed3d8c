"""
CLI Application - Demonstrates the samples from the command line.

Usage:
    solid-samples area rectangle 3 4
    solid-samples area circle 2 --strict
    solid-samples total rectangle:3,4 circle:2 base
    solid-samples kinds
    solid-samples user-data alice

Environment:
    SOLID_STRICT     Reject negative/non-finite dimensions (true/false)
    SOLID_VERBOSE    Enable debug logging (true/false)
    SOLID_PRECISION  Digits after the decimal point (default: 4)
"""

import argparse
import logging
import sys
from typing import Optional

from ..adapters.config import EnvironmentConfigProvider
from ..application.area import AreaCalculator
from ..core.domain.user_data import UserDataHolder
from ..core.exceptions import (
    ConfigurationError,
    InvalidArgumentError,
    UnknownShapeError,
)
from ..core.ports.config_provider import AppConfig
from ..plugins.registry import ShapeRegistry, default_registry
from .exit_codes import ExitCode
from .output import Console


def setup_logging(verbose: bool = False) -> None:
    """Configure logging."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="solid-samples",
        description="SOLID design samples: shape areas and a user data holder",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=None,
        help="Enable verbose logging",
    )
    parser.add_argument(
        "--precision", "-p",
        type=int,
        default=None,
        help="Digits after the decimal point",
    )
    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )
    
    subparsers = parser.add_subparsers(dest="command", required=True)
    
    area = subparsers.add_parser("area", help="Compute the area of one shape")
    area.add_argument("kind", help="Shape kind (see 'kinds')")
    area.add_argument("dimensions", nargs="*", type=float, help="Shape dimensions")
    area.add_argument("--strict", action="store_true", default=None,
                      help="Reject negative or non-finite dimensions")
    
    total = subparsers.add_parser("total", help="Sum the areas of several shapes")
    total.add_argument("shapes", nargs="+", metavar="KIND[:D1,D2,...]",
                       help="Shapes, e.g. rectangle:3,4 circle:2")
    total.add_argument("--strict", action="store_true", default=None,
                       help="Reject negative or non-finite dimensions")
    
    subparsers.add_parser("kinds", help="List registered shape kinds")
    
    user_data = subparsers.add_parser("user-data", help="Store and echo a user data string")
    user_data.add_argument("value", help="User data to store")
    
    return parser


def parse_shape_spec(spec: str) -> tuple[str, list[float]]:
    """
    Split ``kind:d1,d2`` into a kind and its dimensions.
    
    Raises:
        InvalidArgumentError: If a dimension is not a number
    """
    kind, _, raw_dims = spec.partition(":")
    dimensions = []
    for raw in filter(None, (part.strip() for part in raw_dims.split(","))):
        try:
            dimensions.append(float(raw))
        except ValueError as e:
            raise InvalidArgumentError(f"Not a number in {spec!r}: {raw!r}", cause=e)
    return kind, dimensions


def run_command(
    args: argparse.Namespace,
    config: AppConfig,
    console: Console,
    registry: ShapeRegistry,
) -> ExitCode:
    """Dispatch a parsed command."""
    strict = config.strict_dimensions
    
    if args.command == "area":
        shape = registry.create(args.kind, *args.dimensions, strict=strict)
        area = AreaCalculator().area(shape)
        console.success(f"{shape.kind} area: {console.number(area)}")
    
    elif args.command == "total":
        shapes = [
            registry.create(kind, *dims, strict=strict)
            for kind, dims in map(parse_shape_spec, args.shapes)
        ]
        console.area_summary(AreaCalculator().summarize(shapes))
    
    elif args.command == "kinds":
        for kind in registry.kinds():
            factory = registry.get(kind)
            console.item(kind, factory.description or None)
    
    elif args.command == "user-data":
        holder = UserDataHolder()
        holder.set_user_data(args.value)
        console.info(f"User data: {holder.get_user_data()}")
    
    return ExitCode.SUCCESS


def main(argv: Optional[list[str]] = None, registry: Optional[ShapeRegistry] = None) -> int:
    """Entry point. Returns the process exit code."""
    args = create_parser().parse_args(argv)
    console = Console(color=not args.no_color)
    
    provider = EnvironmentConfigProvider(cli_overrides={
        "strict": getattr(args, "strict", None),
        "verbose": args.verbose,
        "precision": args.precision,
    })
    try:
        config = provider.load()
    except ConfigurationError as e:
        for error in e.errors:
            console.error(error)
        return ExitCode.CONFIG_ERROR
    
    setup_logging(config.verbose)
    logger = logging.getLogger("main")
    logger.debug(f"Loaded configuration from {provider.name}: {config}")
    
    console.precision = config.precision
    
    try:
        return run_command(args, config, console, registry or default_registry())
    except UnknownShapeError as e:
        console.error(str(e))
        return ExitCode.UNKNOWN_SHAPE
    except InvalidArgumentError as e:
        if e.problems:
            console.error(f"{len(e.problems)} invalid dimension(s):")
            for problem in e.problems:
                console.detail(problem)
        else:
            console.error(str(e))
        return ExitCode.INVALID_ARGUMENT


def run() -> None:
    """Console script entry point."""
    sys.exit(main())
