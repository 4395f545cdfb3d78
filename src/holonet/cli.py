"""Command-line interface for HOLONET.

Usage:
    holonet serve
    holonet serve --no-debug --timeout 2000 --port 8080
    holonet run
    holonet version
"""

import argparse
import asyncio
import logging
import sys
from typing import Optional

from holonet import __version__
from holonet.config import Settings, settings as default_settings
from holonet.pipeline.orchestrator import Orchestrator

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    """argparse type for strictly positive integers."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value!r}")
    return number


def _add_run_options(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--no-debug",
        action="store_true",
        help="Disable debug logging and the end-of-run stats",
    )
    parser.add_argument(
        "--timeout",
        type=positive_int,
        default=None,
        metavar="MS",
        help="Request timeout in milliseconds (default: 5000)",
    )


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser.

    Returns:
        Configured ArgumentParser with all commands and arguments.
    """
    parser = argparse.ArgumentParser(
        prog="holonet",
        description="HOLONET — Star Wars API demo client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  holonet serve
  holonet serve --no-debug --timeout 2000
  holonet run
        """,
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # serve command
    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the demo HTTP server",
        description="Serve / and /api; each /api request triggers one run",
    )
    _add_run_options(serve_parser)
    serve_parser.add_argument(
        "--port",
        type=positive_int,
        default=None,
        help="Listen port (default: $PORT or 3000)",
    )

    # run command
    run_parser = subparsers.add_parser(
        "run",
        help="Fetch and display Star Wars data once",
    )
    _add_run_options(run_parser)

    # version command
    subparsers.add_parser(
        "version",
        help="Show version information",
    )

    return parser


def build_settings(args: argparse.Namespace, base: Settings | None = None) -> Settings:
    """Apply command-line overrides on top of environment settings."""
    base = base or default_settings
    overrides: dict = {}
    if getattr(args, "no_debug", False):
        overrides["debug"] = False
    if getattr(args, "timeout", None) is not None:
        overrides["request_timeout_ms"] = args.timeout
    if getattr(args, "port", None) is not None:
        overrides["port"] = args.port
    return base.model_copy(update=overrides)


def configure_logging(settings: Settings) -> None:
    """Configure root logging: DEBUG in debug mode, else settings.log_level."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else settings.log_level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    # Keep transport chatter out of debug output
    logging.getLogger("httpcore").setLevel(logging.WARNING)


def cmd_serve(args: argparse.Namespace) -> int:
    """Execute the serve command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    import uvicorn

    from holonet.server import create_app

    settings = build_settings(args)
    configure_logging(settings)

    try:
        app = create_app(settings=settings)
        logger.info("Server is running at http://localhost:%d/", settings.port)
        uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except Exception as e:
        logger.error("Server failed: %s", e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_run(args: argparse.Namespace) -> int:
    """Execute the run command.

    Run failures are logged by the orchestrator and do not change the exit code.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    settings = build_settings(args)
    configure_logging(settings)

    try:
        orchestrator = Orchestrator(settings=settings)
        asyncio.run(orchestrator.run())
        return 0

    except KeyboardInterrupt:
        logger.warning("Interrupted by user")
        return 130
    except Exception as e:
        logger.error("Run failed: %s", e, exc_info=True)
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_version(args: argparse.Namespace) -> int:
    """Execute the version command.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (0 for success)
    """
    print(f"HOLONET v{__version__}")
    print("Star Wars API demo client")
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    # Route to command handler
    if args.command == "serve":
        return cmd_serve(args)
    elif args.command == "run":
        return cmd_run(args)
    elif args.command == "version":
        return cmd_version(args)
    else:
        # No command specified
        parser.print_help()
        return 0


def cli_entry() -> None:
    """Console script entry point for setuptools."""
    sys.exit(main())


if __name__ == "__main__":
    cli_entry()
