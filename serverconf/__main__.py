"""
Entry point for serverconf.

Usage:
    python -m serverconf /path/to/server.conf
    python -m serverconf --help
"""

import argparse
import sys
from pathlib import Path

from . import __version__
from .config.loader import ConfigError, ConfigLoader
from .config.parser import ParseResult
from .logging import get_logger, setup_logging_from_args


logger = get_logger("main")


def print_summary(servers: list[ParseResult], show_tokens: bool = False) -> None:
    """Print what was parsed for each server block."""
    for config, controllers in servers:
        print(f"Server {config.address}")
        print(f"  Root: {config.root or '(none)'}")
        if config.tls.enabled:
            print(f"  TLS: {config.tls.certificate} {config.tls.key}")

        if not controllers:
            print("  Middleware: (none)")
            continue

        print("  Middleware:")
        for name, controller in controllers.items():
            print(f"    {name}: {controller.occurrences} occurrence(s), {len(controller.tokens)} token(s)")
            if show_tokens:
                for token in controller.tokens:
                    print(f"      {token.line:4}  {token.text}")


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        prog="serverconf",
        description="Parse a server configuration file and report its contents",
    )

    parser.add_argument(
        "config",
        help="Path to configuration file",
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose logging (INFO level)",
    )

    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Enable debug logging (DEBUG level)",
    )

    parser.add_argument(
        "-q", "--quiet",
        action="store_true",
        help="Quiet mode (only errors)",
    )

    parser.add_argument(
        "--log-file",
        metavar="PATH",
        help="Write logs to file",
    )

    parser.add_argument(
        "--no-color",
        action="store_true",
        help="Disable colored output",
    )

    parser.add_argument(
        "--tokens",
        action="store_true",
        help="List the collected tokens of every middleware directive",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )

    args = parser.parse_args(argv)

    setup_logging_from_args(
        verbose=args.verbose,
        debug=args.debug,
        quiet=args.quiet,
        no_color=args.no_color,
        log_file=args.log_file,
    )

    config_path = Path(args.config)
    loader = ConfigLoader()

    try:
        servers = loader.load_file(config_path)
    except ConfigError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    warnings = loader.validate(servers)
    print_summary(servers, show_tokens=args.tokens)

    if warnings:
        print(f"\nConfiguration warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
