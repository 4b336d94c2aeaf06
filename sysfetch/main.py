#!/usr/bin/env python3
"""
Main entry point for sysfetch.
"""

import sys
import argparse
import logging

from .modules import get_all_probes
from .modules.base import SystemQuery
from .ui.report import ReportGenerator

logger = logging.getLogger("sysfetch")


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Show host information in a colored terminal report")
    parser.add_argument("-f", "--format", choices=["text", "json"], default="text", help="Output format")
    parser.add_argument("-d", "--debug", action="store_true", help="Log probe failures to stderr")
    parser.add_argument("--version", action="store_true", help="Show version information")
    return parser.parse_args(argv)


def setup_logging(debug: bool):
    """Configure logging on stderr so stdout only carries the report."""
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr
    )


def show_version():
    """Show version information."""
    from . import __version__
    print(f"sysfetch version {__version__}")


def main(argv=None):
    """Main function."""
    args = parse_arguments(argv)

    if args.version:
        show_version()
        return 0

    setup_logging(args.debug)

    try:
        report_gen = ReportGenerator(get_all_probes(SystemQuery()))
        if args.format == "json":
            output = report_gen.generate_json() + "\n"
        else:
            output = report_gen.generate()
    except KeyboardInterrupt:
        logger.warning("Operation cancelled by user.")
        return 0

    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


if __name__ == "__main__":
    sys.exit(main())
