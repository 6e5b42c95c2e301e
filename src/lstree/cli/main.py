"""Command-line interface for lstree.

This module provides the command-line entry point: it parses arguments, configures
logging and signal handling, builds the listing and writes it to stdout or a file.

Exit Codes:
    0: Successful completion
    1: Path is not a directory, cannot be read, or another runtime error
    2: Command-line syntax error
    130: Interrupted by SIGINT (Ctrl+C)
    141: Broken pipe (SIGPIPE)

Example:
    # List the current directory
    $ lstree

    # Print a two-level tree including hidden entries
    $ lstree -a -t 2 /path/to/dir
"""

import logging
import sys
from pathlib import Path

from lstree.cli.argparser import create_parser, validate_args
from lstree.cli.logging_setup import setup_logger
from lstree.cli.safe_writer import SafeWriter
from lstree.cli.signal_handler import setup_signal_handling, signal_handler
from lstree.config import ListingConfig
from lstree.exceptions import BuildError
from lstree.lstree import DirectoryListing

logger = logging.getLogger(__name__)


def main() -> None:
    """Main entry point for the lstree command-line interface.

    Exit codes:
        0: Successful completion
        1: Path is not a directory, cannot be read, or another runtime error
        2: Command-line syntax error
        130: Interrupted by SIGINT (Ctrl+C)
        141: Broken pipe (SIGPIPE)
    """
    setup_signal_handling()

    try:
        parser = create_parser()
        # argparse calls sys.exit(2) for argument errors, sys.exit(0) for --version
        args = parser.parse_args()
        validate_args(args)
        setup_logger(args.verbose)

        directory = args.path if args.path is not None else Path.cwd()
        logger.debug("Starting lstree on %s", directory)

        config = ListingConfig.from_args(args)
        listing = DirectoryListing(directory, config)
        # Build before opening the output so a failed build leaves no partial output
        listing.build()

        output_file = args.output if args.output else sys.stdout.fileno()
        with SafeWriter(output_file) as safe_writer:
            for line in listing.stream_lines():
                safe_writer.write_line(line)

    except (FileNotFoundError, NotADirectoryError, BuildError) as e:
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)
    except Exception as e:
        logger.debug("Unexpected failure", exc_info=True)
        print(f"Error: {str(e)}", file=sys.stderr)
        sys.exit(1)

    # Handle exit codes based on received signals
    exit_code = signal_handler.exit_code()
    if exit_code is not None:
        sys.exit(exit_code)


if __name__ == "__main__":
    main()
