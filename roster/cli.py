# ==============================================
# CLI — Command Line Entry Point
# ==============================================
#
# PURPOSE:
#   Wires configuration, the store, the persistence gateway
#   and the interactive shell together, and maps failures to
#   exit codes.
#
# USAGE:
# ------
#    python -m roster
#    python -m roster --file ./data/employees.csv
#    roster --log-level INFO
#
# EXIT CODES:
# -----------
#    0    normal exit
#    1    bad configuration, or employee file missing,
#         unreadable or malformed
#         (or could not be saved)
#    2    bad command line (argparse)
#    130  interrupted with Ctrl+C; the store is still saved
#
# ==============================================

from __future__ import annotations

import argparse
import logging
import sys
from typing import Optional

from .config import LOG_LEVELS, get_config
from .errors import RosterError, StartupIOError
from .persistence import PersistenceGateway
from .shell import InteractionShell
from .store import RecordStore

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create the CLI argument parser."""
    parser = argparse.ArgumentParser(
        prog="roster",
        description="View, add, edit and remove employee records.",
    )
    parser.add_argument(
        "--file",
        dest="data_file",
        default=None,
        help="Employee file (default: ROSTER_DATA_FILE or ./data/employees.csv)",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        choices=LOG_LEVELS,
        type=str.upper,
        help="Diagnostic log level, written to stderr",
    )
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    """Main entry point for the CLI."""
    args = create_parser().parse_args(argv)
    try:
        config = get_config()
    except ValueError as e:
        sys.stderr.write(f"error: bad configuration: {e}\n")
        return 1

    logging.basicConfig(
        level=args.log_level or config.log_level,
        stream=sys.stderr,
        format="%(levelname)s %(name)s: %(message)s",
    )

    store = RecordStore()
    gateway = PersistenceGateway(args.data_file or config.data_file, atomic=config.atomic_save)

    try:
        gateway.load_store(store)
    except StartupIOError as e:
        sys.stderr.write(f"error: {e}\n")
        return 1

    shell = InteractionShell(store, gateway, max_attempts=config.prompt_max_attempts)
    try:
        shell.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, saving before exit")
        gateway.save_store(store)
        sys.stderr.write("\ninterrupted\n")
        return 130
    except (RosterError, OSError) as e:
        sys.stderr.write(f"error: {e}\n")
        return 1

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
