"""Entry point for the todolist application.

This module allows running todolist as a module:
    python -m todolist

Or as an installed command:
    todolist
"""

import argparse
import sys
from pathlib import Path
from typing import Optional

from todolist.logging_config import setup_logging, get_logger

# Initialize logger for this module
logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="todolist",
        description="Terminal to-do list",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="Log level (DEBUG, INFO, WARNING, ERROR). Defaults to $TODOLIST_LOG_LEVEL or INFO",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help="Path to config.ini (default: ~/.todolist/config.ini)",
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Send logs to the Textual devtools console instead of the log file",
    )
    return parser


def main(args: Optional[list[str]] = None) -> int:
    """Main entry point for todolist.

    Args:
        args: Command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for error)
    """
    if args is None:
        args = sys.argv[1:]
    options = build_parser().parse_args(args)

    # Initialize logging before any other operations
    setup_logging(log_level=options.log_level, use_textual_handler=options.dev)

    # Import here to keep startup fast when only --help is requested
    from todolist.config import Config
    from todolist.ui.app import TodoApp

    try:
        app = TodoApp(config=Config(options.config))
        app.run()
        logger.info("todolist application exited normally")
        return 0
    except KeyboardInterrupt:
        logger.info("todolist closed by user (Ctrl+C)")
        return 0
    except Exception:
        logger.error("Error running todolist", exc_info=True)
        return 1


if __name__ == "__main__":
    sys.exit(main())
