"""Module to run using cli interface.

Example:
    python -m scripts.run_cli --theme configs/cli-theme.yml -v
"""

import argparse
import sys

from loguru import logger

from chatuix.cli.runner import run_cli
from chatuix.helpers.logging_helpers import add_console_verbosity, configure_logger


def main() -> None:
    """Main entrypoint for running the CLI."""
    parser = argparse.ArgumentParser(description="ChatUIX CLI runner entrypoint")
    parser.add_argument(
        "--theme",
        type=str,
        default=None,
        help="Path to a YAML file with a `theme` mapping of rich styles.",
    )
    parser.add_argument(
        "--no-greeting",
        action="store_true",
        help="Start without the assistant greeting.",
    )
    parser.add_argument("--source", type=str, default="cli")
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Show info logs (-v) or debug (-vv) to console",
    )

    args = parser.parse_args()

    try:
        configure_logger(source=args.source)
    except Exception as e:
        logger.warning(f"Failed to configure logger with source '{args.source}': {e}")

    add_console_verbosity(args.verbose)

    logger.info("Starting CLI.")
    code = 0
    try:
        run_cli(custom_theme_path=args.theme, greeting=not args.no_greeting)
    except (KeyboardInterrupt, EOFError):
        logger.info("CLI interrupted.")
        code = 130
    except Exception as e:
        logger.exception(f"Exception occurred while running the CLI: {e}")
        print("Error occurred while running the CLI. Stopping. Check logs for details.")
        code = 1
    finally:
        logger.info("CLI exited.")
    sys.exit(code)


if __name__ == "__main__":
    main()
