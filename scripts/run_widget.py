"""Entrypoint to run the widget UI.

Example:
    python -m scripts.run_widget
    python scripts/run_widget.py --port 7860 --banner "<b>DEMO</b>"
"""

from __future__ import annotations

import argparse
import sys

from loguru import logger

from chatuix.helpers.logging_helpers import add_console_verbosity, configure_logger
from chatuix.widget.widget import build_widget


def _port(value: str) -> int:
    """Validate and return a TCP port."""
    try:
        port = int(value)
    except ValueError as e:
        raise argparse.ArgumentTypeError("port must be an integer") from e
    if not (1 <= port <= 65535):
        raise argparse.ArgumentTypeError("port must be between 1 and 65535")
    return port


def parse_args() -> argparse.Namespace:
    """Parse command-line arguments for the web runner."""
    parser = argparse.ArgumentParser(description="Gradio web runner entrypoint")

    parser.add_argument(
        "--host",
        type=str,
        default="0.0.0.0",
        help="Host interface to bind the Gradio server to (default: 0.0.0.0).",
    )
    parser.add_argument(
        "--port",
        type=_port,
        default=8080,
        help="Port to run the Gradio server on (default: 8080).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="count",
        default=0,
        help="Increase console verbosity: -v for INFO, -vv for DEBUG.",
    )
    parser.add_argument(
        "--banner",
        type=str,
        default=None,
        help="Optional markdown banner to show at the top of the widget.",
    )
    parser.add_argument(
        "--share",
        action="store_true",
        help="Create a public Gradio link.",
    )
    parser.add_argument(
        "--source",
        type=str,
        default="widget",
        help="Name used for the log file (default: widget).",
    )
    return parser.parse_args()


def run(args: argparse.Namespace) -> int:
    """Run the Gradio app with the provided arguments."""
    app = None
    try:
        logger.debug("Building Gradio widget...")
        app = build_widget(banner=args.banner)

        logger.info(f"Launching Gradio widget ({args.host}:{args.port})...")
        app.launch(
            server_name=args.host,
            server_port=args.port,
            share=args.share,
        )
        return 0  # normal exit after blocking launch returns
    except KeyboardInterrupt:
        logger.info("Received interrupt. Shutting down...")
        return 130  # conventional SIGINT exit code
    except Exception:
        logger.exception("Failed while building, launching, or running the widget")
        return 1
    finally:
        if app is not None:
            try:
                app.close()
            except Exception:
                logger.debug("Suppressing exception during app.close()", exc_info=True)


def main() -> None:
    """Main entrypoint for running the widget."""
    args = parse_args()

    try:
        configure_logger(source=args.source)
    except Exception as e:
        logger.warning(f"Failed to configure logger with source '{args.source}': {e}")

    add_console_verbosity(args.verbose)

    code = run(args)
    sys.exit(code)


if __name__ == "__main__":
    main()
