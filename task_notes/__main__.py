"""Run the Task Notes API under uvicorn."""

import argparse
import logging

import uvicorn

from task_notes.config import Settings
from task_notes.logging_setup import setup_logging
from task_notes.main import create_app

logger = logging.getLogger(__name__)


def create_arg_parser(settings: Settings) -> argparse.ArgumentParser:
    """Command line options; defaults come from the environment."""
    parser = argparse.ArgumentParser(description="Task Notes API server")
    parser.add_argument(
        "--port",
        type=int,
        default=settings.port,
        help=f"Port to run on (default: {settings.port})",
    )
    parser.add_argument(
        "--host",
        default=settings.host,
        help=f"Host to bind to (default: {settings.host})",
    )
    parser.add_argument(
        "--log-level",
        default=settings.log_level,
        help=f"Console log level (default: {settings.log_level})",
    )
    return parser


def main(argv: list[str] | None = None) -> None:
    settings = Settings.from_env()
    args = create_arg_parser(settings).parse_args(argv)

    setup_logging(level=args.log_level)
    app = create_app(settings)

    logger.info("Server is running on http://%s:%d", args.host, args.port)
    # log_config=None keeps uvicorn on the handlers installed above
    uvicorn.run(app, host=args.host, port=args.port, log_config=None)


if __name__ == "__main__":
    main()
