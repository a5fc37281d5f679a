"""Entry point for the Driwich POS Textual app."""

from __future__ import annotations

import structlog

from pos.context import PosContext
from pos.log import close_logging, configure_logging
from pos.pos_app import PosApp

logger = structlog.get_logger(__name__)


def main() -> None:
    """Run the Textual application."""
    log_path = configure_logging()
    logger.info("Starting POS", log_path=str(log_path))
    try:
        PosApp(PosContext()).run()
    finally:
        logger.info("Stopping POS")
        close_logging()


if __name__ == "__main__":
    main()
