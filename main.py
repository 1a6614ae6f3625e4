"""
WhatsApp Relay Entry Point

Pairs (first run) or resumes a WhatsApp session, then relays every message
containing the trigger marker to the completion API and replies in the
same chat.

Run: python main.py [--session-db PATH] [--log-level LEVEL]
"""

import argparse
import logging
import sys
from typing import List, Optional

from infra import FatalBootstrapError, RelayConfig, RelayConfigError, bootstrap_relay

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Relay triggered WhatsApp messages to a chat-completion API",
    )
    parser.add_argument(
        "--session-db",
        help="WhatsApp session database (default: $WHATSAPP_SESSION_DB)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Log level (default: $LOG_LEVEL or INFO)",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RelayConfig:
    """Environment configuration with command-line overrides applied."""
    config = RelayConfig.from_env()
    if args.session_db:
        config.session_db_path = args.session_db
    if args.log_level:
        config.log_level = args.log_level
    return config


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    try:
        config = build_config(args)
    except RelayConfigError as e:
        logging.basicConfig(format=LOG_FORMAT)
        logger.critical(f"Invalid configuration: {e}")
        return 1

    logging.basicConfig(level=config.log_level, format=LOG_FORMAT)

    logger.info("=" * 60)
    logger.info("WhatsApp relay starting up...")
    logger.info(f"Completion backend: {config.completion_backend} ({config.groq_model})")
    logger.info(f"Trigger: {config.trigger!r}")
    logger.info(f"Session store: {config.session_db_path}")
    logger.info("=" * 60)

    try:
        bootstrap_relay(config).run()
    except FatalBootstrapError as e:
        logger.critical(f"Bootstrap failed: {e}")
        return 1

    logger.info("WhatsApp relay stopped")
    return 0


if __name__ == "__main__":
    sys.exit(main())
