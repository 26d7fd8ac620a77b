"""
Viaggia Schema Bootstrap Entry Point

Usage: python -m viaggia
"""

import asyncio
import logging

from viaggia.config import get_settings
from viaggia.db.session import init_db
from viaggia.logging_config import setup_logging

logger = logging.getLogger(__name__)


def main() -> None:
    setup_logging()
    settings = get_settings()
    logger.info("Initializing %s database at %s", settings.APP_NAME, settings.DATABASE_URL)
    asyncio.run(init_db())
    logger.info("Database ready")


if __name__ == "__main__":
    main()
