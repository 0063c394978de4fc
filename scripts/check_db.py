"""
check_db.py - quick connectivity check for the database in DB_URL

Usage:
    python scripts/check_db.py
"""
import sys
import logging

from chirpy.config import Settings
from chirpy.database.connection import DatabaseConnection

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)


def check_db() -> int:
    settings = Settings.from_env()
    if not settings.db_url:
        logger.error("DB_URL is not set")
        return 1

    db = DatabaseConnection(settings.db_url)
    try:
        db.ping()
    except Exception as e:
        logger.error(f"Connection failed: {e}")
        return 1
    finally:
        db.dispose()

    logger.info(f"Connected successfully to {db!r}")
    return 0


if __name__ == "__main__":
    sys.exit(check_db())
