#!/usr/bin/env python3
"""
Standalone database initialization script
Creates the books table and inserts the sample books
"""

import argparse
import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import build_engine, init_database

logger = logging.getLogger("northwind.scripts.init_db")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Initialize the local book store")
    parser.add_argument(
        "--no-seed", action="store_true", help="Create tables without sample books"
    )
    args = parser.parse_args(argv)

    logging.basicConfig(level=settings.log_level.upper(), format=settings.log_format)
    logger.info("Initializing %s", settings.database_url)
    try:
        db_engine = build_engine(settings.database_url, echo=settings.db_echo)
        init_database(db_engine, seed=not args.no_seed)
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
