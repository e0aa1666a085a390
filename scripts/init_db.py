#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates (or recreates) the recipe schema in the database named by DATABASE_URL.
"""

import argparse
import logging
import os
import sys

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings  # noqa: E402
from domain.models import Base, engine, init_database  # noqa: E402

logger = logging.getLogger("recipes.scripts.init_db")


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Create the Recipes database schema")
    parser.add_argument(
        "--drop",
        action="store_true",
        help="drop existing tables first (destroys all users and recipes)",
    )
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper()), format=settings.log_format
    )

    try:
        if args.drop:
            Base.metadata.drop_all(bind=engine)
            logger.warning("Existing tables dropped")
        init_database()
    except Exception:
        logger.exception("Schema initialization failed for %s", engine.url.render_as_string(hide_password=True))
        return 1

    logger.info("Schema ready at %s", engine.url.render_as_string(hide_password=True))
    return 0


if __name__ == "__main__":
    sys.exit(main())
