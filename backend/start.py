"""Startup script for production deployment.

On a fresh database (no tables), creates all tables from models and stamps
Alembic to head. On an existing database, runs Alembic migrations normally.
"""

import logging
import subprocess
import sys

from sqlalchemy import inspect

from unfold_india.db.session import engine
from unfold_india.db.base import Base
from unfold_india.models import ChatRecord, Profile, User  # noqa: F401

logger = logging.getLogger("start")


def main():
    logging.basicConfig(level=logging.INFO)
    tables = inspect(engine).get_table_names()

    if "users" not in tables:
        logger.info("Fresh database detected, creating all tables")
        Base.metadata.create_all(bind=engine)
        subprocess.check_call([sys.executable, "-m", "alembic", "stamp", "head"])
        logger.info("Tables created and Alembic stamped to head")
    else:
        logger.info("Existing database, running migrations")
        subprocess.check_call([sys.executable, "-m", "alembic", "upgrade", "head"])
        logger.info("Migrations complete")


if __name__ == "__main__":
    main()
