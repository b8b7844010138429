import logging

from unfold_india.db.base import Base
from unfold_india.db.session import engine
from unfold_india.models import ChatRecord, Profile, User  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables created")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    init_db()
