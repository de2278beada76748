"""Module: init_db."""

import logging

from petcare.db.base import Base
from petcare.db.session import engine

# IMPORTANT: import models so they register with Base.metadata
import petcare.db.models  # noqa: F401

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)
    logger.info("Database schema ready")
