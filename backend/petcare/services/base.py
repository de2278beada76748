"""Module: base.

Services receive the request's SQLAlchemy session at construction; nothing
here holds global state.
"""

from contextlib import contextmanager
from typing import Iterator

from sqlalchemy.orm import Session


class BaseService:
    def __init__(self, db: Session):
        self.db = db

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Commit everything done inside the block at once, or roll it all back."""
        try:
            yield
            self.db.commit()
        except Exception:
            self.db.rollback()
            raise
