import asyncio
import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, TypeVar

from fastapi import Request
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

logger = logging.getLogger(__name__)

Base = declarative_base()

T = TypeVar("T")


class Store:
    """Process-wide handle on the relational store.

    Created once at startup and handed to every component that needs the
    database. Each unit of work gets its own session from the pool.
    """

    def __init__(self, url: str, echo: bool = False):
        connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
        self.url = url
        self.engine = create_engine(url, echo=echo, pool_pre_ping=True, connect_args=connect_args)
        self._session_factory = sessionmaker(bind=self.engine, autocommit=False, autoflush=False)

    @contextmanager
    def session(self) -> Iterator[Session]:
        db: Session = self._session_factory()
        try:
            yield db
        except Exception:
            db.rollback()
            raise
        finally:
            db.close()

    def call(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        with self.session() as db:
            return fn(db, *args, **kwargs)

    async def run(self, fn: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        """Run ``fn(session, *args)`` in a worker thread with a fresh session."""
        return await asyncio.to_thread(self.call, fn, *args, **kwargs)

    def create_all(self) -> None:
        # Models must be imported so Base knows them
        import app.models  # noqa: F401

        Base.metadata.create_all(bind=self.engine)

    def dispose(self) -> None:
        logger.info("Disposing store engine")
        self.engine.dispose()


def get_store(request: Request) -> Store:
    return request.app.state.store
