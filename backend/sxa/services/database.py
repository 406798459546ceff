"""
SQLAlchemy persistence backend for athletes and analysis sessions
"""

import os
import threading
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Iterator

from sqlalchemy import JSON, Column, DateTime, Float, Index, Integer, String, Text, create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker
from sqlalchemy.pool import StaticPool

from sxa.utils.logger import get_logger

logger = get_logger(__name__)

Base = declarative_base()


def utcnow() -> datetime:
    """Naive UTC timestamp; SQLite drops tzinfo anyway"""
    return datetime.now(timezone.utc).replace(tzinfo=None)


class AthleteRow(Base):
    __tablename__ = "athletes"

    id = Column(String, primary_key=True)
    name = Column(String, nullable=False)
    age = Column(Integer)
    height_cm = Column(Float)
    weight_kg = Column(Float)
    sport = Column(String)
    level = Column(String)
    created_at = Column(DateTime, default=utcnow, nullable=False)
    updated_at = Column(DateTime, default=utcnow, nullable=False)


class SessionRow(Base):
    __tablename__ = "sessions"

    # Insertion order breaks ties between sessions created in the same instant
    seq = Column(Integer, primary_key=True, autoincrement=True)
    id = Column(String, unique=True, nullable=False)
    # Weak reference to athletes.id; dangling values are allowed
    athlete_id = Column(String, index=True)
    sport = Column(String, nullable=False)
    overall = Column(Integer, nullable=False)
    scores = Column(JSON, nullable=False)
    metrics = Column(JSON, nullable=False)
    insights = Column(JSON, nullable=False)
    file_path = Column(Text)
    frame_count = Column(Integer, nullable=False)
    created_at = Column(DateTime, default=utcnow, nullable=False)

    __table_args__ = (
        Index("idx_sessions_athlete_created", "athlete_id", "created_at"),
    )


class Database:
    """
    Owns the engine, the session factory and the schema.

    Created by the application entry point and handed to the stores; writes
    go through write_session(), which holds a process-wide lock so concurrent
    upserts never interleave.
    """

    def __init__(self, url: str, echo: bool = False):
        self.url = make_url(url)
        engine_kwargs = {"echo": echo}

        if self.url.get_backend_name() == "sqlite":
            engine_kwargs["connect_args"] = {"check_same_thread": False}
            if self.url.database in (None, "", ":memory:"):
                # One shared connection, otherwise every checkout sees an empty database
                engine_kwargs["poolclass"] = StaticPool
            else:
                directory = os.path.dirname(os.path.abspath(self.url.database))
                os.makedirs(directory, exist_ok=True)

        self.engine = create_engine(url, **engine_kwargs)
        self.session_factory = sessionmaker(bind=self.engine, expire_on_commit=False)
        self._write_lock = threading.RLock()

        Base.metadata.create_all(self.engine)
        logger.info(f"✅ Database initialised at {self.url.render_as_string(hide_password=True)}")

    @contextmanager
    def read_session(self) -> Iterator[Session]:
        session = self.session_factory()
        try:
            yield session
        finally:
            session.close()

    @contextmanager
    def write_session(self) -> Iterator[Session]:
        """Serialized transaction: commits on success, rolls back on error"""
        with self._write_lock:
            session = self.session_factory()
            try:
                yield session
                session.commit()
            except Exception:
                session.rollback()
                raise
            finally:
                session.close()

    def ping(self) -> bool:
        try:
            with self.engine.connect() as connection:
                connection.exec_driver_sql("SELECT 1")
            return True
        except Exception as e:
            logger.warning(f"Database ping failed: {e}")
            return False

    def dispose(self):
        self.engine.dispose()
        logger.info("Database connections closed")
