"""
Analysis session persistence
"""

import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError

from sxa.errors import DependencyUnavailableError, NotFoundError, PersistenceError, ValidationError
from sxa.models.analysis import AnalysisResult
from sxa.models.session import SessionRecord
from sxa.services.database import Database, SessionRow, utcnow
from sxa.utils.logger import LoggerMixin

DEFAULT_LIST_LIMIT = 20


class SessionStore(LoggerMixin):
    """One row per analysis request; rows are never updated"""

    available = True

    def __init__(self, database: Database):
        self.database = database

    def create(
        self,
        result: AnalysisResult,
        athlete_id: Optional[str] = None,
        file_path: Optional[str] = None,
        session_id: Optional[str] = None,
    ) -> str:
        """
        Persist a snapshot of an analysis result

        The athlete reference is stored as given, whether or not a profile
        with that id exists.

        Returns:
            The session id (generated when not supplied)
        """
        session_id = session_id or str(uuid.uuid4())
        row = SessionRow(
            id=session_id,
            athlete_id=athlete_id,
            sport=result.sport,
            overall=result.overall,
            scores=result.scores.model_dump(),
            metrics=result.metrics.model_dump(),
            insights=list(result.insights),
            file_path=file_path,
            frame_count=result.frame_count,
            created_at=utcnow(),
        )
        try:
            with self.database.write_session() as session:
                session.add(row)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not store session {session_id}: {e}") from e

        self.logger.info(f"Stored session {session_id} (athlete={athlete_id or '-'}, overall={result.overall})")
        return session_id

    def get(self, session_id: str) -> SessionRecord:
        try:
            with self.database.read_session() as session:
                row = session.scalars(select(SessionRow).where(SessionRow.id == session_id)).first()
                if row is None:
                    raise NotFoundError("Session not found.")
                return SessionRecord.model_validate(row)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not load session {session_id}: {e}") from e

    def list(self, athlete_id: Optional[str] = None, limit: int = DEFAULT_LIST_LIMIT) -> List[SessionRecord]:
        """Newest first, optionally restricted to one athlete"""
        if limit < 1:
            raise ValidationError("limit must be a positive integer.")

        query = select(SessionRow)
        if athlete_id:
            query = query.where(SessionRow.athlete_id == athlete_id)
        query = query.order_by(SessionRow.created_at.desc(), SessionRow.seq.desc()).limit(limit)

        try:
            with self.database.read_session() as session:
                return [SessionRecord.model_validate(row) for row in session.scalars(query)]
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not list sessions: {e}") from e


class UnavailableSessionStore:
    """Stand-in used when persistence is not configured"""

    available = False
    reason = "Database unavailable. Configure DATABASE_URL and enable PERSISTENCE_ENABLED."

    def create(self, result, athlete_id=None, file_path=None, session_id=None) -> str:
        raise DependencyUnavailableError(self.reason)

    def get(self, session_id):
        raise DependencyUnavailableError(self.reason)

    def list(self, athlete_id=None, limit=DEFAULT_LIST_LIMIT):
        raise DependencyUnavailableError(self.reason)
