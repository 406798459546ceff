"""
Athlete profile persistence with upsert-by-id semantics
"""

import uuid

from sqlalchemy.exc import SQLAlchemyError

from sxa.errors import DependencyUnavailableError, NotFoundError, PersistenceError, ValidationError
from sxa.models.profile import AthleteProfile, ProfileRequest
from sxa.services.database import AthleteRow, Database, utcnow
from sxa.utils.logger import LoggerMixin


class ProfileStore(LoggerMixin):

    available = True

    def __init__(self, database: Database):
        self.database = database

    def upsert(self, profile: ProfileRequest) -> str:
        """
        Create or replace an athlete profile

        Every field is written on update: optional fields left out of the
        request become null. created_at is set once and never changed.

        Raises:
            ValidationError: name is missing or blank
        """
        if not profile.name or not profile.name.strip():
            raise ValidationError("name is required.")

        athlete_id = profile.id or str(uuid.uuid4())
        now = utcnow()
        fields = {
            "name": profile.name,
            "age": profile.age,
            "height_cm": profile.height,
            "weight_kg": profile.weight,
            "sport": profile.sport,
            "level": profile.level,
            "updated_at": now,
        }

        try:
            with self.database.write_session() as session:
                row = session.get(AthleteRow, athlete_id)
                if row is None:
                    session.add(AthleteRow(id=athlete_id, created_at=now, **fields))
                    action = "Created"
                else:
                    for name, value in fields.items():
                        setattr(row, name, value)
                    action = "Updated"
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not save athlete {athlete_id}: {e}") from e

        self.logger.info(f"{action} athlete profile {athlete_id}")
        return athlete_id

    def get(self, athlete_id: str) -> AthleteProfile:
        try:
            with self.database.read_session() as session:
                row = session.get(AthleteRow, athlete_id)
                if row is None:
                    raise NotFoundError("Athlete not found.")
                return AthleteProfile.model_validate(row)
        except SQLAlchemyError as e:
            raise PersistenceError(f"Could not load athlete {athlete_id}: {e}") from e


class UnavailableProfileStore:
    """Stand-in used when persistence is not configured"""

    available = False
    reason = "Database unavailable. Configure DATABASE_URL and enable PERSISTENCE_ENABLED."

    def upsert(self, profile):
        raise DependencyUnavailableError(self.reason)

    def get(self, athlete_id):
        raise DependencyUnavailableError(self.reason)
