"""
Athlete profile data models
"""

from datetime import datetime
from typing import Optional

from pydantic import Field

from sxa.models.analysis import CamelModel


class ProfileRequest(CamelModel):
    """Upsert payload; name is checked by the store so the error shape stays uniform"""
    id: Optional[str] = None
    name: Optional[str] = None
    age: Optional[int] = Field(default=None, ge=0)
    height: Optional[float] = Field(default=None, ge=0)
    weight: Optional[float] = Field(default=None, ge=0)
    sport: Optional[str] = None
    level: Optional[str] = None


class ProfileSaved(CamelModel):
    id: str
    message: str = "Profile saved."


class AthleteProfile(CamelModel):
    id: str
    name: str
    age: Optional[int] = None
    height_cm: Optional[float] = None
    weight_kg: Optional[float] = None
    sport: Optional[str] = None
    level: Optional[str] = None
    created_at: datetime
    updated_at: datetime
