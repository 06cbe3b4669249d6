"""Pydantic schemas for the waitlist API and dashboard responses."""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class WaitlistRole(str, Enum):
    """Role values recognized by the dashboard."""
    EVENT_PLANNER = "event-planner"
    VENDOR = "vendor"


class WaitlistEntry(BaseModel):
    """One waitlist signup as returned by the upstream API."""
    id: int
    name: str
    email: str
    occupation: str = ""
    # Kept as a plain string so unrecognized roles survive validation
    role: str = ""
    created_at: str = ""

    class Config:
        frozen = True

    @field_validator("occupation", "role", "created_at", mode="before")
    @classmethod
    def none_to_empty(cls, value):
        return "" if value is None else value


class WaitlistListResponse(BaseModel):
    """Body of the upstream listing endpoint."""
    data: Optional[List[WaitlistEntry]] = None


class WaitlistStats(BaseModel):
    """Counts derived from the current entry collection."""
    total: int = 0
    event_planners: int = 0
    vendors: int = 0


class WaitlistStateResponse(BaseModel):
    """Snapshot of the fetch controller for the JSON API."""
    status: str
    loading: bool
    error: Optional[str] = None
    entries: List[WaitlistEntry] = Field(default_factory=list)
    stats: WaitlistStats
