from datetime import datetime
from typing import Literal
from pydantic import Field
from app.schemas.common import CamelModel
from app.schemas.plan import ExercisePlanEntry

class HistoryEntry(CamelModel):
    id: str
    plan_id: str
    plan_name: str
    workout_name: str
    completed_date: datetime
    duration: int = 0
    volume: float = 0
    sets: int = 0
    exercises: list[ExercisePlanEntry] = Field(default_factory=list)

    model_config = {"from_attributes": True}

class PersonalRecord(CamelModel):
    id: str
    exercise_id: str
    exercise_name: str
    date: datetime
    weight: float
    reps: int
    e1rm: int
    units: Literal["lbs", "kg"] = "lbs"

    model_config = {"from_attributes": True}

class CheckinEntry(CamelModel):
    date: datetime
    sleep: float
    stress: int

    model_config = {"from_attributes": True}

class ExerciseSession(CamelModel):
    """One past appearance of an exercise, for the history view."""
    completed_date: datetime
    workout_name: str
    note: str = ""
    sets: list[tuple[float, int]] = Field(default_factory=list)

class ProgressSeries(CamelModel):
    exercise_id: str
    metric: Literal["weight", "e1rm"]
    labels: list[str] = Field(default_factory=list)
    data: list[float] = Field(default_factory=list)
