from typing import Annotated
from datetime import datetime
from pydantic import Field
from app.schemas.common import CamelModel
from app.schemas.plan import DayWorkout, DayRef, LoggedSet

NonNegFloat = Annotated[float, Field(ge=0, le=2000)]

class CheckinCreate(CamelModel):
    sleep: Annotated[float, Field(ge=0, le=24)]
    stress: Annotated[int, Field(ge=1, le=10)]

class CheckinRead(CheckinCreate):
    date: datetime
    adjusted: bool = False

class SetUpdate(CamelModel):
    weight: NonNegFloat | None = None
    raw_input: Annotated[str, Field(max_length=60)] | None = None

class SetLogResult(CamelModel):
    set: LoggedSet
    recommendation: str | None = None

class NoteUpdate(CamelModel):
    note: Annotated[str, Field(max_length=500)]

class SwapRequest(CamelModel):
    alternative: Annotated[str, Field(min_length=1, max_length=120)]

class Alternative(CamelModel):
    name: str
    exercise_id: str
    last_weight: float | None = None
    last_reps: int | None = None

class CompleteRequest(CamelModel):
    duration: Annotated[int, Field(ge=0)] = 0   # seconds on the workout stopwatch

class Suggestion(CamelModel):
    exercise_name: str
    suggestion: str

class MesocycleStats(CamelModel):
    total: int
    completed: int
    incomplete: int

class WorkoutSummary(CamelModel):
    day: DayWorkout
    total_volume: float
    total_sets: int
    volume_change: float | None = None
    sets_change: int | None = None
    duration_change: int | None = None
    new_prs: int = Field(0, alias="newPRs")
    suggestions: list[Suggestion] = Field(default_factory=list)
    mesocycle_stats: MesocycleStats
    next_view: DayRef | None = None
