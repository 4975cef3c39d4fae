from typing import Annotated, Any
from datetime import datetime
from pydantic import Field, StringConstraints, field_validator
from app.schemas.common import CamelModel

RIR = Annotated[int, Field(ge=0, le=4)]

def _blank_to_none(v: Any) -> Any:
    # the synced state stores unfilled inputs as ''
    return None if v == "" else v

class LoggedSet(CamelModel):
    weight: float | None = None
    reps: int | None = None
    rir: int | None = None
    raw_input: str = ""

    blank_inputs = field_validator("weight", "reps", "rir", mode="before")(_blank_to_none)

class ExercisePlanEntry(CamelModel):
    exercise_id: str
    name: str
    muscle: str
    type: str
    target_sets: int = 3
    target_reps: int = 8
    target_rir: RIR = Field(3, alias="targetRIR")
    target_load: float | None = None
    sets: list[LoggedSet] = Field(default_factory=list)
    stall_count: int = Field(0, ge=0)
    note: str = ""

    @property
    def stalled(self) -> bool:
        return self.stall_count >= 2

class DayWorkout(CamelModel):
    name: str
    exercises: list[ExercisePlanEntry] = Field(default_factory=list)
    completed: bool = False
    completed_date: datetime | None = None

class Mesocycle(CamelModel):
    """Week -> day -> workout. Weeks and days are 1-indexed; the last week is the deload."""
    weeks: dict[int, dict[int, DayWorkout]] = Field(default_factory=dict)
    split_name: str | None = None

    def day(self, week: int, day: int) -> DayWorkout | None:
        return self.weeks.get(week, {}).get(day)

class Plan(Mesocycle):
    id: str
    name: str
    start_date: datetime
    duration_weeks: int

class PlanCreate(CamelModel):
    name: Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=120)] | None = None
    duration_weeks: Annotated[int, Field(ge=1, le=16)] | None = None

class PlanSummary(CamelModel):
    id: str
    name: str
    start_date: datetime
    duration_weeks: int
    split_name: str | None = None
    active: bool = False

class DayRef(CamelModel):
    week: int = 1
    day: int = 1
