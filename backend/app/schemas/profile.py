from typing import Annotated, Literal
from pydantic import Field, field_validator
from app.schemas.common import CamelModel

Goal = Literal["hypertrophy", "strength", "fatLoss"]
DietaryStatus = Literal["surplus", "maintenance", "deficit"]
DaysPerWeek = Annotated[int, Field(ge=1, le=7)]

WEIGHT_INCREMENTS = (2.5, 5.0, 10.0)

class UserProfile(CamelModel):
    """Onboarding selections. trainingAge and style stay free-form; the engine falls back on unknown values."""
    goal: Goal = "hypertrophy"
    training_age: str = "beginner"
    days_per_week: DaysPerWeek = 4
    dietary_status: DietaryStatus = "maintenance"
    style: str = "gym"
    onboarding_completed: bool = False

class TrainingSettings(CamelModel):
    units: Literal["lbs", "kg"] = "lbs"
    theme: Literal["dark", "light"] = "dark"
    # only "double" (RIR-based) is implemented; "linear" is stored but not applied
    progression_model: Literal["linear", "double"] = "double"
    weight_increment: float = 5.0
    rest_duration: Literal[60, 90, 120, 180] = 90
    haptics: bool = True

    @field_validator("weight_increment")
    @classmethod
    def known_increment(cls, v: float) -> float:
        if v not in WEIGHT_INCREMENTS:
            raise ValueError(f"weightIncrement must be one of {WEIGHT_INCREMENTS}")
        return v
