from app.models.plan import TrainingPlan, PlanDay
from app.models.history import WorkoutHistory, PersonalRecordRow, DailyCheckin
from app.models.app_state import AppStateRow

__all__ = [
    "TrainingPlan",
    "PlanDay",
    "WorkoutHistory",
    "PersonalRecordRow",
    "DailyCheckin",
    "AppStateRow",
]
