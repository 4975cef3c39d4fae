from datetime import datetime
from typing import Any
from pydantic import Field
from app.schemas.common import CamelModel
from app.schemas.profile import UserProfile, TrainingSettings
from app.schemas.plan import Plan, DayRef
from app.schemas.history import HistoryEntry, PersonalRecord, CheckinEntry

class AppState(CamelModel):
    """The flat object the store persists and syncs."""
    user_selections: UserProfile = Field(default_factory=UserProfile)
    settings: TrainingSettings = Field(default_factory=TrainingSettings)
    all_plans: list[Plan] = Field(default_factory=list)
    active_plan_id: str | None = None
    workout_history: list[HistoryEntry] = Field(default_factory=list)
    personal_records: list[PersonalRecord] = Field(default_factory=list)
    saved_templates: list[dict[str, Any]] = Field(default_factory=list)
    current_view: DayRef = Field(default_factory=DayRef)
    daily_checkin_history: list[CheckinEntry] = Field(default_factory=list)
    last_sync_time: datetime | None = None

class SyncResult(CamelModel):
    applied: bool
    state: AppState
