from __future__ import annotations
from datetime import datetime, timezone
from typing import Any, Optional
from sqlalchemy.orm import Session
from app.models import AppStateRow
from app.models.app_state import SINGLETON_ID
from app.repositories.base import BaseRepository, as_utc
from app.schemas.plan import DayRef
from app.schemas.profile import UserProfile, TrainingSettings

class AppStateRepository(BaseRepository[AppStateRow]):
    model = AppStateRow

    # READS
    def get(self) -> AppStateRow:
        row = self.db.get(AppStateRow, SINGLETON_ID)
        if row is None:
            row = AppStateRow(
                id=SINGLETON_ID,
                user_selections=UserProfile().model_dump(by_alias=True),
                settings=TrainingSettings().model_dump(by_alias=True),
                current_view=DayRef().model_dump(),
                saved_templates=[],
            )
            row = self.add_and_refresh(row)
        return row

    def exists(self) -> bool:
        return self.db.get(AppStateRow, SINGLETON_ID) is not None

    def profile(self) -> UserProfile:
        return UserProfile.model_validate(self.get().user_selections)

    def settings(self) -> TrainingSettings:
        return TrainingSettings.model_validate(self.get().settings)

    def active_plan_id(self) -> Optional[str]:
        return self.get().active_plan_id

    def current_view(self) -> DayRef:
        return DayRef.model_validate(self.get().current_view or {})

    def saved_templates(self) -> list[dict[str, Any]]:
        return list(self.get().saved_templates or [])

    def updated_at(self) -> Optional[datetime]:
        return as_utc(self.get().updated_at)

    # WRITES
    def update(self, *, commit: bool = True, touched_at: datetime | None = None, **fields) -> AppStateRow:
        row = self.get()
        for key, value in fields.items():
            if isinstance(value, (UserProfile, TrainingSettings)):
                value = value.model_dump(by_alias=True)
            elif isinstance(value, DayRef):
                value = value.model_dump()
            setattr(row, key, value)
        row.updated_at = touched_at or datetime.now(timezone.utc)
        self.finish(commit)
        return row

    def reset(self, *, commit: bool = True) -> AppStateRow:
        return self.update(
            commit=commit,
            user_selections=UserProfile(),
            settings=TrainingSettings(),
            active_plan_id=None,
            current_view=DayRef(),
            saved_templates=[],
        )
