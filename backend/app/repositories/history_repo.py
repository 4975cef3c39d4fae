from __future__ import annotations
from typing import Iterable, Optional
from sqlalchemy import select, delete
from sqlalchemy.orm import Session
from app.models import WorkoutHistory, PersonalRecordRow, DailyCheckin
from app.repositories.base import BaseRepository, Page, as_utc
from app.schemas.history import HistoryEntry, PersonalRecord, CheckinEntry
from app.schemas.plan import ExercisePlanEntry

def history_from_row(row: WorkoutHistory) -> HistoryEntry:
    return HistoryEntry(
        id=row.id,
        plan_id=row.plan_id,
        plan_name=row.plan_name,
        workout_name=row.workout_name,
        completed_date=as_utc(row.completed_date),
        duration=row.duration,
        volume=row.volume,
        sets=row.sets,
        exercises=[ExercisePlanEntry.model_validate(ex) for ex in row.exercises],
    )

class HistoryRepository(BaseRepository[WorkoutHistory]):
    model = WorkoutHistory

    def _newest_first(self):
        return select(WorkoutHistory).order_by(WorkoutHistory.completed_date.desc(), WorkoutHistory.id.desc())

    def list(self, *, limit: int = 50, offset: int = 0) -> Page[WorkoutHistory]:
        return self.page_from_stmt(self._newest_first(), limit=limit, offset=offset)

    def all(self) -> list[HistoryEntry]:
        return [history_from_row(r) for r in self.db.execute(self._newest_first()).scalars().all()]

    def previous(self, plan_id: str, workout_name: str) -> Optional[WorkoutHistory]:
        stmt = self._newest_first().where(
            WorkoutHistory.plan_id == plan_id, WorkoutHistory.workout_name == workout_name
        ).limit(1)
        return self.db.execute(stmt).scalar_one_or_none()

    def add(self, entry: HistoryEntry, *, commit: bool = True) -> WorkoutHistory:
        row = WorkoutHistory(
            id=entry.id,
            plan_id=entry.plan_id,
            plan_name=entry.plan_name,
            workout_name=entry.workout_name,
            completed_date=entry.completed_date,
            duration=entry.duration,
            volume=entry.volume,
            sets=entry.sets,
            exercises=[ex.model_dump(mode="json", by_alias=True) for ex in entry.exercises],
        )
        self.db.add(row)
        self.finish(commit)
        return row

    def replace_all(self, entries: Iterable[HistoryEntry], *, commit: bool = True) -> None:
        self.db.execute(delete(WorkoutHistory))
        for entry in entries:
            self.add(entry, commit=False)
        self.finish(commit)

class RecordRepository(BaseRepository[PersonalRecordRow]):
    """Personal records, one per exercise id."""
    model = PersonalRecordRow

    def all(self) -> list[PersonalRecord]:
        stmt = select(PersonalRecordRow).order_by(PersonalRecordRow.date.desc())
        return [self._schema(r) for r in self.db.execute(stmt).scalars().all()]

    def by_exercise(self) -> dict[str, PersonalRecord]:
        return {pr.exercise_id: pr for pr in self.all()}

    def upsert(self, pr: PersonalRecord, *, commit: bool = True) -> PersonalRecordRow:
        row = self.db.get(PersonalRecordRow, pr.exercise_id) or PersonalRecordRow(exercise_id=pr.exercise_id)
        row.id = pr.id
        row.exercise_name = pr.exercise_name
        row.date = pr.date
        row.weight = pr.weight
        row.reps = pr.reps
        row.e1rm = pr.e1rm
        row.units = pr.units
        self.db.add(row)
        self.finish(commit)
        return row

    def replace_all(self, records: Iterable[PersonalRecord], *, commit: bool = True) -> None:
        self.db.execute(delete(PersonalRecordRow))
        self.db.flush()
        for pr in records:
            self.upsert(pr, commit=False)
        self.finish(commit)

    @staticmethod
    def _schema(row: PersonalRecordRow) -> PersonalRecord:
        pr = PersonalRecord.model_validate(row)
        pr.date = as_utc(pr.date)
        return pr

class CheckinRepository(BaseRepository[DailyCheckin]):
    model = DailyCheckin

    def list(self) -> list[CheckinEntry]:
        stmt = select(DailyCheckin).order_by(DailyCheckin.date.asc(), DailyCheckin.id.asc())
        out = []
        for row in self.db.execute(stmt).scalars().all():
            entry = CheckinEntry.model_validate(row)
            entry.date = as_utc(entry.date)
            out.append(entry)
        return out

    def add(self, entry: CheckinEntry, *, commit: bool = True) -> DailyCheckin:
        row = DailyCheckin(date=entry.date, sleep=entry.sleep, stress=entry.stress)
        self.db.add(row)
        self.finish(commit)
        return row

    def replace_all(self, entries: Iterable[CheckinEntry], *, commit: bool = True) -> None:
        self.db.execute(delete(DailyCheckin))
        for entry in entries:
            self.add(entry, commit=False)
        self.finish(commit)
