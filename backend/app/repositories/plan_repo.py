from __future__ import annotations
from typing import Optional
from sqlalchemy import select, delete
from sqlalchemy.orm import Session
from app.models import TrainingPlan, PlanDay
from app.repositories.base import BaseRepository, as_utc
from app.schemas.plan import DayWorkout, ExercisePlanEntry, Plan

def day_from_row(row: PlanDay) -> DayWorkout:
    return DayWorkout(
        name=row.name,
        exercises=[ExercisePlanEntry.model_validate(ex) for ex in row.exercises],
        completed=row.completed,
        completed_date=as_utc(row.completed_date),
    )

def plan_from_row(row: TrainingPlan) -> Plan:
    weeks: dict[int, dict[int, DayWorkout]] = {}
    for d in row.days:
        weeks.setdefault(d.week, {})[d.day] = day_from_row(d)
    return Plan(
        id=row.id,
        name=row.name,
        start_date=as_utc(row.start_date),
        duration_weeks=row.duration_weeks,
        split_name=row.split_name,
        weeks=weeks,
    )

class PlanRepository(BaseRepository[TrainingPlan]):
    """Plans are stored as an arena of day records keyed by (plan_id, week, day)."""
    model = TrainingPlan

    # READS
    def get(self, plan_id: str) -> Optional[TrainingPlan]:
        return self.db.get(TrainingPlan, plan_id)

    def list(self) -> list[TrainingPlan]:
        stmt = select(TrainingPlan).order_by(TrainingPlan.created_at.asc(), TrainingPlan.id.asc())
        return list(self.db.execute(stmt).scalars().all())

    def get_day(self, plan_id: str, week: int, day: int) -> Optional[PlanDay]:
        stmt = select(PlanDay).where(PlanDay.plan_id == plan_id, PlanDay.week == week, PlanDay.day == day)
        return self.db.execute(stmt).scalar_one_or_none()

    # WRITES
    def create(self, plan: Plan, *, commit: bool = True) -> TrainingPlan:
        if self.get(plan.id):
            raise ValueError("plan_already_exists")
        row = TrainingPlan(
            id=plan.id,
            name=plan.name,
            start_date=plan.start_date,
            duration_weeks=plan.duration_weeks,
            split_name=plan.split_name,
        )
        for week, days in plan.weeks.items():
            for day_index, workout in days.items():
                slot = PlanDay(week=week, day=day_index)
                self._write_day(slot, workout)
                row.days.append(slot)
        self.db.add(row)
        self.finish(commit)
        self.db.refresh(row)
        return row

    def save_day(self, row: PlanDay, workout: DayWorkout, *, commit: bool = True) -> PlanDay:
        self._write_day(row, workout)
        self.finish(commit)
        return row

    def delete(self, plan_id: str, *, commit: bool = True) -> bool:
        row = self.get(plan_id)
        if not row:
            return False
        self.db.delete(row)
        self.finish(commit)
        return True

    def delete_all(self, *, commit: bool = True) -> None:
        self.db.execute(delete(PlanDay))
        self.db.execute(delete(TrainingPlan))
        self.finish(commit)

    @staticmethod
    def _write_day(row: PlanDay, workout: DayWorkout) -> None:
        row.name = workout.name
        row.completed = workout.completed
        row.completed_date = workout.completed_date
        # a fresh list so the JSON column registers the change
        row.exercises = [ex.model_dump(mode="json", by_alias=True) for ex in workout.exercises]
