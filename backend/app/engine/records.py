"""
Performance bookkeeping: estimated 1RM, personal records, session totals
and the history lookups the workout views need.
"""

from datetime import datetime
from typing import Iterable

from app.schemas.history import HistoryEntry, PersonalRecord
from app.schemas.plan import DayRef, DayWorkout, LoggedSet, Mesocycle
from .policy import round_half_up

def estimate_1rm(weight: float | None, reps: int | None) -> int:
    """Epley, with a single rep counting as the weight itself."""
    if not weight or not reps or reps < 1:
        return 0
    if reps == 1:
        return round_half_up(weight)
    return round_half_up(weight * (1 + reps / 30))

def best_set(sets: Iterable[LoggedSet]) -> tuple[LoggedSet | None, int]:
    best, best_e1rm = None, 0
    for s in sets:
        e1rm = estimate_1rm(s.weight, s.reps)
        if e1rm > best_e1rm:
            best, best_e1rm = s, e1rm
    return best, best_e1rm

def detect_personal_records(
    day: DayWorkout,
    existing: dict[str, PersonalRecord],
    units: str,
    when: datetime,
) -> list[PersonalRecord]:
    """New records set in day, at most one per exercise; each replaces the stored record for its exercise."""
    best = dict(existing)
    found: dict[str, PersonalRecord] = {}
    for ex in day.exercises:
        top, e1rm = best_set(ex.sets)
        if top is None:
            continue
        prior = best.get(ex.exercise_id)
        if prior is not None and e1rm <= prior.e1rm:
            continue
        best[ex.exercise_id] = found[ex.exercise_id] = PersonalRecord(
            id=f"pr_{ex.exercise_id}_{int(when.timestamp() * 1000)}",
            exercise_id=ex.exercise_id,
            exercise_name=ex.name,
            date=when,
            weight=top.weight,
            reps=top.reps,
            e1rm=e1rm,
            units=units,
        )
    return list(found.values())

def total_volume(day: DayWorkout) -> float:
    return sum((s.weight or 0) * (s.reps or 0) for ex in day.exercises for s in ex.sets)

def total_sets(day: DayWorkout) -> int:
    return sum(len(ex.sets) for ex in day.exercises)

def mesocycle_stats(meso: Mesocycle) -> tuple[int, int]:
    """(days with exercises, of which completed)."""
    total = completed = 0
    for days in meso.weeks.values():
        for day in days.values():
            if day.exercises:
                total += 1
                completed += day.completed
    return total, completed

def next_incomplete(meso: Mesocycle) -> DayRef | None:
    for week in sorted(meso.weeks):
        for day in sorted(meso.weeks[week]):
            if not meso.weeks[week][day].completed:
                return DayRef(week=week, day=day)
    return None

def last_performance(history: Iterable[HistoryEntry], ex_id: str) -> LoggedSet | None:
    """Heaviest set from the most recent session of ex_id; history is newest first."""
    for entry in history:
        for ex in entry.exercises:
            if ex.exercise_id != ex_id or not ex.sets:
                continue
            top = max(ex.sets, key=lambda s: s.weight or 0)
            if (top.weight or 0) > 0:
                return top
    return None

def progress_series(history: Iterable[HistoryEntry], ex_id: str, metric: str) -> tuple[list[str], list[float]]:
    """Chronological (labels, values) for a chart of ex_id's top weight or best e1RM."""
    labels, data = [], []
    for entry in sorted(history, key=lambda h: h.completed_date):
        ex = next((e for e in entry.exercises if e.exercise_id == ex_id), None)
        if ex is None or not ex.sets:
            continue
        if metric == "weight":
            value = max(s.weight or 0 for s in ex.sets)
        else:
            value = best_set(ex.sets)[1]
        if value > 0:
            labels.append(entry.completed_date.date().isoformat())
            data.append(value)
    return labels, data
