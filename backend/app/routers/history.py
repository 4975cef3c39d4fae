from typing import Literal
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session
from app.db import get_db
from app.engine.records import progress_series
from app.repositories.history_repo import HistoryRepository, RecordRepository, history_from_row
from app.schemas.history import ExerciseSession, HistoryEntry, PersonalRecord, ProgressSeries

router = APIRouter(tags=["history"])

@router.get("/history", response_model=list[HistoryEntry])
def list_history(
    db: Session = Depends(get_db),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
):
    page = HistoryRepository(db).list(limit=limit, offset=offset)
    return [history_from_row(r) for r in page.items]

@router.get("/history/exercises/{exercise_id}", response_model=list[ExerciseSession])
def exercise_history(exercise_id: str, db: Session = Depends(get_db)):
    out = []
    for entry in HistoryRepository(db).all():
        ex = next((e for e in entry.exercises if e.exercise_id == exercise_id), None)
        if ex is None or not (ex.sets or ex.note):
            continue
        out.append(ExerciseSession(
            completed_date=entry.completed_date,
            workout_name=entry.workout_name,
            note=ex.note,
            sets=[(s.weight, s.reps) for s in ex.sets if s.weight and s.reps],
        ))
    return out

@router.get("/records", response_model=list[PersonalRecord])
def list_records(db: Session = Depends(get_db)):
    return RecordRepository(db).all()

@router.get("/progress/{exercise_id}", response_model=ProgressSeries)
def exercise_progress(
    exercise_id: str,
    metric: Literal["weight", "e1rm"] = "weight",
    db: Session = Depends(get_db),
):
    labels, data = progress_series(HistoryRepository(db).all(), exercise_id, metric)
    return ProgressSeries(exercise_id=exercise_id, metric=metric, labels=labels, data=data)
