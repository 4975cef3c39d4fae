import re
import uuid
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from app import engine
from app.db import get_db
from app.deps.engine import get_catalog
from app.engine.catalog import exercise_id, find_by_name
from app.engine.records import last_performance, mesocycle_stats, next_incomplete, total_sets, total_volume
from app.models import PlanDay
from app.repositories.history_repo import CheckinRepository, HistoryRepository, RecordRepository
from app.repositories.plan_repo import PlanRepository, day_from_row, plan_from_row
from app.repositories.state_repo import AppStateRepository
from app.schemas.catalog import ExerciseRecord
from app.schemas.history import CheckinEntry, HistoryEntry
from app.schemas.plan import DayRef, DayWorkout, ExercisePlanEntry, LoggedSet
from app.schemas.workout import (
    Alternative, CheckinCreate, CheckinRead, CompleteRequest, MesocycleStats,
    NoteUpdate, SetLogResult, SetUpdate, Suggestion, SwapRequest, WorkoutSummary,
)

router = APIRouter(prefix="/plans/{plan_id}/weeks/{week}/days/{day}", tags=["workouts"])

_tags = re.compile(r"<[^>]*>?")

def _load_day(db: Session, plan_id: str, week: int, day: int) -> tuple[PlanRepository, PlanDay, DayWorkout]:
    repo = PlanRepository(db)
    if not repo.get(plan_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    row = repo.get_day(plan_id, week, day)
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Workout not found")
    return repo, row, day_from_row(row)

def _exercise(workout: DayWorkout, index: int) -> ExercisePlanEntry:
    if not 0 <= index < len(workout.exercises):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Exercise not found")
    return workout.exercises[index]

def _editable(workout: DayWorkout) -> None:
    if workout.completed:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Workout already completed")

@router.get("", response_model=DayWorkout)
def get_workout(plan_id: str, week: int, day: int, db: Session = Depends(get_db)):
    return _load_day(db, plan_id, week, day)[2]

@router.post("/checkin", response_model=CheckinRead, status_code=status.HTTP_201_CREATED)
def daily_checkin(plan_id: str, week: int, day: int, payload: CheckinCreate, db: Session = Depends(get_db)):
    repo, row, workout = _load_day(db, plan_id, week, day)
    _editable(workout)
    now = datetime.now(timezone.utc)
    CheckinRepository(db).add(CheckinEntry(date=now, sleep=payload.sleep, stress=payload.stress), commit=False)
    adjusted = engine.adjust(payload.sleep, payload.stress, workout)
    if adjusted:
        repo.save_day(row, workout, commit=False)
    AppStateRepository(db).update(commit=False, active_plan_id=plan_id, current_view=DayRef(week=week, day=day))
    db.commit()
    return CheckinRead(date=now, sleep=payload.sleep, stress=payload.stress, adjusted=adjusted)

@router.post("/exercises/{index}/sets", response_model=LoggedSet, status_code=status.HTTP_201_CREATED)
def add_set(plan_id: str, week: int, day: int, index: int, db: Session = Depends(get_db)):
    repo, row, workout = _load_day(db, plan_id, week, day)
    _editable(workout)
    ex = _exercise(workout, index)
    # pre-fill with the previous set's load, or the prescribed one for the first set
    weight = ex.sets[-1].weight if ex.sets else ex.target_load
    new_set = LoggedSet(weight=weight)
    ex.sets.append(new_set)
    repo.save_day(row, workout)
    return new_set

@router.put("/exercises/{index}/sets/{set_index}", response_model=SetLogResult)
def log_set(
    plan_id: str,
    week: int,
    day: int,
    index: int,
    set_index: int,
    payload: SetUpdate,
    db: Session = Depends(get_db),
):
    repo, row, workout = _load_day(db, plan_id, week, day)
    _editable(workout)
    ex = _exercise(workout, index)
    if not 0 <= set_index < len(ex.sets):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Set not found")

    logged = ex.sets[set_index]
    if payload.weight is not None:
        logged.weight = payload.weight
    if payload.raw_input is not None:
        logged.raw_input = payload.raw_input.strip().lower()
        logged.reps, logged.rir = engine.parse_rep_input(logged.raw_input)
    repo.save_day(row, workout)

    recommendation = None
    if logged.weight is not None and logged.reps is not None:
        settings = AppStateRepository(db).settings()
        recommendation = engine.recommend(logged, ex, settings)
    return SetLogResult(set=logged, recommendation=recommendation)

@router.put("/exercises/{index}/note", response_model=ExercisePlanEntry)
def update_note(plan_id: str, week: int, day: int, index: int, payload: NoteUpdate, db: Session = Depends(get_db)):
    repo, row, workout = _load_day(db, plan_id, week, day)
    ex = _exercise(workout, index)
    ex.note = _tags.sub("", payload.note)
    repo.save_day(row, workout)
    return ex

@router.get("/exercises/{index}/alternatives", response_model=list[Alternative])
def list_alternatives(
    plan_id: str,
    week: int,
    day: int,
    index: int,
    db: Session = Depends(get_db),
    catalog: list[ExerciseRecord] = Depends(get_catalog),
):
    _, _, workout = _load_day(db, plan_id, week, day)
    ex = _exercise(workout, index)
    record = find_by_name(catalog, ex.name)
    if not record:
        return []
    history = HistoryRepository(db).all()
    out = []
    for name in record.alternatives:
        alt_id = exercise_id(name)
        last = last_performance(history, alt_id)
        out.append(Alternative(
            name=name,
            exercise_id=alt_id,
            last_weight=last.weight if last else None,
            last_reps=last.reps if last else None,
        ))
    return out

@router.post("/exercises/{index}/swap", response_model=ExercisePlanEntry)
def swap_exercise(
    plan_id: str,
    week: int,
    day: int,
    index: int,
    payload: SwapRequest,
    db: Session = Depends(get_db),
    catalog: list[ExerciseRecord] = Depends(get_catalog),
):
    repo, row, workout = _load_day(db, plan_id, week, day)
    _editable(workout)
    current = _exercise(workout, index)
    record = find_by_name(catalog, current.name)
    if not record or not record.alternatives:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="No alternatives listed for this exercise")
    if payload.alternative not in record.alternatives:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Not an alternative for this exercise")
    replacement = find_by_name(catalog, payload.alternative)
    if not replacement:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Alternative missing from the catalog")
    replacement_id = exercise_id(replacement.name)
    if any(ex.exercise_id == replacement_id for ex in workout.exercises):
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="Exercise already in this workout")

    swapped = current.model_copy(update={
        "name": replacement.name,
        "muscle": replacement.muscle,
        "exercise_id": replacement_id,
        "sets": [],
        "stall_count": 0,
        "note": f"Swapped from {current.name}.",
    })
    workout.exercises[index] = swapped
    repo.save_day(row, workout)
    return swapped

@router.post("/complete", response_model=WorkoutSummary)
def complete_workout(
    plan_id: str,
    week: int,
    day: int,
    payload: CompleteRequest | None = None,
    db: Session = Depends(get_db),
):
    payload = payload or CompleteRequest()
    repo, row, workout = _load_day(db, plan_id, week, day)
    _editable(workout)
    state = AppStateRepository(db)
    settings = state.settings()
    plan_row = repo.get(plan_id)
    now = datetime.now(timezone.utc)

    workout.completed = True
    workout.completed_date = now

    records = RecordRepository(db)
    new_prs = engine.detect_personal_records(workout, records.by_exercise(), settings.units, now)
    for pr in new_prs:
        records.upsert(pr, commit=False)

    volume = total_volume(workout)
    sets = total_sets(workout)
    history = HistoryRepository(db)
    previous = history.previous(plan_id, workout.name)
    changes = {}
    if previous:
        changes = {
            "volume_change": volume - previous.volume,
            "sets_change": sets - previous.sets,
            "duration_change": payload.duration - previous.duration,
        }
    history.add(HistoryEntry(
        id=f"hist_{uuid.uuid4().hex[:12]}",
        plan_id=plan_id,
        plan_name=plan_row.name,
        workout_name=workout.name,
        completed_date=now,
        duration=payload.duration,
        volume=volume,
        sets=sets,
        exercises=[ex.model_copy(deep=True) for ex in workout.exercises],
    ), commit=False)
    repo.save_day(row, workout, commit=False)

    suggestions = []
    next_row = repo.get_day(plan_id, week + 1, day)
    upcoming = day_from_row(next_row) if next_row else None
    # a finished workout keeps the targets it was trained at
    if upcoming is not None and not upcoming.completed:
        engine.advance(workout, upcoming, settings)
        suggestions = [
            Suggestion(exercise_name=name, suggestion=text)
            for name, text in engine.progression_suggestions(workout, upcoming, settings.units)
        ]
        repo.save_day(next_row, upcoming, commit=False)

    plan = plan_from_row(plan_row)
    total, done = mesocycle_stats(plan)
    next_view = next_incomplete(plan)
    state.update(commit=False, current_view=next_view or DayRef(week=week, day=day))
    db.commit()

    return WorkoutSummary(
        day=workout,
        total_volume=volume,
        total_sets=sets,
        **changes,
        new_prs=len(new_prs),
        suggestions=suggestions,
        mesocycle_stats=MesocycleStats(total=total, completed=done, incomplete=total - done),
        next_view=next_view,
    )
