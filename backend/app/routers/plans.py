import uuid
from datetime import datetime, timezone
from random import Random
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app import engine
from app.db import get_db
from app.deps.engine import get_catalog, get_rng
from app.engine.records import next_incomplete
from app.repositories.plan_repo import PlanRepository, plan_from_row
from app.repositories.state_repo import AppStateRepository
from app.schemas.catalog import ExerciseRecord
from app.schemas.plan import DayRef, Plan, PlanCreate, PlanSummary
from app.settings import get_settings

router = APIRouter(prefix="/plans", tags=["plans"])

def _summary(plan, active_id: str | None) -> PlanSummary:
    return PlanSummary(
        id=plan.id,
        name=plan.name,
        start_date=plan.start_date,
        duration_weeks=plan.duration_weeks,
        split_name=plan.split_name,
        active=plan.id == active_id,
    )

@router.post("", response_model=Plan, status_code=status.HTTP_201_CREATED)
def create_plan(
    payload: PlanCreate,
    db: Session = Depends(get_db),
    catalog: list[ExerciseRecord] = Depends(get_catalog),
    rng: Random = Depends(get_rng),
):
    state = AppStateRepository(db)
    profile = state.profile()
    weeks = payload.duration_weeks or get_settings().DEFAULT_MESOCYCLE_WEEKS
    meso = engine.generate(profile, catalog, weeks, rng=rng)

    now = datetime.now(timezone.utc)
    if payload.name:
        name = payload.name
    elif not profile.onboarding_completed:
        name = "My First Intelligent Plan"
    else:
        name = f"Intelligent Plan - {now.date().isoformat()}"

    plan = Plan(
        id=f"meso_{uuid.uuid4().hex[:12]}",
        name=name,
        start_date=now,
        duration_weeks=weeks,
        split_name=meso.split_name,
        weeks=meso.weeks,
    )
    PlanRepository(db).create(plan, commit=False)
    profile.onboarding_completed = True
    state.update(commit=False, user_selections=profile, active_plan_id=plan.id, current_view=DayRef())
    db.commit()
    return plan

@router.get("", response_model=list[PlanSummary])
def list_plans(db: Session = Depends(get_db)):
    active_id = AppStateRepository(db).active_plan_id()
    return [_summary(p, active_id) for p in PlanRepository(db).list()]

@router.get("/{plan_id}", response_model=Plan)
def get_plan(plan_id: str, db: Session = Depends(get_db)):
    row = PlanRepository(db).get(plan_id)
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    return plan_from_row(row)

@router.delete("/{plan_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_plan(plan_id: str, db: Session = Depends(get_db)):
    repo = PlanRepository(db)
    if not repo.delete(plan_id, commit=False):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    state = AppStateRepository(db)
    if state.active_plan_id() == plan_id:
        remaining = repo.list()
        state.update(commit=False, active_plan_id=remaining[0].id if remaining else None)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

@router.post("/{plan_id}/activate", response_model=PlanSummary)
def activate_plan(plan_id: str, db: Session = Depends(get_db)):
    row = PlanRepository(db).get(plan_id)
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    AppStateRepository(db).update(active_plan_id=plan_id)
    return _summary(row, plan_id)

@router.get("/{plan_id}/next", response_model=DayRef)
def next_workout(plan_id: str, db: Session = Depends(get_db)):
    row = PlanRepository(db).get(plan_id)
    if not row:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Plan not found")
    ref = next_incomplete(plan_from_row(row))
    if ref is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Every workout in this plan is completed")
    AppStateRepository(db).update(active_plan_id=plan_id, current_view=ref)
    return ref
