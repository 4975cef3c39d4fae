"""
Whole-state export/import for the offline client.

Reconciliation is last-writer-wins on the snapshot timestamp; there is
no merging.
"""
import logging
from datetime import datetime, timezone
from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session
from app.db import get_db
from app.repositories.base import as_utc
from app.repositories.history_repo import CheckinRepository, HistoryRepository, RecordRepository
from app.repositories.plan_repo import PlanRepository, plan_from_row
from app.repositories.state_repo import AppStateRepository
from app.schemas.state import AppState, SyncResult

log = logging.getLogger("uvicorn")

router = APIRouter(prefix="/state", tags=["sync"])

def export_state(db: Session) -> AppState:
    state = AppStateRepository(db)
    return AppState(
        user_selections=state.profile(),
        settings=state.settings(),
        all_plans=[plan_from_row(p) for p in PlanRepository(db).list()],
        active_plan_id=state.active_plan_id(),
        workout_history=HistoryRepository(db).all(),
        personal_records=RecordRepository(db).all(),
        saved_templates=state.saved_templates(),
        current_view=state.current_view(),
        daily_checkin_history=CheckinRepository(db).list(),
        last_sync_time=state.updated_at(),
    )

def import_state(db: Session, incoming: AppState) -> None:
    plans = PlanRepository(db)
    plans.delete_all(commit=False)
    for plan in incoming.all_plans:
        plans.create(plan, commit=False)
    HistoryRepository(db).replace_all(incoming.workout_history, commit=False)
    RecordRepository(db).replace_all(incoming.personal_records, commit=False)
    CheckinRepository(db).replace_all(incoming.daily_checkin_history, commit=False)

    active = incoming.active_plan_id
    if active not in {p.id for p in incoming.all_plans}:
        active = incoming.all_plans[0].id if incoming.all_plans else None
    AppStateRepository(db).update(
        commit=False,
        touched_at=incoming.last_sync_time or datetime.now(timezone.utc),
        user_selections=incoming.user_selections,
        settings=incoming.settings,
        active_plan_id=active,
        current_view=incoming.current_view,
        saved_templates=incoming.saved_templates,
    )
    db.commit()

@router.get("", response_model=AppState)
def get_state(db: Session = Depends(get_db)):
    return export_state(db)

@router.put("", response_model=SyncResult)
def put_state(payload: AppState, db: Session = Depends(get_db)):
    state = AppStateRepository(db)
    stored_at = state.updated_at() if state.exists() else None
    incoming_at = as_utc(payload.last_sync_time)

    newer = stored_at is None or (incoming_at is not None and incoming_at > stored_at)
    if newer:
        try:
            import_state(db, payload)
        except ValueError as e:
            db.rollback()
            if str(e) == "plan_already_exists":
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="duplicate plan id in snapshot")
            raise
        log.info("state import applied (incoming=%s stored=%s)", incoming_at, stored_at)
    else:
        log.info("state import skipped, stored copy is newer (incoming=%s stored=%s)", incoming_at, stored_at)
    return SyncResult(applied=newer, state=export_state(db))

@router.delete("", status_code=status.HTTP_204_NO_CONTENT)
def reset_state(db: Session = Depends(get_db)):
    PlanRepository(db).delete_all(commit=False)
    HistoryRepository(db).replace_all([], commit=False)
    RecordRepository(db).replace_all([], commit=False)
    CheckinRepository(db).replace_all([], commit=False)
    AppStateRepository(db).reset(commit=False)
    db.commit()
    return Response(status_code=status.HTTP_204_NO_CONTENT)
