from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from app.db import get_db
from app.repositories.state_repo import AppStateRepository
from app.schemas.profile import UserProfile, TrainingSettings

router = APIRouter(tags=["profile"])

@router.get("/profile", response_model=UserProfile)
def get_profile(db: Session = Depends(get_db)):
    return AppStateRepository(db).profile()

@router.put("/profile", response_model=UserProfile)
def update_profile(payload: UserProfile, db: Session = Depends(get_db)):
    # takes effect from the next generated plan; existing plans are untouched
    AppStateRepository(db).update(user_selections=payload)
    return payload

@router.get("/settings", response_model=TrainingSettings)
def get_training_settings(db: Session = Depends(get_db)):
    return AppStateRepository(db).settings()

@router.put("/settings", response_model=TrainingSettings)
def update_training_settings(payload: TrainingSettings, db: Session = Depends(get_db)):
    AppStateRepository(db).update(settings=payload)
    return payload
