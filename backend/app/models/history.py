from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, Float, DateTime, JSON
from app.db import Base

class WorkoutHistory(Base):
    __tablename__ = "workout_history"
    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    plan_id: Mapped[str] = mapped_column(String(40), index=True)
    plan_name: Mapped[str] = mapped_column(String(120), nullable=False)
    workout_name: Mapped[str] = mapped_column(String(120), nullable=False)
    completed_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), index=True)
    duration: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    volume: Mapped[float] = mapped_column(Float, nullable=False, default=0)
    sets: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    exercises: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

class PersonalRecordRow(Base):
    __tablename__ = "personal_records"
    exercise_id: Mapped[str] = mapped_column(String(160), primary_key=True)
    id: Mapped[str] = mapped_column(String(200), nullable=False)
    exercise_name: Mapped[str] = mapped_column(String(120), nullable=False)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    weight: Mapped[float] = mapped_column(Float, nullable=False)
    reps: Mapped[int] = mapped_column(Integer, nullable=False)
    e1rm: Mapped[int] = mapped_column(Integer, nullable=False)
    units: Mapped[str] = mapped_column(String(8), nullable=False, default="lbs")

class DailyCheckin(Base):
    __tablename__ = "daily_checkins"
    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    sleep: Mapped[float] = mapped_column(Float, nullable=False)
    stress: Mapped[int] = mapped_column(Integer, nullable=False)
