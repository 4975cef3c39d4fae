from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column, relationship
from sqlalchemy import Integer, ForeignKey, String, Boolean, DateTime, JSON, UniqueConstraint, func
from app.db import Base

class TrainingPlan(Base):
    __tablename__ = "plans"
    id: Mapped[str] = mapped_column(String(40), primary_key=True)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    start_date: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    duration_weeks: Mapped[int] = mapped_column(Integer, nullable=False)
    split_name: Mapped[str | None] = mapped_column(String(40), nullable=True)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())

    days = relationship("PlanDay", back_populates="plan", cascade="all, delete-orphan",
                        order_by=lambda: [PlanDay.week, PlanDay.day])

class PlanDay(Base):
    """One (plan, week, day) workout. Exercises and their logged sets live in a JSON column."""
    __tablename__ = "plan_days"
    __table_args__ = (UniqueConstraint("plan_id", "week", "day", name="uq_plan_days_slot"),)

    id: Mapped[int] = mapped_column(Integer, primary_key=True)
    plan_id: Mapped[str] = mapped_column(ForeignKey("plans.id", ondelete="CASCADE"), index=True)
    week: Mapped[int] = mapped_column(Integer, nullable=False)
    day: Mapped[int] = mapped_column(Integer, nullable=False)
    name: Mapped[str] = mapped_column(String(120), nullable=False)
    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_date: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    exercises: Mapped[list] = mapped_column(JSON, nullable=False, default=list)

    plan = relationship("TrainingPlan", back_populates="days")
