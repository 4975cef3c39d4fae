from datetime import datetime
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String, DateTime, JSON, func
from app.db import Base

SINGLETON_ID = 1

class AppStateRow(Base):
    """Single-user preferences and pointers; one row, id 1."""
    __tablename__ = "app_state"
    id: Mapped[int] = mapped_column(Integer, primary_key=True, default=SINGLETON_ID)
    user_selections: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    settings: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    active_plan_id: Mapped[str | None] = mapped_column(String(40), nullable=True)
    current_view: Mapped[dict] = mapped_column(JSON, nullable=False, default=dict)
    saved_templates: Mapped[list] = mapped_column(JSON, nullable=False, default=list)
    updated_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), server_default=func.now())
