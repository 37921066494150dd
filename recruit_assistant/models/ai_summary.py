"""AI summary table: one fit assessment per profile uuid."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from recruit_assistant.profiles.models import RawAISummary

from .base import Base


class ProfileAISummary(Base):
    __tablename__ = "profile_ai_summaries"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)
    id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    job_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    user_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    job_flow_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    moved: Mapped[int] = mapped_column(Integer, default=0)  # 1 = moved to CRM
    relevant_months: Mapped[str | None] = mapped_column(String(50), nullable=True)
    open_to_work: Mapped[str | None] = mapped_column(String(50), nullable=True)
    fit_percentage: Mapped[float | None] = mapped_column(Float, nullable=True)
    matched: Mapped[dict] = mapped_column(JSON, default=dict)

    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def to_raw(self) -> RawAISummary:
        return RawAISummary(
            uuid=self.uuid,
            fit_percentage=self.fit_percentage,
            matched=dict(self.matched or {}),
            id=self.id,
            job_id=self.job_id,
            user_id=self.user_id,
            job_flow_id=self.job_flow_id,
            moved=self.moved or 0,
            relevant_months=self.relevant_months,
            open_to_work=self.open_to_work,
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
