"""Job table; free-form job fields are kept in the attributes JSON column."""

from datetime import datetime

from sqlalchemy import DateTime, Integer, JSON, String
from sqlalchemy.orm import Mapped, mapped_column

from recruit_assistant.jobs.models import RawJob

from .base import Base


class JobInfo(Base):
    __tablename__ = "job_info"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    job_id: Mapped[str | None] = mapped_column(String(64), nullable=True, index=True)
    uuid: Mapped[str | None] = mapped_column(String(64), nullable=True)
    job_flow_id: Mapped[str | None] = mapped_column(String(64), nullable=True)
    attributes: Mapped[dict] = mapped_column(JSON, default=dict)

    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def to_raw(self) -> RawJob:
        return RawJob(
            id=self.id,
            job_id=self.job_id,
            uuid=self.uuid,
            job_flow_id=self.job_flow_id,
            attributes=dict(self.attributes or {}),
            created_at=self.created_at,
            updated_at=self.updated_at,
        )
