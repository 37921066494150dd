"""Candidate profile table; document-shaped fields live in JSON columns."""

from datetime import datetime

from sqlalchemy import DateTime, Float, Integer, JSON, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from recruit_assistant.profiles.models import RawProfile

from .base import Base


class Profile(Base):
    __tablename__ = "profiles"

    row_id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    uuid: Mapped[str] = mapped_column(String(64), unique=True, nullable=False, index=True)

    first_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    last_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    full_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    location_code: Mapped[str | None] = mapped_column(String(50), nullable=True)
    location_raw: Mapped[str | None] = mapped_column(String(255), nullable=True)
    gender: Mapped[str | None] = mapped_column(String(50), nullable=True)
    job_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    current_title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    summary: Mapped[str | None] = mapped_column(Text, nullable=True)
    linkedin_url: Mapped[str | None] = mapped_column(String(512), nullable=True)
    linkedin_public_id: Mapped[str | None] = mapped_column(String(255), nullable=True)
    picture_url: Mapped[str | None] = mapped_column(String(1024), nullable=True)
    years_of_experience: Mapped[float | None] = mapped_column(Float, nullable=True)
    months_of_experience: Mapped[float | None] = mapped_column(Float, nullable=True)
    nationality: Mapped[str | None] = mapped_column(String(100), nullable=True)
    current_industry: Mapped[str | None] = mapped_column(String(255), nullable=True)
    seniority_level: Mapped[str | None] = mapped_column(String(100), nullable=True)
    functional_area: Mapped[str | None] = mapped_column(String(255), nullable=True)
    grad_year: Mapped[int | None] = mapped_column(Integer, nullable=True)
    content_hash: Mapped[str | None] = mapped_column(String(128), nullable=True)

    skills: Mapped[list] = mapped_column(JSON, default=list)
    experiences: Mapped[list] = mapped_column(JSON, default=list)
    education: Mapped[list] = mapped_column(JSON, default=list)
    languages: Mapped[list] = mapped_column(JSON, default=list)
    work_emails: Mapped[list] = mapped_column(JSON, default=list)
    personal_emails: Mapped[list] = mapped_column(JSON, default=list)
    phones: Mapped[list] = mapped_column(JSON, default=list)
    social_links: Mapped[list] = mapped_column(JSON, default=list)
    awards: Mapped[list] = mapped_column(JSON, default=list)
    publications: Mapped[list] = mapped_column(JSON, default=list)
    certifications: Mapped[list] = mapped_column(JSON, default=list)
    patents: Mapped[list] = mapped_column(JSON, default=list)
    memberships: Mapped[list] = mapped_column(JSON, default=list)
    current_company: Mapped[dict] = mapped_column(JSON, default=dict)

    created_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    updated_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)

    def to_raw(self) -> RawProfile:
        """Convert DB row to the RawProfile dataclass."""
        return RawProfile(
            uuid=self.uuid,
            first_name=self.first_name,
            last_name=self.last_name,
            full_name=self.full_name,
            location_name=self.location_name,
            location_code=self.location_code,
            location_raw=self.location_raw,
            gender=self.gender,
            job_title=self.job_title,
            current_title=self.current_title,
            summary=self.summary,
            linkedin_url=self.linkedin_url,
            linkedin_public_id=self.linkedin_public_id,
            picture_url=self.picture_url,
            years_of_experience=self.years_of_experience,
            months_of_experience=self.months_of_experience,
            skills=list(self.skills or []),
            experiences=list(self.experiences or []),
            education=list(self.education or []),
            languages=list(self.languages or []),
            work_emails=list(self.work_emails or []),
            personal_emails=list(self.personal_emails or []),
            phones=list(self.phones or []),
            social_links=list(self.social_links or []),
            nationality=self.nationality,
            current_industry=self.current_industry,
            seniority_level=self.seniority_level,
            functional_area=self.functional_area,
            awards=list(self.awards or []),
            publications=list(self.publications or []),
            certifications=list(self.certifications or []),
            patents=list(self.patents or []),
            memberships=list(self.memberships or []),
            current_company=dict(self.current_company or {}),
            grad_year=self.grad_year,
            created_at=self.created_at,
            updated_at=self.updated_at,
            content_hash=self.content_hash,
        )
