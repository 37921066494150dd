"""Candidate profile data models: raw store records and enriched views."""

from dataclasses import asdict, dataclass, field, fields
from datetime import datetime
from typing import Any, Optional

NO_SUMMARY = "No AI summary available"


@dataclass
class RawProfile:
    """A candidate profile exactly as the record store holds it."""

    uuid: str
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    full_name: Optional[str] = None
    location_name: Optional[str] = None
    location_code: Optional[str] = None
    location_raw: Optional[str] = None
    gender: Optional[str] = None
    job_title: Optional[str] = None
    current_title: Optional[str] = None
    summary: Optional[str] = None
    linkedin_url: Optional[str] = None
    linkedin_public_id: Optional[str] = None
    picture_url: Optional[str] = None
    years_of_experience: Optional[float] = None
    months_of_experience: Optional[float] = None
    skills: list[str] = field(default_factory=list)
    experiences: list[dict] = field(default_factory=list)
    education: list[dict] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    work_emails: list[str] = field(default_factory=list)
    personal_emails: list[str] = field(default_factory=list)
    phones: list[str] = field(default_factory=list)
    social_links: list[str] = field(default_factory=list)
    nationality: Optional[str] = None
    current_industry: Optional[str] = None
    seniority_level: Optional[str] = None
    functional_area: Optional[str] = None
    awards: list[str] = field(default_factory=list)
    publications: list[dict] = field(default_factory=list)
    certifications: list[Any] = field(default_factory=list)
    patents: list[str] = field(default_factory=list)
    memberships: list[str] = field(default_factory=list)
    current_company: dict = field(default_factory=dict)
    grad_year: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    content_hash: Optional[str] = None

    @classmethod
    def from_dict(cls, doc: dict) -> "RawProfile":
        """Build from a document, ignoring unknown keys and null collections."""
        known = {f.name: f for f in fields(cls)}
        kwargs = {}
        for key, value in doc.items():
            if key not in known or value is None:
                continue
            kwargs[key] = value
        return cls(**kwargs)


@dataclass
class RawAISummary:
    """AI fit assessment for one profile, keyed by the profile uuid."""

    uuid: str
    fit_percentage: Optional[float] = None
    matched: dict = field(default_factory=dict)
    id: Optional[str] = None
    job_id: Optional[str] = None
    user_id: Optional[str] = None
    job_flow_id: Optional[str] = None
    moved: int = 0
    relevant_months: Optional[str] = None
    open_to_work: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, doc: dict) -> "RawAISummary":
        known = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in doc.items() if k in known and v is not None})

    @property
    def summary_text(self) -> str:
        full_profile = (self.matched or {}).get("full_profile") or {}
        return full_profile.get("summary") or NO_SUMMARY

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class ProfileLocation:
    name: Optional[str] = None
    code: Optional[str] = None
    raw: Optional[str] = None
    country: Optional[str] = None


@dataclass(frozen=True)
class ProfileContact:
    emails: list[str] = field(default_factory=list)
    phones: list[str] = field(default_factory=list)
    linkedin: Optional[str] = None
    social: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class EnrichedProfile:
    """Denormalized profile joined with its AI summary.

    Built once per snapshot rebuild and never modified afterwards.
    """

    uuid: str
    id: str
    name: str
    display_name: str
    first_name: Optional[str]
    last_name: Optional[str]
    full_name: Optional[str]
    experience_years: float
    experience_months: float
    ai_summary: str
    fit_percentage: float
    ai_analysis: dict
    skills: list[str]
    skills_count: int
    location: ProfileLocation
    location_name: Optional[str]
    location_code: Optional[str]
    location_raw: Optional[str]
    current_role: Optional[str]
    job_title: Optional[str]
    current_title: Optional[str]
    industry: Optional[str]
    seniority: Optional[str]
    functional_area: Optional[str]
    current_company: dict
    contact: ProfileContact
    summary: Optional[str] = None
    gender: Optional[str] = None
    nationality: Optional[str] = None
    picture_url: Optional[str] = None
    linkedin_url: Optional[str] = None
    linkedin_public_id: Optional[str] = None
    years_of_experience: Optional[float] = None
    months_of_experience: Optional[float] = None
    work_emails: list[str] = field(default_factory=list)
    personal_emails: list[str] = field(default_factory=list)
    phones: list[str] = field(default_factory=list)
    social_links: list[str] = field(default_factory=list)
    education: list[dict] = field(default_factory=list)
    certifications: list[Any] = field(default_factory=list)
    work_experience: list[dict] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    awards: list[str] = field(default_factory=list)
    publications: list[dict] = field(default_factory=list)
    patents: list[str] = field(default_factory=list)
    memberships: list[str] = field(default_factory=list)
    grad_year: Optional[int] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    content_hash: Optional[str] = None

    @property
    def company_name(self) -> Optional[str]:
        return (self.current_company or {}).get("name")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

    def to_summary_string(self) -> str:
        """Create a concise text summary for the assistant context."""
        parts = [f"{self.name or 'Unknown'} ({self.fit_percentage:g}% fit)"]
        if self.current_role:
            parts.append(f"Role: {self.current_role}")
        if self.company_name:
            parts.append(f"Company: {self.company_name}")
        if self.skills:
            parts.append(f"Skills: {', '.join(self.skills)}")
        parts.append(f"Experience: {self.experience_years:g} years")
        if self.location.name:
            parts.append(f"Location: {self.location.name}")
        if self.ai_summary and self.ai_summary != NO_SUMMARY:
            parts.append(f"Summary: {self.ai_summary[:500]}")
        return "\n".join(parts)
