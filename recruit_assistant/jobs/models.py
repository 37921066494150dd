"""Job data models."""

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class RawJob:
    """A job document with its open-ended attribute bag."""

    id: Optional[str] = None
    job_id: Optional[str] = None
    uuid: Optional[str] = None
    job_flow_id: Optional[str] = None
    attributes: dict = field(default_factory=dict)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_dict(cls, doc: dict) -> "RawJob":
        return cls(
            id=doc.get("id"),
            job_id=doc.get("job_id"),
            uuid=doc.get("uuid"),
            job_flow_id=doc.get("job_flow_id"),
            attributes=dict(doc.get("attributes") or {}),
            created_at=doc.get("created_at") or doc.get("createdAt"),
            updated_at=doc.get("updated_at") or doc.get("updatedAt"),
        )


@dataclass(frozen=True)
class EnrichedJob:
    """A job with every synonym group resolved to one canonical field."""

    id: Optional[str]
    uuid: Optional[str]
    job_flow_id: Optional[str]
    attributes: dict
    title: str
    company: str
    skills: list[str]
    experience_level: str
    requirements: list[str]
    location: str
    industry: str
    employment_type: str
    salary_range: str
    remote_policy: str
    description: str
    benefits: list[str]
    company_size: str
    company_industry: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return asdict(self)

    def to_summary_string(self) -> str:
        """Create a concise text summary for the assistant context."""
        lines = [
            f"Title: {self.title}",
            f"Company: {self.company}",
            f"Location: {self.location}",
            f"Experience Level: {self.experience_level}",
        ]
        if self.skills:
            lines.append(f"Required Skills: {', '.join(self.skills)}")
        if self.requirements:
            lines.append(f"Requirements: {', '.join(str(r) for r in self.requirements)}")
        if self.employment_type != "Not specified":
            lines.append(f"Employment Type: {self.employment_type}")
        if self.remote_policy != "Not specified":
            lines.append(f"Remote Policy: {self.remote_policy}")
        return "\n".join(lines)
