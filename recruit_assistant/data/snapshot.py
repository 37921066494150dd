"""Snapshot aggregate: enriched collections plus derived statistics."""

from dataclasses import asdict, dataclass, field
from datetime import datetime

from recruit_assistant.jobs.models import EnrichedJob
from recruit_assistant.profiles.models import EnrichedProfile, RawAISummary

DATA_VERSION = "2.0"


@dataclass(frozen=True)
class CandidateSummary:
    """Reduced projection of a profile used in the top-candidate ranking."""

    uuid: str
    name: str
    fit_percentage: float
    current_role: str | None
    experience_years: float
    skills: list[str]
    location: str | None
    industry: str | None
    company: str | None


@dataclass(frozen=True)
class SkillDemand:
    skill: str
    demand: int
    supply: int
    ratio: float


@dataclass(frozen=True)
class LocationInsight:
    count: int
    avg_experience: float
    top_skills: list[dict]
    industries: list[dict]
    companies: list[dict]


@dataclass(frozen=True)
class Statistics:
    total_candidates: int
    total_jobs: int
    average_experience: float
    skills_distribution: list[dict]
    location_distribution: list[dict]
    seniority_distribution: list[dict]
    industry_distribution: list[dict]
    company_distribution: list[dict]
    experience_distribution: list[dict]
    top_candidates: list[CandidateSummary]
    skill_demand_analysis: list[SkillDemand]
    location_insights: dict[str, LocationInsight]
    ai_summaries_count: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class SearchableData:
    """Distinct values available for search suggestions and filters."""

    skills: list[str] = field(default_factory=list)
    locations: list[str] = field(default_factory=list)
    industries: list[str] = field(default_factory=list)
    companies: list[str] = field(default_factory=list)
    job_titles: list[str] = field(default_factory=list)
    seniority_levels: list[str] = field(default_factory=list)
    functional_areas: list[str] = field(default_factory=list)
    certifications: list[str] = field(default_factory=list)
    languages: list[str] = field(default_factory=list)
    education_degrees: list[str] = field(default_factory=list)
    education_fields: list[str] = field(default_factory=list)
    job_skills: list[str] = field(default_factory=list)
    job_locations: list[str] = field(default_factory=list)
    job_industries: list[str] = field(default_factory=list)
    job_companies: list[str] = field(default_factory=list)
    employment_types: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class Snapshot:
    """One fully built, read-only view of the record store."""

    profiles: tuple[EnrichedProfile, ...]
    jobs: tuple[EnrichedJob, ...]
    ai_summaries: tuple[RawAISummary, ...]
    statistics: Statistics
    searchable_data: SearchableData
    last_updated: datetime
    data_version: str = DATA_VERSION

    @property
    def profiles_count(self) -> int:
        return len(self.profiles)

    @property
    def jobs_count(self) -> int:
        return len(self.jobs)

    @property
    def ai_summaries_count(self) -> int:
        return len(self.ai_summaries)

    def overview(self) -> dict:
        return {
            "profiles_count": self.profiles_count,
            "jobs_count": self.jobs_count,
            "ai_summaries_count": self.ai_summaries_count,
            "statistics": self.statistics.to_dict(),
            "last_updated": self.last_updated,
            "data_version": self.data_version,
        }
