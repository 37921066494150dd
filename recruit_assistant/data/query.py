"""Text search, structured filters and lookups over a Snapshot."""

import logging
from dataclasses import asdict, dataclass, field
from numbers import Real
from typing import Optional

from recruit_assistant.data.snapshot import Snapshot
from recruit_assistant.errors import InvalidFilter
from recruit_assistant.jobs.models import EnrichedJob
from recruit_assistant.profiles.models import EnrichedProfile
from recruit_assistant.utils.text_processing import contains_ci

logger = logging.getLogger("recruit_assistant.data.query")


@dataclass(frozen=True)
class SearchFilters:
    skills: tuple[str, ...] = ()
    experience_min: Optional[float] = None
    experience_max: Optional[float] = None
    location: Optional[str] = None
    industry: Optional[str] = None
    seniority: Optional[str] = None

    @classmethod
    def from_dict(cls, raw: Optional[dict]) -> "SearchFilters":
        """Validate caller input. Raises InvalidFilter on malformed values."""
        if raw is None:
            return cls()
        if not isinstance(raw, dict):
            raise InvalidFilter("filters must be an object")

        unknown = set(raw) - {f for f in cls.__dataclass_fields__}
        if unknown:
            raise InvalidFilter(f"unknown filter(s): {', '.join(sorted(unknown))}")

        skills = raw.get("skills")
        if skills is None:
            skills = ()
        elif not isinstance(skills, (list, tuple)) or not all(isinstance(s, str) for s in skills):
            raise InvalidFilter("skills must be a list of strings")

        bounds = {}
        for key in ("experience_min", "experience_max"):
            value = raw.get(key)
            if value is None:
                bounds[key] = None
                continue
            if isinstance(value, bool) or not isinstance(value, Real):
                raise InvalidFilter(f"{key} must be a number")
            if value < 0:
                raise InvalidFilter(f"{key} must not be negative")
            bounds[key] = float(value)

        if (
            bounds["experience_min"] is not None
            and bounds["experience_max"] is not None
            and bounds["experience_min"] > bounds["experience_max"]
        ):
            raise InvalidFilter("experience_min is greater than experience_max")

        text = {}
        for key in ("location", "industry", "seniority"):
            value = raw.get(key)
            if value is not None and not isinstance(value, str):
                raise InvalidFilter(f"{key} must be a string")
            text[key] = value or None

        return cls(
            skills=tuple(s for s in skills if s.strip()),
            **bounds,
            **text,
        )

    def to_dict(self) -> dict:
        data = asdict(self)
        data["skills"] = list(self.skills)
        return {k: v for k, v in data.items() if v not in (None, [])}


@dataclass
class SearchResult:
    results: list[EnrichedProfile]
    total: int
    query: str = ""
    filters: dict = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "results": [p.to_dict() for p in self.results],
            "total": self.total,
            "query": self.query,
            "filters": self.filters,
        }


def matches_text(profile: EnrichedProfile, query: str) -> bool:
    """Whole query as one substring against name, role, industry, location, skills."""
    return (
        contains_ci(profile.name, query)
        or contains_ci(profile.current_role, query)
        or any(contains_ci(skill, query) for skill in profile.skills)
        or contains_ci(profile.industry, query)
        or contains_ci(profile.location.name, query)
    )


def matches_skills(profile: EnrichedProfile, skills: tuple[str, ...]) -> bool:
    """Any filter skill against any profile skill, substring in either direction."""
    return any(
        contains_ci(profile_skill, wanted) or contains_ci(wanted, profile_skill)
        for wanted in skills
        for profile_skill in profile.skills
    )


def matches_filters(profile: EnrichedProfile, filters: SearchFilters) -> bool:
    if filters.skills and not matches_skills(profile, filters.skills):
        return False
    if filters.experience_min is not None and profile.experience_years < filters.experience_min:
        return False
    if filters.experience_max is not None and profile.experience_years > filters.experience_max:
        return False
    if filters.location and not (
        contains_ci(profile.location.name, filters.location)
        or contains_ci(profile.location.country, filters.location)
    ):
        return False
    if filters.industry and not contains_ci(profile.industry, filters.industry):
        return False
    if filters.seniority and not contains_ci(profile.seniority, filters.seniority):
        return False
    return True


def search_profiles(
    snapshot: Snapshot,
    query: Optional[str] = "",
    filters: SearchFilters | dict | None = None,
) -> SearchResult:
    if not isinstance(filters, SearchFilters):
        filters = SearchFilters.from_dict(filters)
    if query is not None and not isinstance(query, str):
        raise InvalidFilter("query must be a string")
    query = query or ""

    results = [
        p for p in snapshot.profiles
        if (not query or matches_text(p, query)) and matches_filters(p, filters)
    ]
    # new list: the snapshot's own ordering is never touched
    results = sorted(results, key=lambda p: p.fit_percentage, reverse=True)

    logger.debug("Search %r %s -> %d results", query, filters.to_dict(), len(results))
    return SearchResult(results=results, total=len(results), query=query, filters=filters.to_dict())


def find_profile(snapshot: Snapshot, uuid: str) -> Optional[EnrichedProfile]:
    return next((p for p in snapshot.profiles if p.uuid == uuid), None)


def find_job(snapshot: Snapshot, job_id: str) -> Optional[EnrichedJob]:
    job = next((j for j in snapshot.jobs if j.id == job_id), None)
    if job is None:
        job = next((j for j in snapshot.jobs if j.uuid == job_id), None)
    return job

