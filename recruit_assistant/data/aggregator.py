"""Aggregation engine: raw records -> one enriched Snapshot."""

import logging
from datetime import datetime, timezone
from typing import Protocol

from recruit_assistant.data.snapshot import SearchableData, Snapshot
from recruit_assistant.data.statistics import compute_statistics
from recruit_assistant.errors import SourceUnavailable
from recruit_assistant.jobs.attributes import enrich_job
from recruit_assistant.jobs.models import EnrichedJob, RawJob
from recruit_assistant.profiles.enrichment import join_profiles
from recruit_assistant.profiles.models import EnrichedProfile, RawAISummary, RawProfile
from recruit_assistant.utils.text_processing import unique_values

logger = logging.getLogger("recruit_assistant.data.aggregator")


class RecordSource(Protocol):
    def fetch_all_profiles(self) -> list[RawProfile]: ...

    def fetch_all_ai_summaries(self) -> list[RawAISummary]: ...

    def fetch_all_jobs(self) -> list[RawJob]: ...


def _certification_label(entry) -> str | None:
    if isinstance(entry, dict):
        return entry.get("title") or entry.get("name")
    return entry


def build_searchable_data(
    profiles: list[EnrichedProfile],
    jobs: list[EnrichedJob],
) -> SearchableData:
    education = [e for p in profiles for e in p.education if isinstance(e, dict)]
    return SearchableData(
        skills=unique_values(s for p in profiles for s in p.skills),
        locations=unique_values(p.location.name for p in profiles),
        industries=unique_values(p.industry for p in profiles),
        companies=unique_values(p.company_name for p in profiles),
        job_titles=unique_values(p.current_role for p in profiles),
        seniority_levels=unique_values(p.seniority for p in profiles),
        functional_areas=unique_values(p.functional_area for p in profiles),
        certifications=unique_values(_certification_label(c) for p in profiles for c in p.certifications),
        languages=unique_values(lang for p in profiles for lang in p.languages),
        education_degrees=unique_values(e.get("degree_name") or e.get("degree") for e in education),
        education_fields=unique_values(e.get("field_of_study") or e.get("field") for e in education),
        job_skills=unique_values(s for j in jobs for s in j.skills),
        job_locations=unique_values(j.location for j in jobs),
        job_industries=unique_values(j.industry for j in jobs),
        job_companies=unique_values(j.company for j in jobs),
        employment_types=unique_values(j.employment_type for j in jobs),
    )


def build_snapshot(source: RecordSource) -> Snapshot:
    """Load every collection and derive a complete Snapshot.

    Raises SourceUnavailable if any step fails; no partial snapshot is
    ever returned.
    """
    logger.info("Loading data from record store...")
    try:
        raw_profiles = source.fetch_all_profiles()
        logger.info("Loaded %d profiles", len(raw_profiles))
        raw_summaries = source.fetch_all_ai_summaries()
        logger.info("Loaded %d AI summaries", len(raw_summaries))
        raw_jobs = source.fetch_all_jobs()
        logger.info("Loaded %d job entries", len(raw_jobs))

        profiles = join_profiles(raw_profiles, raw_summaries)
        jobs = [enrich_job(job) for job in raw_jobs]

        snapshot = Snapshot(
            profiles=tuple(profiles),
            jobs=tuple(jobs),
            ai_summaries=tuple(raw_summaries),
            statistics=compute_statistics(profiles, jobs, ai_summaries_count=len(raw_summaries)),
            searchable_data=build_searchable_data(profiles, jobs),
            last_updated=datetime.now(timezone.utc),
        )
    except Exception as e:
        logger.error("Error loading data: %s: %s", type(e).__name__, e)
        raise SourceUnavailable(e) from e

    logger.info(
        "Data loaded successfully: %d profiles, %d jobs",
        snapshot.profiles_count, snapshot.jobs_count,
    )
    return snapshot
