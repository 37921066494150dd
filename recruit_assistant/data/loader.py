"""DataLoader facade used by the web routes and the assistant."""

import logging
from typing import Optional

from recruit_assistant.config import AppConfig
from recruit_assistant.data.aggregator import RecordSource, build_snapshot
from recruit_assistant.data.cache import DEFAULT_TTL_SECONDS, SnapshotCache
from recruit_assistant.data.query import SearchFilters, SearchResult, find_job, find_profile, search_profiles
from recruit_assistant.data.snapshot import SearchableData, Snapshot, Statistics
from recruit_assistant.errors import InvalidFilter
from recruit_assistant.jobs.models import EnrichedJob
from recruit_assistant.profiles.models import EnrichedProfile

logger = logging.getLogger("recruit_assistant.data")


class DataLoader:
    """Cached access to the enriched recruitment data."""

    def __init__(self, source: RecordSource, cache: Optional[SnapshotCache] = None,
                 ttl_seconds: float = DEFAULT_TTL_SECONDS):
        self.source = source
        self.cache = cache or SnapshotCache(lambda: build_snapshot(source), ttl_seconds=ttl_seconds)

    @classmethod
    def from_config(cls, source: RecordSource, config: AppConfig) -> "DataLoader":
        return cls(source, ttl_seconds=config.cache.ttl_seconds)

    def get_snapshot(self) -> Snapshot:
        return self.cache.get()

    def refresh(self) -> Snapshot:
        return self.cache.refresh()

    def search(self, query: Optional[str] = "", filters: SearchFilters | dict | None = None) -> SearchResult:
        # validate before touching the cache so bad input never triggers a rebuild
        if not isinstance(filters, SearchFilters):
            filters = SearchFilters.from_dict(filters)
        if query is not None and not isinstance(query, str):
            raise InvalidFilter("query must be a string")
        return search_profiles(self.get_snapshot(), query, filters)

    def get_profile(self, uuid: str) -> Optional[EnrichedProfile]:
        return find_profile(self.get_snapshot(), uuid)

    def get_job(self, job_id: str) -> Optional[EnrichedJob]:
        return find_job(self.get_snapshot(), job_id)

    def list_jobs(self) -> list[EnrichedJob]:
        return list(self.get_snapshot().jobs)

    def get_statistics(self) -> Statistics:
        return self.get_snapshot().statistics

    def get_searchable_data(self) -> SearchableData:
        return self.get_snapshot().searchable_data

    def get_overview(self) -> dict:
        return self.get_snapshot().overview()
