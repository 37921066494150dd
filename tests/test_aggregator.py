"""Tests for building a snapshot out of raw records."""

import pytest
from conftest import FakeSource, make_job, make_profile

from recruit_assistant.data.aggregator import build_searchable_data, build_snapshot
from recruit_assistant.data.loader import DataLoader
from recruit_assistant.errors import InvalidFilter, SourceUnavailable
from recruit_assistant.jobs.attributes import enrich_job
from recruit_assistant.profiles.enrichment import enrich_profile
from recruit_assistant.profiles.models import RawAISummary


class TestBuildSnapshot:
    def test_counts(self, source):
        snapshot = build_snapshot(source)
        assert snapshot.profiles_count == 3
        assert snapshot.jobs_count == 2
        assert snapshot.ai_summaries_count == 3
        assert snapshot.statistics.total_candidates == snapshot.profiles_count
        assert snapshot.statistics.total_jobs == snapshot.jobs_count
        assert snapshot.data_version == "2.0"

    def test_experience_buckets_cover_every_profile(self, source):
        snapshot = build_snapshot(source)
        total = sum(b["count"] for b in snapshot.statistics.experience_distribution)
        assert total == snapshot.profiles_count

    def test_every_demand_entry_is_demanded(self, source):
        snapshot = build_snapshot(source)
        analysis = snapshot.statistics.skill_demand_analysis
        assert analysis
        assert all(a.demand > 0 for a in analysis)
        # every ratio is 1 here, so first-seen order decides
        assert [a.skill for a in analysis] == ["Python", "Go", "SQL"]

    def test_rebuild_is_deterministic(self, source):
        first = build_snapshot(source)
        second = build_snapshot(source)
        assert first.statistics == second.statistics
        assert first.searchable_data == second.searchable_data

    def test_empty_store(self):
        snapshot = build_snapshot(FakeSource())
        assert snapshot.profiles_count == 0
        assert snapshot.statistics.average_experience == 0
        assert snapshot.statistics.skill_demand_analysis == []

    def test_failure_is_wrapped(self, source):
        source.fail = ConnectionError("connection refused")
        with pytest.raises(SourceUnavailable) as exc_info:
            build_snapshot(source)
        assert str(exc_info.value) == "failed to load data: connection refused"
        assert isinstance(exc_info.value.__cause__, ConnectionError)
        assert exc_info.value.cause is source.fail

    def test_malformed_fit_does_not_fail_the_load(self, source):
        source.summaries.append(RawAISummary(uuid="a1", fit_percentage="85%"))
        snapshot = build_snapshot(source)
        ann = next(p for p in snapshot.profiles if p.uuid == "a1")
        assert ann.fit_percentage == 0
        assert all(0 <= p.fit_percentage <= 100 for p in snapshot.profiles)

    def test_overview(self, source):
        overview = build_snapshot(source).overview()
        assert overview["profiles_count"] == 3
        assert overview["jobs_count"] == 2
        assert overview["statistics"]["total_candidates"] == 3
        assert "last_updated" in overview


class TestSearchableData:
    def test_distinct_values(self, source):
        data = build_snapshot(source).searchable_data
        assert data.skills == ["Python", "SQL", "Java", "Kubernetes", "React", "JavaScript"]
        assert data.locations == ["Austin", "Berlin"]
        assert data.companies == ["Acme", "Bank"]
        assert data.seniority_levels == ["Mid", "Senior"]
        assert data.job_skills == ["Python", "Go", "SQL"]
        assert data.job_companies == ["Acme", "Unknown Company"]

    def test_education_and_certifications(self):
        profile = enrich_profile(make_profile(
            "x",
            education=[
                {"degree_name": "BSc", "field_of_study": "Physics"},
                {"degree": "MSc", "field": "Maths"},
            ],
            certifications=[{"title": "AWS Architect"}, {"name": "CKA"}],
            languages=["English", "German", "English"],
        ))
        data = build_searchable_data([profile], [])
        assert data.education_degrees == ["BSc", "MSc"]
        assert data.education_fields == ["Physics", "Maths"]
        assert data.certifications == ["AWS Architect", "CKA"]
        assert data.languages == ["English", "German"]

    def test_job_fields(self):
        job = enrich_job(make_job("j9", location="Remote", employment_type="Full-time"))
        data = build_searchable_data([], [job])
        assert data.employment_types == ["Full-time"]
        assert data.job_locations == ["Remote"]


class TestDataLoader:
    def test_search_validates_before_loading(self, source):
        loader = DataLoader(source)
        with pytest.raises(InvalidFilter):
            loader.search("python", {"experience_min": "lots"})
        assert source.profile_fetches == 0

    def test_views_share_one_snapshot(self, source):
        loader = DataLoader(source)
        loader.get_statistics()
        loader.get_searchable_data()
        loader.get_profile("a1")
        loader.list_jobs()
        assert source.profile_fetches == 1

    def test_refresh_rebuilds(self, source):
        loader = DataLoader(source)
        first = loader.get_snapshot()
        assert loader.refresh() is not first
        assert source.profile_fetches == 2

    def test_lookups(self, source):
        loader = DataLoader(source)
        assert loader.get_profile("c3").name == "Cara Diaz"
        assert loader.get_job("job-2").company == "Unknown Company"
        assert loader.get_profile("nope") is None
