"""Tests for the SQLAlchemy record store."""

import os
import tempfile

import pytest

from recruit_assistant.data.aggregator import build_snapshot
from recruit_assistant.models import create_session_factory
from recruit_assistant.storage.record_store import RecordStore


@pytest.fixture
def store():
    """Create a temporary SQLite-backed store for testing."""
    with tempfile.TemporaryDirectory() as tmpdir:
        factory = create_session_factory(f"sqlite:///{os.path.join(tmpdir, 'test.db')}")
        yield RecordStore(factory)
        factory.kw["bind"].dispose()


@pytest.fixture
def payload():
    return {
        "profiles": [
            {
                "uuid": "p-1",
                "_id": "65f0c0ffee",
                "full_name": "Dana Park",
                "location_name": "Toronto",
                "location_raw": "Toronto, Ontario, Canada",
                "skills": ["Go", "Postgres"],
                "years_of_experience": 6,
                "current_company": {"name": "Northwind"},
                "createdAt": "2024-03-01T12:00:00Z",
            },
            {"uuid": "p-2", "first_name": "Eli", "months_of_experience": 18},
        ],
        "ai_summaries": [
            {"uuid": "p-1", "fit_percentage": 77, "matched": {"full_profile": {"summary": "Go specialist"}}},
        ],
        "jobs": [
            {"id": "job-a", "attributes": {"title": "SRE", "skills": ["Go"]}},
        ],
    }


class TestRecordStore:
    def test_empty_store(self, store):
        assert store.fetch_all_profiles() == []
        assert store.fetch_all_ai_summaries() == []
        assert store.fetch_all_jobs() == []

    def test_import_and_fetch(self, store, payload):
        counts = store.import_documents(payload)
        assert counts == {"profiles": 2, "ai_summaries": 1, "jobs": 1}

        profiles = store.fetch_all_profiles()
        assert [p.uuid for p in profiles] == ["p-1", "p-2"]
        assert profiles[0].skills == ["Go", "Postgres"]
        assert profiles[0].current_company == {"name": "Northwind"}
        assert profiles[0].created_at.year == 2024

        summaries = store.fetch_all_ai_summaries()
        assert summaries[0].fit_percentage == 77
        assert summaries[0].summary_text == "Go specialist"

        jobs = store.fetch_all_jobs()
        assert jobs[0].id == "job-a"
        assert jobs[0].attributes["title"] == "SRE"

    def test_profiles_upserted_by_uuid(self, store, payload):
        store.import_documents(payload)
        store.import_documents({"profiles": [{"uuid": "p-2", "full_name": "Eli Stone"}]})
        profiles = store.fetch_all_profiles()
        assert len(profiles) == 2
        assert profiles[1].full_name == "Eli Stone"
        assert profiles[1].first_name == "Eli"

    def test_duplicate_uuid_in_one_payload(self, store):
        store.import_documents({"profiles": [
            {"uuid": "p-9", "full_name": "First"},
            {"uuid": "p-9", "full_name": "Second"},
        ]})
        profiles = store.fetch_all_profiles()
        assert [p.full_name for p in profiles] == ["Second"]

    def test_missing_uuid_rolls_back(self, store):
        with pytest.raises(ValueError):
            store.import_documents({"profiles": [{"uuid": "ok"}, {"full_name": "No Id"}]})
        assert store.fetch_all_profiles() == []

    def test_snapshot_from_store(self, store, payload):
        store.import_documents(payload)
        snapshot = build_snapshot(store)
        dana = next(p for p in snapshot.profiles if p.uuid == "p-1")
        assert dana.fit_percentage == 77
        assert dana.location.country == "Canada"
        assert dana.company_name == "Northwind"
        eli = next(p for p in snapshot.profiles if p.uuid == "p-2")
        assert eli.experience_years == 1.5
        assert snapshot.jobs[0].title == "SRE"
