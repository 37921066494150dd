"""Shared fixtures: an in-memory record source and a controllable clock."""

import pytest

from recruit_assistant.jobs.models import RawJob
from recruit_assistant.profiles.models import RawAISummary, RawProfile


class FakeSource:
    """Record source backed by plain lists; set ``fail`` to simulate an outage."""

    def __init__(self, profiles=None, summaries=None, jobs=None):
        self.profiles = list(profiles or [])
        self.summaries = list(summaries or [])
        self.jobs = list(jobs or [])
        self.fail: Exception | None = None
        self.profile_fetches = 0

    def fetch_all_profiles(self):
        self.profile_fetches += 1
        if self.fail:
            raise self.fail
        return list(self.profiles)

    def fetch_all_ai_summaries(self):
        return list(self.summaries)

    def fetch_all_jobs(self):
        return list(self.jobs)


class FakeClock:
    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float):
        self.now += seconds


def make_profile(uuid="p1", **kwargs) -> RawProfile:
    return RawProfile(uuid=uuid, **kwargs)


def make_job(job_id="job-1", **attributes) -> RawJob:
    return RawJob(id=job_id, attributes=attributes)


@pytest.fixture
def sample_profiles():
    return [
        make_profile(
            "a1",
            first_name="Ann",
            last_name="Lee",
            location_name="Austin",
            location_raw="Austin, TX, USA",
            skills=["Python", "SQL"],
            years_of_experience=4,
            current_industry="Software",
            seniority_level="Mid",
            job_title="Backend Developer",
            current_company={"name": "Acme"},
            work_emails=["ann@acme.com"],
            personal_emails=["ann@example.com"],
        ),
        make_profile(
            "b2",
            full_name="Bob Stone",
            location_name="Berlin",
            location_raw="Berlin, Germany",
            skills=["Java", "Kubernetes", "Python"],
            months_of_experience=30,
            current_industry="Finance",
            seniority_level="Senior",
            current_title="Platform Engineer",
            current_company={"name": "Bank"},
        ),
        make_profile(
            "c3",
            full_name="Cara Diaz",
            location_name="Austin",
            location_raw="Austin",
            skills=["React", "JavaScript"],
            years_of_experience=12,
            current_industry="Software",
            seniority_level="Senior",
            job_title="Frontend Lead",
            current_company={"name": "Acme"},
        ),
    ]


@pytest.fixture
def sample_summaries():
    return [
        RawAISummary(uuid="b2", fit_percentage=85, matched={"full_profile": {"summary": "Strong backend engineer"}}),
        RawAISummary(uuid="c3", fit_percentage=60),
        RawAISummary(uuid="zz-orphan", fit_percentage=99),
    ]


@pytest.fixture
def sample_jobs():
    return [
        make_job("job-1", title="Backend Engineer", company="Acme", skills=["Python", "Go"]),
        RawJob(job_id="job-2", attributes={
            "job_title": "Data Engineer",
            "required_skills": ["Python", "SQL"],
            "sector": "Finance",
        }),
    ]


@pytest.fixture
def source(sample_profiles, sample_summaries, sample_jobs):
    return FakeSource(sample_profiles, sample_summaries, sample_jobs)


@pytest.fixture
def clock():
    return FakeClock()
