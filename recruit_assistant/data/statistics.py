"""Pure statistics over enriched profiles and jobs.

Counts are ordered by count descending. ``sorted`` is stable and Counter
keeps insertion order, so equal counts stay in first-seen order.
"""

from collections import Counter
from collections.abc import Iterable, Sequence

from recruit_assistant.data.snapshot import (
    CandidateSummary,
    LocationInsight,
    SkillDemand,
    Statistics,
)
from recruit_assistant.jobs.models import EnrichedJob
from recruit_assistant.profiles.models import EnrichedProfile

NOT_SPECIFIED = "Not specified"
UNKNOWN = "Unknown"

SKILLS_TOP_N = 20
CATEGORY_TOP_N = 15
TOP_CANDIDATES_LIMIT = 20
SKILL_DEMAND_TOP_N = 20
TOP_CANDIDATE_SKILLS = 8

# (label, inclusive upper bound in years); the last band is open-ended
EXPERIENCE_BANDS: tuple[tuple[str, float | None], ...] = (
    ("0-2 years", 2),
    ("3-5 years", 5),
    ("6-10 years", 10),
    ("11-15 years", 15),
    ("16+ years", None),
)


def ranked_counts(values: Iterable[str], key: str, limit: int | None = None) -> list[dict]:
    """Count values and return ``[{key: value, "count": n}, ...]`` most common first."""
    counts = Counter(values)
    ranked = sorted(counts.items(), key=lambda item: item[1], reverse=True)
    if limit is not None:
        ranked = ranked[:limit]
    return [{key: value, "count": count} for value, count in ranked]


def skills_distribution(profiles: Sequence[EnrichedProfile]) -> list[dict]:
    return ranked_counts((s for p in profiles for s in p.skills), "skill", SKILLS_TOP_N)


def location_distribution(profiles: Sequence[EnrichedProfile]) -> list[dict]:
    return ranked_counts(
        (p.location.name or p.location.country or UNKNOWN for p in profiles),
        "location",
        CATEGORY_TOP_N,
    )


def seniority_distribution(profiles: Sequence[EnrichedProfile]) -> list[dict]:
    return ranked_counts((p.seniority or NOT_SPECIFIED for p in profiles), "seniority")


def industry_distribution(profiles: Sequence[EnrichedProfile]) -> list[dict]:
    return ranked_counts((p.industry or NOT_SPECIFIED for p in profiles), "industry", CATEGORY_TOP_N)


def company_distribution(profiles: Sequence[EnrichedProfile]) -> list[dict]:
    return ranked_counts((p.company_name or NOT_SPECIFIED for p in profiles), "company", CATEGORY_TOP_N)


def experience_band(years: float) -> str:
    for label, upper in EXPERIENCE_BANDS:
        if upper is None or years <= upper:
            return label
    raise AssertionError("unreachable: last band is open-ended")


def experience_distribution(profiles: Sequence[EnrichedProfile]) -> list[dict]:
    counts = {label: 0 for label, _ in EXPERIENCE_BANDS}
    for profile in profiles:
        counts[experience_band(profile.experience_years or 0)] += 1
    return [{"range": label, "count": count} for label, count in counts.items()]


def average_experience(profiles: Sequence[EnrichedProfile]) -> float:
    if not profiles:
        return 0.0
    return sum(p.experience_years for p in profiles) / len(profiles)


def top_candidates(profiles: Sequence[EnrichedProfile], limit: int = TOP_CANDIDATES_LIMIT) -> list[CandidateSummary]:
    ranked = sorted(
        (p for p in profiles if p.fit_percentage > 0),
        key=lambda p: p.fit_percentage,
        reverse=True,
    )
    return [
        CandidateSummary(
            uuid=p.uuid,
            name=p.name,
            fit_percentage=p.fit_percentage,
            current_role=p.current_role,
            experience_years=p.experience_years,
            skills=list(p.skills[:TOP_CANDIDATE_SKILLS]),
            location=p.location.name,
            industry=p.industry,
            company=p.company_name,
        )
        for p in ranked[:limit]
    ]


def skill_demand_analysis(
    profiles: Sequence[EnrichedProfile],
    jobs: Sequence[EnrichedJob],
) -> list[SkillDemand]:
    """Compare how often jobs ask for a skill with how many profiles list it."""
    demand = Counter(skill for job in jobs for skill in job.skills)
    supply = Counter(skill for p in profiles for skill in p.skills)

    analysis = [
        SkillDemand(
            skill=skill,
            demand=count,
            supply=supply.get(skill, 0),
            ratio=count / max(supply.get(skill, 0), 1),
        )
        for skill, count in demand.items()
        if count > 0
    ]
    analysis.sort(key=lambda entry: entry.ratio, reverse=True)
    return analysis[:SKILL_DEMAND_TOP_N]


def location_insights(profiles: Sequence[EnrichedProfile]) -> dict[str, LocationInsight]:
    groups: dict[str, list[EnrichedProfile]] = {}
    for profile in profiles:
        groups.setdefault(profile.location.name or UNKNOWN, []).append(profile)

    insights = {}
    for location, members in groups.items():
        insights[location] = LocationInsight(
            count=len(members),
            avg_experience=sum(p.experience_years or 0 for p in members) / len(members),
            top_skills=ranked_counts((s for p in members for s in p.skills), "skill", 5),
            industries=ranked_counts((p.industry for p in members if p.industry), "industry", 3),
            companies=ranked_counts((p.company_name for p in members if p.company_name), "company", 3),
        )
    return insights


def compute_statistics(
    profiles: Sequence[EnrichedProfile],
    jobs: Sequence[EnrichedJob],
    ai_summaries_count: int = 0,
) -> Statistics:
    return Statistics(
        total_candidates=len(profiles),
        total_jobs=len(jobs),
        average_experience=average_experience(profiles),
        skills_distribution=skills_distribution(profiles),
        location_distribution=location_distribution(profiles),
        seniority_distribution=seniority_distribution(profiles),
        industry_distribution=industry_distribution(profiles),
        company_distribution=company_distribution(profiles),
        experience_distribution=experience_distribution(profiles),
        top_candidates=top_candidates(profiles),
        skill_demand_analysis=skill_demand_analysis(profiles, jobs),
        location_insights=location_insights(profiles),
        ai_summaries_count=ai_summaries_count,
    )
