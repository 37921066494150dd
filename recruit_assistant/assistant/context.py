"""Render a Snapshot as plain-text context for the chat assistant."""

from collections.abc import Sequence
from typing import Optional

from recruit_assistant.data.snapshot import Snapshot
from recruit_assistant.profiles.models import EnrichedProfile

MAX_JOBS = 10
TOP_N_PER_SECTION = 5


def _format_counts(entries: list[dict], key: str) -> str:
    return ", ".join(f"{e[key]} ({e['count']})" for e in entries[:TOP_N_PER_SECTION]) or "n/a"


def rank_profiles(snapshot: Snapshot, limit: int) -> list[EnrichedProfile]:
    return sorted(snapshot.profiles, key=lambda p: p.fit_percentage, reverse=True)[:limit]


def build_context(
    snapshot: Snapshot,
    max_profiles: int = 20,
    profiles: Optional[Sequence[EnrichedProfile]] = None,
) -> str:
    """Jobs, headline statistics and candidates as text.

    Without ``profiles`` the highest-fit candidates of the snapshot are used;
    otherwise the given profiles are rendered in their own order.
    """
    stats = snapshot.statistics
    sections = []

    overview = [
        "DATA OVERVIEW:",
        f"Total candidates: {stats.total_candidates}",
        f"Total jobs: {stats.total_jobs}",
        f"AI summaries: {stats.ai_summaries_count}",
        f"Average experience: {stats.average_experience:.1f} years",
        f"Top skills: {_format_counts(stats.skills_distribution, 'skill')}",
        f"Top locations: {_format_counts(stats.location_distribution, 'location')}",
        f"Top industries: {_format_counts(stats.industry_distribution, 'industry')}",
        "Experience: " + ", ".join(f"{e['range']}: {e['count']}" for e in stats.experience_distribution),
    ]
    sections.append("\n".join(overview))

    if stats.skill_demand_analysis:
        lines = ["SKILL DEMAND VS SUPPLY:"]
        for entry in stats.skill_demand_analysis[:10]:
            lines.append(
                f"- {entry.skill}: demand {entry.demand}, supply {entry.supply}, ratio {entry.ratio:.2f}"
            )
        sections.append("\n".join(lines))

    if snapshot.jobs:
        lines = [f"JOB INFORMATION ({min(len(snapshot.jobs), MAX_JOBS)} of {len(snapshot.jobs)}):"]
        for i, job in enumerate(snapshot.jobs[:MAX_JOBS], 1):
            lines.append(f"\n{i}. " + job.to_summary_string().replace("\n", "\n   "))
        sections.append("\n".join(lines))

    ranked = rank_profiles(snapshot, max_profiles) if profiles is None else list(profiles)[:max_profiles]
    if ranked:
        lines = [f"CANDIDATE PROFILES (Top {len(ranked)}):"]
        for i, profile in enumerate(ranked, 1):
            lines.append(f"\n{i}. " + profile.to_summary_string().replace("\n", "\n   "))
        sections.append("\n".join(lines))

    return "\n\n".join(sections)
