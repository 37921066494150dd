"""Join a raw profile with its AI summary into an EnrichedProfile."""

import logging
import math
from typing import Optional

from recruit_assistant.profiles.models import (
    NO_SUMMARY,
    EnrichedProfile,
    ProfileContact,
    ProfileLocation,
    RawAISummary,
    RawProfile,
)
from recruit_assistant.utils.text_processing import as_list

logger = logging.getLogger("recruit_assistant.profiles")


def display_name(profile: RawProfile) -> str:
    if profile.full_name:
        return profile.full_name
    return f"{profile.first_name or ''} {profile.last_name or ''}".strip()


def derive_country(location_raw: Optional[str]) -> Optional[str]:
    """Return the trimmed token after the last comma, or None.

    "Austin, TX, USA" -> "USA"; "Remote" -> None.
    """
    if not location_raw or "," not in location_raw:
        return None
    country = location_raw.rsplit(",", 1)[1].strip()
    return country or None


def experience_years(profile: RawProfile) -> float:
    """Explicit years, else months / 12, else 0. Never negative."""
    if profile.years_of_experience:
        years = float(profile.years_of_experience)
    elif profile.months_of_experience:
        years = float(profile.months_of_experience) / 12
    else:
        years = 0.0
    return max(years, 0.0)


def clamp_fit(value) -> float:
    """Fit percentage bounded to [0, 100]; missing, NaN or unparseable values are 0."""
    if value is None:
        return 0.0
    try:
        fit = float(value)
    except (TypeError, ValueError):
        logger.warning("Unparseable fit_percentage %r - treated as 0", value)
        return 0.0
    if math.isnan(fit):
        logger.warning("NaN fit_percentage - treated as 0")
        return 0.0
    return min(max(fit, 0.0), 100.0)


def enrich_profile(profile: RawProfile, summary: Optional[RawAISummary] = None) -> EnrichedProfile:
    """Build the enriched view of one profile.

    A missing summary yields fit 0, the "no summary" sentinel and an empty
    analysis object.
    """
    name = display_name(profile)
    skills = [s.strip() for s in as_list(profile.skills) if isinstance(s, str) and s.strip()]

    if summary is not None:
        ai_summary = summary.summary_text
        fit_percentage = clamp_fit(summary.fit_percentage)
        ai_analysis = dict(summary.matched or {})
    else:
        ai_summary = NO_SUMMARY
        fit_percentage = 0.0
        ai_analysis = {}

    return EnrichedProfile(
        uuid=profile.uuid,
        id=profile.uuid,
        name=name,
        display_name=name,
        first_name=profile.first_name,
        last_name=profile.last_name,
        full_name=profile.full_name,
        experience_years=experience_years(profile),
        experience_months=max(float(profile.months_of_experience or 0), 0.0),
        ai_summary=ai_summary,
        fit_percentage=fit_percentage,
        ai_analysis=ai_analysis,
        skills=skills,
        skills_count=len(skills),
        location=ProfileLocation(
            name=profile.location_name,
            code=profile.location_code,
            raw=profile.location_raw,
            country=derive_country(profile.location_raw),
        ),
        location_name=profile.location_name,
        location_code=profile.location_code,
        location_raw=profile.location_raw,
        current_role=profile.job_title or profile.current_title,
        job_title=profile.job_title,
        current_title=profile.current_title,
        industry=profile.current_industry,
        seniority=profile.seniority_level,
        functional_area=profile.functional_area,
        current_company=dict(profile.current_company or {}),
        contact=ProfileContact(
            emails=[*(profile.work_emails or []), *(profile.personal_emails or [])],
            phones=list(profile.phones or []),
            linkedin=profile.linkedin_url,
            social=list(profile.social_links or []),
        ),
        summary=profile.summary,
        gender=profile.gender,
        nationality=profile.nationality,
        picture_url=profile.picture_url,
        linkedin_url=profile.linkedin_url,
        linkedin_public_id=profile.linkedin_public_id,
        years_of_experience=profile.years_of_experience,
        months_of_experience=profile.months_of_experience,
        work_emails=list(profile.work_emails or []),
        personal_emails=list(profile.personal_emails or []),
        phones=list(profile.phones or []),
        social_links=list(profile.social_links or []),
        education=list(profile.education or []),
        certifications=list(profile.certifications or []),
        work_experience=list(profile.experiences or []),
        languages=list(profile.languages or []),
        awards=list(profile.awards or []),
        publications=list(profile.publications or []),
        patents=list(profile.patents or []),
        memberships=list(profile.memberships or []),
        grad_year=profile.grad_year,
        created_at=profile.created_at,
        updated_at=profile.updated_at,
        content_hash=profile.content_hash,
    )


def join_profiles(
    profiles: list[RawProfile],
    summaries: list[RawAISummary],
) -> list[EnrichedProfile]:
    """Left join profiles to summaries on uuid; unmatched summaries are ignored."""
    by_uuid: dict[str, RawAISummary] = {}
    for summary in summaries:
        by_uuid.setdefault(summary.uuid, summary)
    return [enrich_profile(p, by_uuid.get(p.uuid)) for p in profiles]
