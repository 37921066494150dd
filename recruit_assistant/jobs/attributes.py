"""Resolve a job's attribute bag into canonical fields.

Each canonical field lists its candidate keys in priority order; the first
non-empty candidate wins, otherwise the field default is used. Reordering
the candidates changes the output for jobs that carry several synonyms.
"""

from typing import Any, NamedTuple

from recruit_assistant.jobs.models import EnrichedJob, RawJob
from recruit_assistant.utils.text_processing import as_list, is_blank

NOT_SPECIFIED = "Not specified"


class AttributeField(NamedTuple):
    name: str
    candidates: tuple[str, ...]
    default: Any
    is_list: bool = False


JOB_ATTRIBUTE_FIELDS: tuple[AttributeField, ...] = (
    AttributeField("title", ("title", "job_title"), "Unknown Position"),
    AttributeField("company", ("company", "company_name"), "Unknown Company"),
    AttributeField("skills", ("skills", "required_skills"), (), is_list=True),
    AttributeField("experience_level", ("experience_level", "seniority"), NOT_SPECIFIED),
    AttributeField("requirements", ("requirements", "qualifications"), (), is_list=True),
    AttributeField("location", ("location", "job_location"), NOT_SPECIFIED),
    AttributeField("industry", ("industry", "sector"), NOT_SPECIFIED),
    AttributeField("employment_type", ("employment_type", "type"), NOT_SPECIFIED),
    AttributeField("salary_range", ("salary_range", "compensation"), NOT_SPECIFIED),
    AttributeField("remote_policy", ("remote_policy", "work_model"), NOT_SPECIFIED),
    AttributeField("description", ("description", "summary"), "No description available"),
    AttributeField("benefits", ("benefits", "perks"), (), is_list=True),
    AttributeField("company_size", ("company_size",), NOT_SPECIFIED),
    AttributeField("company_industry", ("company_industry", "sector"), NOT_SPECIFIED),
)


def resolve_attribute(attributes: dict, field: AttributeField) -> Any:
    """Return the first non-empty candidate value, or the field default."""
    for key in field.candidates:
        value = attributes.get(key)
        if is_blank(value):
            continue
        if field.is_list:
            values = as_list(value)
            if values:
                return values
            continue
        return value
    return list(field.default) if field.is_list else field.default


def resolve_job_id(job: RawJob) -> str | None:
    return job.id or job.job_id


def enrich_job(job: RawJob) -> EnrichedJob:
    attributes = dict(job.attributes or {})
    resolved = {f.name: resolve_attribute(attributes, f) for f in JOB_ATTRIBUTE_FIELDS}
    # only plain string skills are counted
    resolved["skills"] = [s.strip() for s in resolved["skills"] if isinstance(s, str) and s.strip()]
    return EnrichedJob(
        id=resolve_job_id(job),
        uuid=job.uuid or job.id or job.job_id,
        job_flow_id=job.job_flow_id,
        attributes=attributes,
        created_at=job.created_at,
        updated_at=job.updated_at,
        **resolved,
    )
