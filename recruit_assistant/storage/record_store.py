"""Record store adapter: fetch-all reads over the profile, summary and job tables."""

import logging
from datetime import datetime
from typing import Any

from sqlalchemy import inspect
from sqlalchemy.orm import Session, sessionmaker

from recruit_assistant.jobs.models import RawJob
from recruit_assistant.models import JobInfo, Profile, ProfileAISummary
from recruit_assistant.profiles.models import RawAISummary, RawProfile

logger = logging.getLogger("recruit_assistant.storage")

_DATETIME_FIELDS = ("created_at", "updated_at")


def _parse_datetime(value: Any) -> datetime | None:
    if value is None or isinstance(value, datetime):
        return value
    if isinstance(value, str):
        text = value.strip()
        if text.endswith("Z"):
            text = text[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(text)
        except ValueError:
            logger.warning("Unparseable timestamp %r - stored as NULL", value)
    return None


def _columns(model) -> set[str]:
    return {attr.key for attr in inspect(model).column_attrs if attr.key != "row_id"}


def _row_kwargs(model, doc: dict) -> dict:
    doc = dict(doc)
    # Mongo-style camelCase timestamps
    doc.setdefault("created_at", doc.get("createdAt"))
    doc.setdefault("updated_at", doc.get("updatedAt"))
    allowed = _columns(model)
    kwargs = {k: v for k, v in doc.items() if k in allowed and v is not None}
    for key in _DATETIME_FIELDS:
        if key in kwargs:
            kwargs[key] = _parse_datetime(kwargs[key])
    return kwargs


class RecordStore:
    """Reads raw records out of the database.

    Errors from the database driver propagate unchanged; the aggregation
    engine wraps them.
    """

    def __init__(self, session_factory: sessionmaker):
        self._session_factory = session_factory

    def _session(self) -> Session:
        return self._session_factory()

    def fetch_all_profiles(self) -> list[RawProfile]:
        with self._session() as db:
            rows = db.query(Profile).order_by(Profile.row_id).all()
            return [row.to_raw() for row in rows]

    def fetch_all_ai_summaries(self) -> list[RawAISummary]:
        with self._session() as db:
            rows = db.query(ProfileAISummary).order_by(ProfileAISummary.row_id).all()
            return [row.to_raw() for row in rows]

    def fetch_all_jobs(self) -> list[RawJob]:
        with self._session() as db:
            rows = db.query(JobInfo).order_by(JobInfo.row_id).all()
            return [row.to_raw() for row in rows]

    def import_documents(self, payload: dict) -> dict[str, int]:
        """Upsert profile/summary documents by uuid and append job documents.

        ``payload`` holds ``profiles``, ``ai_summaries`` and ``jobs`` arrays.
        Returns the number of documents written per collection.
        """
        counts = {"profiles": 0, "ai_summaries": 0, "jobs": 0}
        with self._session() as db:
            try:
                for doc in payload.get("profiles") or []:
                    self._upsert(db, Profile, doc)
                    counts["profiles"] += 1
                for doc in payload.get("ai_summaries") or []:
                    self._upsert(db, ProfileAISummary, doc)
                    counts["ai_summaries"] += 1
                for doc in payload.get("jobs") or []:
                    db.add(JobInfo(**_row_kwargs(JobInfo, doc)))
                    counts["jobs"] += 1
                db.commit()
            except Exception:
                db.rollback()
                raise

        logger.info(
            "Imported %d profiles, %d AI summaries, %d jobs",
            counts["profiles"], counts["ai_summaries"], counts["jobs"],
        )
        return counts

    @staticmethod
    def _upsert(db: Session, model, doc: dict) -> None:
        uuid = doc.get("uuid")
        if not uuid:
            raise ValueError(f"{model.__tablename__} document is missing a uuid")
        kwargs = _row_kwargs(model, doc)
        row = db.query(model).filter(model.uuid == uuid).first()
        if row is None:
            db.add(model(**kwargs))
            # flush so a duplicate uuid later in the same payload updates this row
            db.flush()
        else:
            for key, value in kwargs.items():
                setattr(row, key, value)
