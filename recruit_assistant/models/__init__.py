"""ORM models backing the record store."""

from .ai_summary import ProfileAISummary
from .base import Base, create_db_engine, create_session_factory
from .job_info import JobInfo
from .profile import Profile

__all__ = [
    "Base",
    "create_db_engine",
    "create_session_factory",
    "Profile",
    "ProfileAISummary",
    "JobInfo",
]
