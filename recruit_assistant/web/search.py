"""Search and lookup routes for profiles and jobs."""

from fastapi import APIRouter, Body, Depends

from recruit_assistant.data.loader import DataLoader

from .dependencies import get_loader
from .responses import not_found, ok

router = APIRouter(prefix="/api")


@router.post("/search/profiles")
def search_profiles(payload: dict = Body(default={}), loader: DataLoader = Depends(get_loader)):
    result = loader.search(payload.get("query") or "", payload.get("filters"))
    return ok(result.to_dict())


@router.get("/profiles/{uuid}")
def get_profile(uuid: str, loader: DataLoader = Depends(get_loader)):
    profile = loader.get_profile(uuid)
    if profile is None:
        return not_found("Profile")
    return ok(profile.to_dict())


@router.get("/jobs")
def list_jobs(loader: DataLoader = Depends(get_loader)):
    jobs = loader.list_jobs()
    return ok({"jobs": [j.to_dict() for j in jobs], "total": len(jobs)})


@router.get("/jobs/{job_id}")
def get_job(job_id: str, loader: DataLoader = Depends(get_loader)):
    job = loader.get_job(job_id)
    if job is None:
        return not_found("Job")
    return ok(job.to_dict())
