"""Data routes: overview, statistics, searchable values, refresh."""

import logging

from fastapi import APIRouter, Depends

from recruit_assistant.data.loader import DataLoader

from .dependencies import get_loader
from .responses import ok

logger = logging.getLogger("recruit_assistant.web.data")

router = APIRouter(prefix="/api/data")


@router.get("/overview")
def data_overview(loader: DataLoader = Depends(get_loader)):
    return ok(loader.get_overview())


@router.get("/statistics")
def data_statistics(loader: DataLoader = Depends(get_loader)):
    return ok(loader.get_statistics().to_dict())


@router.get("/searchable")
def searchable_data(loader: DataLoader = Depends(get_loader)):
    return ok(loader.get_searchable_data().to_dict())


@router.post("/refresh")
def refresh_data(loader: DataLoader = Depends(get_loader)):
    snapshot = loader.refresh()
    logger.info("Manual refresh: %d profiles, %d jobs", snapshot.profiles_count, snapshot.jobs_count)
    return ok({
        "profiles_count": snapshot.profiles_count,
        "jobs_count": snapshot.jobs_count,
        "ai_summaries_count": snapshot.ai_summaries_count,
        "last_updated": snapshot.last_updated,
    })
