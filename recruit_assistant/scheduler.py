"""APScheduler setup: periodically rebuilds the snapshot cache."""

import logging

from apscheduler.events import EVENT_JOB_ERROR, EVENT_JOB_EXECUTED, EVENT_JOB_MISSED
from apscheduler.schedulers.background import BackgroundScheduler
from apscheduler.triggers.interval import IntervalTrigger

logger = logging.getLogger("recruit_assistant.scheduler")

WARM_JOB_ID = "snapshot_cache_warm"

_scheduler: BackgroundScheduler | None = None


def _job_listener(event):
    """Log scheduler job events for debugging."""
    if event.exception:
        logger.error("Scheduled job %s FAILED: %s", event.job_id, event.exception)
    elif event.code == EVENT_JOB_MISSED:
        logger.warning("Scheduled job %s MISSED its fire time", event.job_id)
    else:
        logger.debug("Scheduled job %s executed successfully", event.job_id)


def _warm_cache(loader) -> None:
    snapshot = loader.refresh()
    logger.info(
        "Cache warmed: %d profiles, %d jobs", snapshot.profiles_count, snapshot.jobs_count
    )


def init_scheduler(loader, interval_minutes: int) -> BackgroundScheduler | None:
    """Start background cache warming; a non-positive interval disables it."""
    global _scheduler
    if interval_minutes <= 0:
        return None
    if _scheduler is not None:
        return _scheduler

    _scheduler = BackgroundScheduler()
    _scheduler.add_listener(_job_listener, EVENT_JOB_EXECUTED | EVENT_JOB_ERROR | EVENT_JOB_MISSED)
    _scheduler.add_job(
        _warm_cache,
        trigger=IntervalTrigger(minutes=interval_minutes),
        args=[loader],
        id=WARM_JOB_ID,
        name="Warm snapshot cache",
        coalesce=True,
        max_instances=1,
        replace_existing=True,
    )
    _scheduler.start()
    logger.info("APScheduler started: cache warm every %d min", interval_minutes)
    return _scheduler


def shutdown_scheduler() -> None:
    global _scheduler
    if _scheduler is not None:
        _scheduler.shutdown(wait=False)
        _scheduler = None
        logger.info("APScheduler stopped")


def get_scheduler_info() -> dict:
    """Return diagnostic info about the scheduler state."""
    if _scheduler is None:
        return {"running": False, "jobs": []}
    jobs = []
    for job in _scheduler.get_jobs():
        jobs.append({
            "id": job.id,
            "name": job.name,
            "next_run_time": str(job.next_run_time) if job.next_run_time else None,
            "trigger": str(job.trigger),
        })
    return {
        "running": _scheduler.running,
        "jobs": jobs,
    }
