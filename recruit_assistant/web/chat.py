"""Chat support routes: suggestions, summary, insights, search and AI analysis."""

import logging

from fastapi import APIRouter, Body, Depends

from recruit_assistant.assistant.service import AssistantService
from recruit_assistant.data.loader import DataLoader

from .dependencies import get_assistant, get_loader
from .responses import error, ok

logger = logging.getLogger("recruit_assistant.web.chat")

router = APIRouter(prefix="/api")

SUGGESTIONS = [
    "Show me top candidates",
    "What jobs are available?",
    "Analyze our data",
    "Find Python developers",
    "Compare candidates",
    "Skills overview",
]


@router.get("/chat/suggestions")
def chat_suggestions():
    return ok({"suggestions": SUGGESTIONS})


@router.get("/chat/summary")
def chat_summary(loader: DataLoader = Depends(get_loader)):
    snapshot = loader.get_snapshot()
    stats = snapshot.statistics
    fits = [p.fit_percentage for p in snapshot.profiles if p.fit_percentage > 0]
    return ok({
        "total_candidates": snapshot.profiles_count,
        "total_jobs": snapshot.jobs_count,
        "top_fit": max(fits, default=0),
        "average_fit": sum(fits) / len(fits) if fits else 0,
        "average_experience": stats.average_experience,
        "top_skills": stats.skills_distribution[:5],
        "top_locations": stats.location_distribution[:5],
        "top_industries": stats.industry_distribution[:5],
    })


@router.post("/ai/analyze")
def ai_analyze(
    payload: dict = Body(default={}),
    loader: DataLoader = Depends(get_loader),
    assistant: AssistantService = Depends(get_assistant),
):
    query = payload.get("query")
    if not query or not isinstance(query, str):
        return error("Query is required", 400)

    logger.info("AI analysis request: %r", query[:80])
    return ok(assistant.analyze(query, loader.get_snapshot()))


@router.get("/chat/insights")
def chat_insights(
    loader: DataLoader = Depends(get_loader),
    assistant: AssistantService = Depends(get_assistant),
):
    snapshot = loader.get_snapshot()
    return ok({
        "insights": assistant.insights(snapshot),
        "data_summary": {
            "total_candidates": snapshot.profiles_count,
            "total_jobs": snapshot.jobs_count,
            "average_experience": snapshot.statistics.average_experience,
        },
    })


@router.post("/chat/search")
def chat_search(
    payload: dict = Body(default={}),
    loader: DataLoader = Depends(get_loader),
    assistant: AssistantService = Depends(get_assistant),
):
    query = payload.get("query")
    if not query or not isinstance(query, str):
        return error("Search query is required", 400)

    result = loader.search(query, payload.get("filters"))
    analysis = None
    if payload.get("include_analysis") and result.results:
        analysis = assistant.analyze(
            f'Analyze these search results for: "{query}". '
            "Provide insights on the candidates found and their suitability.",
            loader.get_snapshot(),
            profiles=result.results,
        )["response"]

    return ok({
        "search_results": result.to_dict(),
        "analysis": analysis,
        "query": query,
        "filters": result.filters,
    })
