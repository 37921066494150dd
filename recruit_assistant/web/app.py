"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware

from recruit_assistant.assistant.service import AssistantService
from recruit_assistant.config import AppConfig
from recruit_assistant.data.loader import DataLoader
from recruit_assistant.models import create_session_factory
from recruit_assistant.scheduler import get_scheduler_info, init_scheduler, shutdown_scheduler
from recruit_assistant.storage.record_store import RecordStore

from .chat import router as chat_router
from .data import router as data_router
from .responses import register_error_handlers
from .search import router as search_router

logger = logging.getLogger("recruit_assistant.web")


@asynccontextmanager
async def lifespan(app: FastAPI):
    init_scheduler(app.state.loader, app.state.config.cache.warm_interval_minutes)

    yield

    shutdown_scheduler()


def create_app(
    config: Optional[AppConfig] = None,
    loader: Optional[DataLoader] = None,
    assistant: Optional[AssistantService] = None,
) -> FastAPI:
    config = config or AppConfig()
    if loader is None:
        store = RecordStore(create_session_factory(config.database.url))
        loader = DataLoader.from_config(store, config)

    app = FastAPI(title="Recruit Assistant", lifespan=lifespan)
    app.state.config = config
    app.state.loader = loader
    app.state.assistant = assistant or AssistantService(config.assistant)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.server.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_error_handlers(app)

    app.include_router(data_router)
    app.include_router(search_router)
    app.include_router(chat_router)

    @app.get("/health")
    def health(request: Request):
        cache = request.app.state.loader.cache
        return {
            "status": "healthy",
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "services": {
                "data_loader": cache.state.value,
                "ai_service": "active" if request.app.state.assistant.available else "unconfigured",
            },
            "scheduler": get_scheduler_info(),
        }

    return app
