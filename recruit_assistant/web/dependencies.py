"""Shared FastAPI dependencies: data loader and assistant from app state."""

from fastapi import Request

from recruit_assistant.assistant.service import AssistantService
from recruit_assistant.data.loader import DataLoader


def get_loader(request: Request) -> DataLoader:
    return request.app.state.loader


def get_assistant(request: Request) -> AssistantService:
    return request.app.state.assistant
