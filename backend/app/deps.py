from fastapi import Request

from .config import Settings
from .services.completion import CompletionClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_completion_client(request: Request) -> CompletionClient:
    return request.app.state.completion_client
