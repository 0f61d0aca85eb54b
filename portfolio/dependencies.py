from fastapi import Request
from fastapi.templating import Jinja2Templates

from portfolio.services.post_store import PostStore
from portfolio.settings import Settings, settings


def get_settings() -> Settings:
    """Small wrapper to allow dependency overrides in tests."""
    return settings


def get_post_store(request: Request) -> PostStore:
    return request.app.state.post_store


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates
