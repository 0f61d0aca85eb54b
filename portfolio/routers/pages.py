import datetime
import logging

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import HTMLResponse, PlainTextResponse
from fastapi.templating import Jinja2Templates

from portfolio import dependencies as deps
from portfolio.exceptions import PostNotFound
from portfolio.services.post_store import PostStore
from portfolio.settings import Settings

logger = logging.getLogger(__name__)

router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def home(
    request: Request,
    templates: Jinja2Templates = Depends(deps.get_templates),
    current_settings: Settings = Depends(deps.get_settings),
):
    try:
        return templates.TemplateResponse(
            request,
            "home.html",
            {
                "title": current_settings.SITE_TITLE,
                "subtitle": current_settings.SITE_SUBTITLE,
                "year": datetime.date.today().year,
            },
        )
    except Exception as e:
        logger.error(f"Unexpected error rendering home page: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get("/blog")
def list_posts(
    request: Request,
    store: PostStore = Depends(deps.get_post_store),
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    """Blog listing page, newest first."""
    try:
        return templates.TemplateResponse(
            request,
            "blog-list.html",
            {"posts": store.list_all(), "title": "Blog Posts"},
        )
    except Exception as e:
        logger.error(f"Unexpected error rendering blog list: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")


@router.get("/blog/{slug}")
def view_post(
    slug: str,
    request: Request,
    store: PostStore = Depends(deps.get_post_store),
    templates: Jinja2Templates = Depends(deps.get_templates),
):
    """Single post page. The post body is inserted as trusted HTML."""
    try:
        post = store.find_by_identifier(slug)
        return templates.TemplateResponse(
            request,
            "blog-post.html",
            {"post": post, "title": post.title},
        )
    except PostNotFound:
        return PlainTextResponse("404 page not found", status_code=404)
    except Exception as e:
        logger.error(f"Unexpected error rendering post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Internal Server Error")
