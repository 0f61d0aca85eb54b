import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.staticfiles import StaticFiles
from fastapi.templating import Jinja2Templates

from portfolio.routers import pages, posts
from portfolio.services.post_store import PostStore
from portfolio.settings import settings

# Configure logging
logging.basicConfig(
    level=getattr(logging, settings.LOG_LEVEL.upper()),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title="Portfolio", description="Personal site and blog")


@asynccontextmanager
async def lifespan(app: FastAPI):
    store = PostStore.from_directory(
        settings.content_path,
        extension=settings.BLOG_EXTENSION,
        require_title=settings.BLOG_REQUIRE_TITLE,
    )
    app.state.post_store = store
    logger.info(f"Blog store ready with {len(store)} posts")
    yield


app.router.lifespan_context = lifespan
app.state.templates = Jinja2Templates(directory=settings.TEMPLATES_DIR)

app.mount(
    "/static",
    StaticFiles(directory=settings.STATIC_DIR, check_dir=False),
    name="static",
)
app.include_router(pages.router)
app.include_router(posts.router)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    client_ip = request.client.host if request.client else ""
    logger.info(f"{request.method} {request.url.path} {client_ip}")
    return await call_next(request)


def run():
    logger.info(f"Starting portfolio server on port {settings.PORT}")
    logger.info(f"Visit http://localhost:{settings.PORT} to view the site")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    run()
