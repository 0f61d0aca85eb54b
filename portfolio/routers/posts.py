import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from portfolio import dependencies as deps
from portfolio.exceptions import PostNotFound
from portfolio.schemas.blog import Post, PostSummary
from portfolio.services.post_store import PostStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api")


@router.get("/posts", response_model=List[PostSummary])
def list_posts(store: PostStore = Depends(deps.get_post_store)):
    """Get all published posts without their content."""
    try:
        return [post.summary() for post in store.list_all()]
    except HTTPException:
        raise
    except Exception as e:
        logger.error(f"Unexpected error listing posts: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve posts")


@router.get("/posts/{slug}", response_model=Post)
def get_post(slug: str, store: PostStore = Depends(deps.get_post_store)):
    """Get a single post by slug."""
    try:
        return store.find_by_identifier(slug)
    except PostNotFound:
        raise HTTPException(status_code=404, detail="Post not found")
    except Exception as e:
        logger.error(f"Unexpected error retrieving post {slug}: {e}")
        raise HTTPException(status_code=500, detail="Failed to retrieve post")
