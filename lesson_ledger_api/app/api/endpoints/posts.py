"""
News post endpoints.

The front end uses verb‑style paths (``/write``, ``/update/{postId}``,
``/delete/{postId}``) rather than a single resource path; both list
paths return the same newest‑first listing.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path, status

from ...schemas.common import MessageResponse
from ...schemas.post import PostRead, PostWrite
from ...services.post_service import PostService
from ..dependencies import get_post_service


router = APIRouter()


@router.get("/newsList", response_model=List[PostRead])
@router.get("/posts", response_model=List[PostRead])
async def list_posts(service: PostService = Depends(get_post_service)) -> List[PostRead]:
    """Return all posts, newest first."""
    return await service.list_posts()


@router.get("/posts/{post_id}", response_model=PostRead)
async def get_post(
    post_id: int = Path(..., description="Post key"),
    service: PostService = Depends(get_post_service),
) -> PostRead:
    post = await service.get_post(post_id)
    if post is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return post


@router.post("/write", response_model=MessageResponse)
async def write_post(
    post: PostWrite,
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    await service.create_post(post)
    return MessageResponse(message="Post saved successfully")


@router.put("/update/{post_id}", response_model=MessageResponse)
async def update_post(
    post: PostWrite,
    post_id: int = Path(..., description="Post key"),
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    """Replace author, title and content of a post."""
    if not await service.update_post(post_id, post):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return MessageResponse(message="Post updated successfully")


@router.delete("/delete/{post_id}", response_model=MessageResponse)
async def delete_post(
    post_id: int = Path(..., description="Post key"),
    service: PostService = Depends(get_post_service),
) -> MessageResponse:
    if not await service.delete_post(post_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Post not found")
    return MessageResponse(message="Post deleted successfully")
