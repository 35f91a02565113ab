"""
Pydantic models for news posts.

``id`` is the author's login handle, not the post key; the key is
``postId`` and is assigned by the store.
"""

from pydantic import Field

from .common import CamelModel


class PostWrite(CamelModel):
    """Body for creating a post or replacing one in full."""

    id: str = Field(..., example="tutor01")
    title: str = Field(..., example="Holiday schedule")
    content: str = Field("", example="No lessons on Chuseok.")


class PostRead(PostWrite):
    post_id: int
    content: str | None = None
