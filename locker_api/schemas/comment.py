"""
댓글 스키마.
"""
from datetime import datetime
from typing import Optional

from locker_api.core.validation import NonBlankText, StrictId
from locker_api.schemas.common import CamelModel


class CommentCreate(CamelModel):
    """댓글 게시."""

    post_id: StrictId
    content: NonBlankText


class CommentResponse(CamelModel):
    """댓글 응답."""

    id: int
    post_id: int
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
    deleted_at: Optional[datetime] = None
