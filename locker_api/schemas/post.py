"""
문의사항 게시물 스키마.
"""
from datetime import datetime
from typing import Annotated, Optional

from pydantic import AfterValidator, Field, StrictStr

from locker_api.core.validation import NonBlankText, check_not_blank
from locker_api.schemas.common import CamelModel


class PostCreate(CamelModel):
    """문의사항 게시. 작성자는 이메일로 찾습니다."""

    email: StrictStr = Field(..., min_length=1)
    title: Annotated[StrictStr, Field(max_length=200), AfterValidator(check_not_blank)]
    content: NonBlankText


class PostResponse(CamelModel):
    """게시물 응답."""

    id: int
    user_id: int
    title: str
    content: str
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
