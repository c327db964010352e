"""
문의사항 게시물 엔드포인트.
"""
from typing import List

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from locker_api.core.deps import get_db
from locker_api.core.exceptions import BadRequestException
from locker_api.crud.post import post as crud_post
from locker_api.crud.user import user as crud_user
from locker_api.schemas.post import PostCreate, PostResponse

router = APIRouter()


@router.post("", response_model=PostResponse, status_code=status.HTTP_201_CREATED)
def create_post(
    post_in: PostCreate,
    db: Session = Depends(get_db)
):
    """
    문의사항 게시.
    작성자는 등록된 이메일로 찾습니다.
    """
    user = crud_user.get_by_email(db, email=post_in.email)
    if not user:
        raise BadRequestException("해당하는 이메일은 등록되어 있지 않습니다.")

    return crud_post.create(db, obj_in={
        "user_id": user.id,
        "title": post_in.title,
        "content": post_in.content,
    })


@router.get("", response_model=List[PostResponse])
def get_posts(db: Session = Depends(get_db)):
    """모든 게시물 최신순 조회."""
    return crud_post.get_newest(db)
