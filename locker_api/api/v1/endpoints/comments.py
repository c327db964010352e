"""
댓글 엔드포인트.
"""
import math

from fastapi import APIRouter, Depends, Path, Query, Response, status
from sqlalchemy.orm import Session

from locker_api.config import settings
from locker_api.core.deps import get_db
from locker_api.core.exceptions import BadRequestException, UnauthorizedException
from locker_api.core.permissions import require_admin, require_any
from locker_api.crud.comment import comment as crud_comment
from locker_api.crud.post import post as crud_post
from locker_api.models.user import UserAuthority
from locker_api.schemas.auth import Identity
from locker_api.schemas.comment import CommentCreate, CommentResponse
from locker_api.schemas.common import PaginatedResponse
from locker_api.services import lifecycle_service

router = APIRouter()


@router.post("", response_model=CommentResponse, status_code=status.HTTP_201_CREATED)
def create_comment(
    comment_in: CommentCreate,
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """
    문의사항에 댓글 게시. 관리자 권한 필요.
    """
    if crud_post.get(db, id=comment_in.post_id) is None:
        raise BadRequestException("해당 포스트가 없습니다.")

    return crud_comment.create(db, obj_in=comment_in)


@router.get("", response_model=PaginatedResponse[CommentResponse])
def get_comments(
    page: int = Query(..., description="보고 싶은 페이지 번호"),
    limit: int = Query(settings.DEFAULT_COMMENT_PAGE_SIZE, ge=1, description="페이지 당 댓글 수"),
    db: Session = Depends(get_db)
):
    """
    댓글 최신순 페이지 조회.

    page 가 1 ~ 전체 페이지 수 범위를 벗어나면 400 입니다.
    """
    total = crud_comment.get_count(db)
    total_pages = max(1, math.ceil(total / limit))
    if page < 1 or page > total_pages:
        raise BadRequestException(f"page 범위는 1부터 {total_pages} 입니다.")

    items = crud_comment.get_page_newest(db, skip=(page - 1) * limit, limit=limit)
    return PaginatedResponse[CommentResponse](
        items=items,
        total=total,
        page=page,
        limit=limit,
        total_pages=total_pages,
    )


@router.get("/{comment_id}", response_model=CommentResponse)
def get_comment(
    comment_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_any),
    db: Session = Depends(get_db)
):
    """
    댓글 조회.
    관리자, 또는 댓글이 달린 게시물의 작성자만 조회할 수 있습니다.
    """
    comment = crud_comment.get(db, id=comment_id)
    if comment is None:
        raise BadRequestException("해당하는 댓글이 없습니다.")

    if identity.authority == UserAuthority.USER:
        post = crud_post.get(db, id=comment.post_id)
        if post is None or post.user_id != identity.id:
            raise UnauthorizedException("해당 댓글에 대한 접근 권한이 없습니다.")

    return comment


@router.delete("/{comment_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_comment(
    comment_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """댓글 삭제 (soft delete). 관리자 권한 필요."""
    lifecycle_service.soft_delete(db, crud_comment, comment_id, not_found="존재하지 않는 댓글입니다.")
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.patch("/restore/{comment_id}", response_model=CommentResponse)
def restore_comment(
    comment_id: int = Path(..., ge=1),
    identity: Identity = Depends(require_admin),
    db: Session = Depends(get_db)
):
    """삭제된 댓글 복구. 관리자 권한 필요."""
    return lifecycle_service.restore(
        db,
        crud_comment,
        comment_id,
        not_deleted="삭제된 comment 가 아닙니다.",
        not_found="존재하지 않는 댓글입니다.",
    )
