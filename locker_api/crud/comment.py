"""
soft delete 를 지원하는 댓글 CRUD.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from locker_api.crud.base import CRUDBase
from locker_api.models.comment import Comment
from locker_api.schemas.comment import CommentCreate


class CRUDComment(CRUDBase[Comment, CommentCreate, dict]):
    """댓글 CRUD."""

    def get_page_newest(self, db: Session, *, skip: int, limit: int) -> List[Comment]:
        """
        최신순 댓글 페이지.

        Args:
            db: 데이터베이스 세션
            skip: 건너뛸 개수
            limit: 최대 개수

        Returns:
            삭제되지 않은 댓글 리스트
        """
        return (
            self._base_query(db)
            .order_by(desc(Comment.created_at), desc(Comment.id))
            .offset(skip)
            .limit(limit)
            .all()
        )


# 전역 CRUD 인스턴스
comment = CRUDComment(Comment)
