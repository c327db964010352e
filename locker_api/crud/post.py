"""
문의사항 게시물 CRUD.
"""
from typing import List
from sqlalchemy.orm import Session
from sqlalchemy import desc

from locker_api.crud.base import CRUDBase
from locker_api.models.post import Post


class CRUDPost(CRUDBase[Post, dict, dict]):
    """게시물 CRUD."""

    def get_newest(self, db: Session) -> List[Post]:
        """최신순 전체 게시물."""
        return db.query(Post).order_by(desc(Post.created_at), desc(Post.id)).all()


# 전역 CRUD 인스턴스
post = CRUDPost(Post)
