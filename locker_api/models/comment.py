"""
댓글(Comment) ORM 모델.
"""
from sqlalchemy import Column, Integer, Text, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from locker_api.db.base import Base, SoftDeleteMixin


class Comment(Base, SoftDeleteMixin):
    """관리자가 문의사항에 단 답변 댓글."""

    __tablename__ = "comments"

    id = Column(Integer, primary_key=True, index=True)
    post_id = Column(Integer, ForeignKey("posts.id"), nullable=False, index=True)
    content = Column(Text, nullable=False)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), index=True)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    # deleted_at 은 SoftDeleteMixin 에서 옴

    # Relationships
    post = relationship("Post", back_populates="comments")

    def __repr__(self):
        return f"<Comment {self.id} on post {self.post_id}>"
