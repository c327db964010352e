"""
Soft Delete 를 지원하는 SQLAlchemy 선언적 Base.
모든 모델은 이 Base 를 상속합니다.
"""
from datetime import datetime, timezone
from typing import Optional
from sqlalchemy import Column, DateTime
from sqlalchemy.orm import declarative_base


def utcnow() -> datetime:
    """타임존이 포함된 현재 UTC 시각."""
    return datetime.now(timezone.utc)


class SoftDeleteMixin:
    """
    모델에 soft delete 를 추가하는 Mixin.

    이 Mixin 을 상속한 모델은 다음을 가집니다:
    - 삭제 표시용 deleted_at 컬럼
    - soft_delete() / restore() 메서드
    - 상태 확인용 is_deleted 속성

    기본 조회(CRUDBase._base_query)는 deleted_at 이 설정된 행을 제외합니다.
    """

    deleted_at = Column(DateTime(timezone=True), nullable=True, default=None, index=True)

    def soft_delete(self, at: Optional[datetime] = None) -> None:
        """레코드를 삭제 상태로 표시 (soft delete)."""
        self.deleted_at = at or utcnow()

    def restore(self) -> None:
        """삭제된 레코드를 복구."""
        self.deleted_at = None

    @property
    def is_deleted(self) -> bool:
        """레코드가 삭제 상태인지 확인."""
        return self.deleted_at is not None


# SQLAlchemy 선언적 Base
Base = declarative_base()
