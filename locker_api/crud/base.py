"""
Soft Delete 를 지원하는 제네릭 CRUD 베이스.
"""
from datetime import datetime
from typing import Generic, TypeVar, Type, Optional, List, Any, Dict, Union
from sqlalchemy.orm import Session
from pydantic import BaseModel
from locker_api.db.base import Base, utcnow

ModelType = TypeVar("ModelType", bound=Base)
CreateSchemaType = TypeVar("CreateSchemaType", bound=BaseModel)
UpdateSchemaType = TypeVar("UpdateSchemaType", bound=BaseModel)


class CRUDBase(Generic[ModelType, CreateSchemaType, UpdateSchemaType]):
    """
    soft delete 를 지원하는 CRUD 베이스 클래스.

    모든 조회는 기본적으로 삭제된 레코드(deleted_at IS NOT NULL)를
    제외합니다. 복구 대상처럼 삭제된 레코드가 필요하면
    include_deleted=True 를 넘깁니다.

    commit=False 로 호출하면 flush 만 하고 커밋은 호출자에게 맡깁니다.
    여러 쓰기를 하나의 트랜잭션으로 묶을 때 사용합니다.
    """

    def __init__(self, model: Type[ModelType]):
        """
        Args:
            model: SQLAlchemy ORM 모델
        """
        self.model = model

    @property
    def soft_deletable(self) -> bool:
        return hasattr(self.model, "deleted_at")

    def _base_query(self, db: Session, include_deleted: bool = False, for_update: bool = False):
        """
        soft delete 필터가 적용된 기본 쿼리.

        Args:
            db: 데이터베이스 세션
            include_deleted: True 면 삭제된 레코드 포함
            for_update: True 면 조회한 행을 트랜잭션 끝까지 잠금 (SELECT ... FOR UPDATE)

        Returns:
            필터링된 쿼리
        """
        query = db.query(self.model)
        if not include_deleted and self.soft_deletable:
            query = query.filter(self.model.deleted_at.is_(None))
        if for_update:
            query = query.with_for_update()
        return query

    def _save(self, db: Session, obj: ModelType, commit: bool) -> ModelType:
        db.add(obj)
        if commit:
            db.commit()
            db.refresh(obj)
        else:
            db.flush()
        return obj

    def get(
        self,
        db: Session,
        id: Any,
        include_deleted: bool = False,
        for_update: bool = False
    ) -> Optional[ModelType]:
        """
        ID 로 레코드 조회.

        Args:
            db: 데이터베이스 세션
            id: 레코드 ID
            include_deleted: True 면 삭제된 레코드 포함
            for_update: True 면 행 잠금

        Returns:
            레코드 또는 None
        """
        return self._base_query(db, include_deleted, for_update).filter(
            self.model.id == id
        ).first()

    def get_multi(
        self,
        db: Session,
        *,
        skip: int = 0,
        limit: Optional[int] = None,
        include_deleted: bool = False
    ) -> List[ModelType]:
        """
        여러 레코드 조회 (id 순).

        Args:
            db: 데이터베이스 세션
            skip: 건너뛸 개수
            limit: 최대 개수 (None 이면 전체)
            include_deleted: True 면 삭제된 레코드 포함

        Returns:
            레코드 리스트
        """
        query = self._base_query(db, include_deleted).order_by(self.model.id).offset(skip)
        if limit is not None:
            query = query.limit(limit)
        return query.all()

    def get_count(
        self,
        db: Session,
        include_deleted: bool = False
    ) -> int:
        """전체 레코드 수."""
        return self._base_query(db, include_deleted).count()

    def create(
        self,
        db: Session,
        *,
        obj_in: Union[CreateSchemaType, Dict[str, Any]],
        commit: bool = True
    ) -> ModelType:
        """
        새 레코드 생성.

        Args:
            db: 데이터베이스 세션
            obj_in: 입력 스키마 또는 dict
            commit: False 면 flush 만 수행

        Returns:
            생성된 레코드
        """
        if isinstance(obj_in, dict):
            obj_in_data = obj_in
        else:
            obj_in_data = obj_in.model_dump()
        db_obj = self.model(**obj_in_data)
        return self._save(db, db_obj, commit)

    def soft_delete(
        self,
        db: Session,
        *,
        id: Any,
        at: Optional[datetime] = None,
        commit: bool = True
    ) -> Optional[ModelType]:
        """
        레코드 soft delete.

        deleted_at 을 설정합니다. 레코드는 남아 있지만 기본 조회에서
        제외됩니다.

        Args:
            db: 데이터베이스 세션
            id: 레코드 ID
            at: 삭제 시각 (기본값은 현재 시각)
            commit: False 면 flush 만 수행

        Returns:
            삭제된 레코드, 활성 레코드가 없으면 None
        """
        obj = self.get(db, id=id)
        if obj is None or not self.soft_deletable:
            return None
        obj.deleted_at = at or utcnow()
        return self._save(db, obj, commit)

    def restore(
        self,
        db: Session,
        *,
        id: Any,
        commit: bool = True
    ) -> Optional[ModelType]:
        """
        삭제된 레코드 복구.

        Args:
            db: 데이터베이스 세션
            id: 레코드 ID
            commit: False 면 flush 만 수행

        Returns:
            복구된 레코드, 삭제 상태가 아니거나 없으면 None
        """
        obj = self.get(db, id=id, include_deleted=True)
        if obj is None or not self.soft_deletable or not obj.is_deleted:
            return None
        obj.deleted_at = None
        return self._save(db, obj, commit)

