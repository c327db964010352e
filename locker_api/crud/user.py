"""
soft delete 를 지원하는 사용자 CRUD.
"""
from typing import Optional
from sqlalchemy.orm import Session
from locker_api.crud.base import CRUDBase
from locker_api.models.user import User, UserAuthority
from locker_api.schemas.auth import SignUpRequest
from locker_api.core.security import get_password_hash, verify_password


class CRUDUser(CRUDBase[User, SignUpRequest, dict]):
    """사용자 CRUD."""

    def get_by_email(
        self, db: Session, *, email: str, include_deleted: bool = False
    ) -> Optional[User]:
        """
        이메일로 사용자 조회.
        기본적으로 삭제된 사용자는 제외합니다.

        Args:
            db: 데이터베이스 세션
            email: 이메일
            include_deleted: True 면 삭제된 사용자 포함

        Returns:
            사용자 또는 None
        """
        return self._base_query(db, include_deleted).filter(User.email == email).first()

    def create(
        self,
        db: Session,
        *,
        obj_in: SignUpRequest,
        authority: UserAuthority = UserAuthority.USER,
        commit: bool = True
    ) -> User:
        """
        비밀번호를 해시하여 사용자 생성.

        Args:
            db: 데이터베이스 세션
            obj_in: 회원가입 데이터
            authority: 권한 (기본값 user)
            commit: False 면 flush 만 수행

        Returns:
            생성된 사용자
        """
        db_obj = User(
            email=obj_in.email,
            password_hash=get_password_hash(obj_in.password),
            authority=authority,
        )
        return self._save(db, db_obj, commit)

    def authenticate(self, db: Session, *, email: str, password: str) -> Optional[User]:
        """
        사용자 인증. 삭제된 사용자는 인증하지 않습니다.

        Returns:
            인증된 사용자 또는 None
        """
        user = self.get_by_email(db, email=email)
        if not user:
            return None
        if not verify_password(password, user.password_hash):
            return None
        return user


# 전역 CRUD 인스턴스
user = CRUDUser(User)
