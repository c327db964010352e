"""
사용자 ORM 모델.
"""
import enum
from sqlalchemy import Column, Integer, String, DateTime, Enum
from sqlalchemy.orm import relationship
from sqlalchemy.sql import func
from locker_api.db.base import Base, SoftDeleteMixin


class UserAuthority(str, enum.Enum):
    """사용자 권한."""
    USER = "user"
    ADMIN = "admin"


user_authority_enum = Enum(
    UserAuthority,
    name="user_authority",
    values_callable=lambda members: [m.value for m in members],
)


class User(Base, SoftDeleteMixin):
    """soft delete 를 지원하는 사용자 모델."""

    __tablename__ = "users"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, unique=True, index=True)
    password_hash = Column(String(255), nullable=False)
    authority = Column(user_authority_enum, nullable=False, default=UserAuthority.USER)
    created_at = Column(DateTime(timezone=True), server_default=func.now())
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now())
    # deleted_at 은 SoftDeleteMixin 에서 옴

    # Relationships
    lockers = relationship("Locker", back_populates="user")
    posts = relationship("Post", back_populates="user")

    def __repr__(self):
        return f"<User {self.email}>"
