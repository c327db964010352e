"""
인증 서비스.
회원가입과 로그인(토큰 발급)을 처리합니다.
"""
import logging
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from locker_api.config import settings
from locker_api.core.exceptions import BadRequestException, UnauthorizedException
from locker_api.core.security import create_access_token
from locker_api.crud.user import user as crud_user
from locker_api.models.user import User
from locker_api.schemas.auth import SignInRequest, SignUpRequest, TokenResponse

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL = "입력하신 이메일은 이미 사용 중입니다."


def register_user(db: Session, user_in: SignUpRequest) -> User:
    """
    회원가입.

    Args:
        db: 데이터베이스 세션
        user_in: 검증된 회원가입 데이터

    Returns:
        생성된 사용자

    Raises:
        BadRequestException: 이메일이 이미 사용 중인 경우 (삭제된 계정 포함)
    """
    if crud_user.get_by_email(db, email=user_in.email, include_deleted=True):
        raise BadRequestException(DUPLICATE_EMAIL)

    try:
        user = crud_user.create(db, obj_in=user_in)
    except IntegrityError:
        # 동시에 같은 이메일로 가입한 경우 unique 제약이 막음
        db.rollback()
        raise BadRequestException(DUPLICATE_EMAIL)

    logger.info("User %s registered", user.id)
    return user


def login_user(db: Session, login_data: SignInRequest) -> TokenResponse:
    """
    로그인 후 access token 발급.

    Args:
        db: 데이터베이스 세션
        login_data: 이메일과 비밀번호

    Returns:
        access token

    Raises:
        UnauthorizedException: 이메일 또는 비밀번호가 틀린 경우
    """
    user = crud_user.authenticate(db, email=login_data.email, password=login_data.password)
    if not user:
        logger.info("Sign-in failed")
        raise UnauthorizedException("이메일 또는 비밀번호가 일치하지 않습니다.")

    access_token = create_access_token(
        data={"sub": str(user.id), "authority": user.authority.value}
    )
    logger.info("User %s signed in", user.id)

    return TokenResponse(
        access_token=access_token,
        expires_in=settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60
    )
