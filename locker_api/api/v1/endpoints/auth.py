"""
인증 엔드포인트.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from locker_api.core.deps import get_db
from locker_api.schemas.auth import SignUpRequest, SignUpResponse, SignInRequest, TokenResponse
from locker_api.services import auth_service

router = APIRouter()


@router.post("/sign-up", response_model=SignUpResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    user_in: SignUpRequest,
    db: Session = Depends(get_db)
):
    """
    회원가입.

    - 이메일: 특수문자, 공백 불가. 숫자나 영어로 시작. 도메인 형식 확인
    - 비밀번호: 8자 이상 15자 이하, 공백 불가
    - 이미 사용 중인 이메일은 가입 불가
    """
    return auth_service.register_user(db, user_in)


@router.post("/sign-in", response_model=TokenResponse)
def sign_in(
    login_data: SignInRequest,
    db: Session = Depends(get_db)
):
    """
    로그인.

    이메일과 비밀번호가 일치하면 access token 을 발급합니다.
    """
    return auth_service.login_user(db, login_data)
