"""
사물함 대여 API 의 사용자 정의 예외.

클라이언트에 노출되는 오류는 모두 LockerException 계열이며,
(상태 코드, 한국어 메시지) 쌍으로 응답에 변환됩니다.
"""
from typing import Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from locker_api.core.validation import FieldError


class LockerException(Exception):
    """모든 애플리케이션 예외의 기본 클래스."""

    status_code: int = 500

    def __init__(self, message: str = "요청을 처리하는 중 오류가 발생했습니다.", status_code: Optional[int] = None):
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        super().__init__(self.message)


class BadRequestException(LockerException):
    """잘못된 요청 (존재하지 않는 리소스 포함)."""

    status_code = 400

    def __init__(self, message: str = "잘못된 요청입니다."):
        super().__init__(message)


class UnauthorizedException(LockerException):
    """인증되지 않은 사용자."""

    status_code = 401

    def __init__(self, message: str = "로그인이 필요합니다."):
        super().__init__(message)


class ForbiddenException(LockerException):
    """권한이 없는 사용자."""

    status_code = 403

    def __init__(self, message: str = "접근 권한이 없습니다."):
        super().__init__(message)


class ValidationException(BadRequestException):
    """필드 검증 실패. 실패한 필드와 규칙을 함께 전달합니다."""

    def __init__(self, error: "FieldError"):
        self.error = error
        super().__init__(error.message)
