"""
사물함 대여 API 메인 FastAPI 애플리케이션.
"""
import logging

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError

from locker_api.config import settings
from locker_api.api.v1.router import api_router
from locker_api.db.session import get_db_connection
from locker_api.services.init_service import run_initialization
from locker_api.core.exceptions import LockerException, ValidationException
from locker_api.core.validation import first_field_error

logging.basicConfig(
    level=settings.LOG_LEVEL.upper(),
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

# FastAPI 애플리케이션 생성
app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    description="""
    ## 사물함 대여 API

    역 사물함 대여 서비스의 REST API 입니다.

    ### 주요 기능:

    * 🔐 **JWT 인증** - 회원가입, 로그인, 권한(user / admin) 확인
    * 🚉 **역** - 역 추가, 조회(사물함과 날씨 포함), 삭제, 복구
    * 🗄️ **사물함** - 추가, 예약, 반납, 삭제, 복구
    * 💬 **문의사항** - 게시물과 관리자 댓글

    ### 문서:

    - **Swagger UI**: /docs
    - **ReDoc**: /redoc
    """,
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json"
)

# CORS 설정
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Exception Handlers
@app.exception_handler(LockerException)
async def locker_exception_handler(request: Request, exc: LockerException):
    """애플리케이션 예외를 (상태 코드, 메시지) 응답으로 변환."""
    content = {"detail": exc.message}
    if isinstance(exc, ValidationException):
        content["field"] = exc.error.field
        content["rule"] = exc.error.rule
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content=content)


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """요청 검증 오류는 첫 번째 실패 규칙만 400 으로 응답."""
    error = first_field_error(exc.errors())
    logger.debug("Validation failed on %s: %s (%s)", request.url.path, error.field, error.rule)
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": error.message, "field": error.field, "rule": error.rule}
    )


# API 라우터 포함
app.include_router(api_router, prefix=settings.API_PREFIX)


# 루트 엔드포인트
@app.get("/", tags=["Health"])
async def root():
    """
    API 가 동작 중인지 확인하는 루트 엔드포인트.
    """
    return {
        "message": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "status": "online",
        "docs": "/docs",
        "redoc": "/redoc"
    }


# Health check
@app.get("/health", tags=["Health"])
async def health_check():
    """모니터링용 health check."""
    return {
        "status": "healthy",
        "version": settings.APP_VERSION
    }


# Startup event
@app.on_event("startup")
async def startup_event():
    """
    애플리케이션 시작 시 실행.
    """
    logger.info("%s v%s started", settings.APP_NAME, settings.APP_VERSION)
    logger.info("Debug mode: %s", settings.DEBUG)

    # 테이블 생성, 초기 관리자 생성
    run_initialization()


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    """
    애플리케이션 종료 시 실행.
    """
    get_db_connection().close()
    logger.info("%s stopped", settings.APP_NAME)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(
        "locker_api.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.DEBUG
    )
