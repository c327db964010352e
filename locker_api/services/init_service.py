"""
애플리케이션 초기화 서비스.
시작 시 필요한 초기 데이터를 만듭니다.
"""
import logging
import time
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from locker_api.config import get_settings
from locker_api.db.session import SessionLocal, engine
from locker_api.models import Base, User, UserAuthority
from locker_api.core.security import get_password_hash

logger = logging.getLogger(__name__)


def wait_for_db(max_retries: int = 10, delay: int = 2) -> bool:
    """
    데이터베이스가 준비될 때까지 대기.

    Args:
        max_retries: 최대 재시도 횟수
        delay: 재시도 간격 (초)

    Returns:
        준비되면 True, 실패하면 False
    """
    for attempt in range(max_retries):
        try:
            with engine.connect() as connection:
                connection.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            if attempt < max_retries - 1:
                logger.info("Waiting for database... attempt %d/%d", attempt + 1, max_retries)
                time.sleep(delay)
            else:
                logger.error("Database unavailable after %d attempts: %s", max_retries, e)
    return False


def init_tables() -> None:
    """AUTO_CREATE_TABLES 가 켜져 있으면 테이블 생성."""
    if not get_settings().AUTO_CREATE_TABLES:
        return
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ensured")


def init_admin_user() -> bool:
    """
    초기 관리자 계정이 없으면 생성.

    ADMIN_EMAIL, ADMIN_PASSWORD 설정을 사용합니다.

    Returns:
        생성했으면 True, 이미 있거나 설정이 없거나 오류면 False
    """
    settings = get_settings()

    if not settings.ADMIN_EMAIL or not settings.ADMIN_PASSWORD:
        logger.info("ADMIN_EMAIL / ADMIN_PASSWORD not set, skipping admin bootstrap")
        return False

    db: Session = SessionLocal()

    try:
        existing_admin = db.query(User).filter(
            User.email == settings.ADMIN_EMAIL
        ).first()

        if existing_admin:
            logger.info("Admin user already exists: %s", settings.ADMIN_EMAIL)
            return False

        admin_user = User(
            email=settings.ADMIN_EMAIL,
            password_hash=get_password_hash(settings.ADMIN_PASSWORD),
            authority=UserAuthority.ADMIN,
        )
        db.add(admin_user)
        db.commit()

        logger.info("Admin user created: %s", settings.ADMIN_EMAIL)
        logger.warning("Change the bootstrap admin password after the first sign-in")
        return True

    except SQLAlchemyError:
        db.rollback()
        logger.exception("Failed to create admin user")
        return False

    finally:
        db.close()


def run_initialization():
    """
    초기화 작업 실행.
    FastAPI startup 이벤트에서 호출합니다.
    """
    logger.info("Running initialization...")

    if not wait_for_db():
        return

    init_tables()
    init_admin_user()

    logger.info("Initialization finished")
