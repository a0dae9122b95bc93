from datetime import timedelta
from functools import lru_cache

from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.log_email_sender import LogEmailSender
from src.adapter.services.smtp_email_sender import SmtpEmailSender
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.email_sender import IEmailSender
from src.app.services.password_hasher import PasswordHasher
from src.app.services.token_service import TokenService

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


@lru_cache
def get_token_service() -> TokenService:
    """Process-wide token service; the signing secret is read once at startup"""
    return TokenService(
        secret=ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
        validity=timedelta(hours=ApplicationConfig.ACCESS_TOKEN_TTL_HOURS),
    )


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(rounds=ApplicationConfig.BCRYPT_ROUNDS)


@lru_cache
def get_email_sender() -> IEmailSender:
    """SMTP delivery when SMTP_HOST is set, otherwise log-only"""
    if not ApplicationConfig.SMTP_HOST:
        return LogEmailSender()
    return SmtpEmailSender(
        host=ApplicationConfig.SMTP_HOST,
        port=ApplicationConfig.SMTP_PORT,
        username=ApplicationConfig.SMTP_USERNAME,
        password=ApplicationConfig.SMTP_PASSWORD,
        from_email=ApplicationConfig.SMTP_FROM,
        use_tls=ApplicationConfig.SMTP_USE_TLS,
    )


def get_frontend_url() -> str:
    return ApplicationConfig.FRONTEND_URL


def get_reset_token_ttl() -> timedelta:
    return timedelta(minutes=ApplicationConfig.RESET_TOKEN_TTL_MINUTES)
