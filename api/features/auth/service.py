"""Service layer for the Auth feature."""
import structlog
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.auth.dtos import LoginRequest, RegisterRequest
from api.features.auth.entities.user import User
from api.features.auth.exceptions import InvalidCredentialsError, UsernameTakenError
from api.features.auth.hasher import PasswordHasher
from api.features.auth.repository import UserRepository

logger = structlog.get_logger("currency.auth.service")


class AuthService:
    """Registers users and checks their credentials."""

    def __init__(self, password_hasher: PasswordHasher):
        self.password_hasher = password_hasher

    async def register(self, request: RegisterRequest, db_session: AsyncSession) -> User:
        repository = UserRepository(db_session)

        if await repository.get_by_username(request.username):
            raise UsernameTakenError(request.username)

        password_hash = await self.password_hasher.hash(request.password)
        try:
            user = await repository.create_user(
                username=request.username,
                password_hash=password_hash,
                email=request.email,
            )
            await db_session.commit()
        except IntegrityError as e:
            # Lost a race with a concurrent registration of the same name
            await db_session.rollback()
            raise UsernameTakenError(request.username) from e
        except Exception:
            await db_session.rollback()
            raise

        logger.info("User registered", user_id=user.id, username=user.username)
        return user

    async def login(self, request: LoginRequest, db_session: AsyncSession) -> User:
        repository = UserRepository(db_session)

        user = await repository.get_by_username(request.username)
        if user is None:
            raise InvalidCredentialsError()

        if not await self.password_hasher.verify(request.password, user.password):
            logger.info("Password mismatch", username=request.username)
            raise InvalidCredentialsError()

        return user
