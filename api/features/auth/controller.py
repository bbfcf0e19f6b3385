"""Controller for the Auth feature."""
import structlog
from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.auth.dtos import LoginRequest, RegisterRequest, UserDTO
from api.features.auth.exceptions import InvalidCredentialsError, UsernameTakenError
from api.features.auth.service import AuthService

logger = structlog.get_logger("currency.auth")


class AuthController:
    """Maps auth service outcomes onto HTTP responses."""

    def __init__(self, auth_service: AuthService):
        self.auth_service = auth_service

    async def register(self, request: RegisterRequest, db_session: AsyncSession) -> UserDTO:
        try:
            user = await self.auth_service.register(request, db_session)
            return UserDTO.model_validate(user)
        except UsernameTakenError as e:
            logger.warning("Registration rejected", username=request.username)
            raise HTTPException(status_code=400, detail=e.message)
        except Exception:
            logger.exception("Unexpected error registering user")
            raise HTTPException(status_code=500, detail="Failed to register user")

    async def login(self, request: LoginRequest, db_session: AsyncSession) -> UserDTO:
        try:
            user = await self.auth_service.login(request, db_session)
            return UserDTO.model_validate(user)
        except InvalidCredentialsError as e:
            raise HTTPException(status_code=401, detail=e.message)
        except Exception:
            logger.exception("Unexpected error during login")
            raise HTTPException(status_code=500, detail="Login failed")
