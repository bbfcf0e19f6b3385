"""Router for the Auth feature."""
from dependency_injector.wiring import Provide, inject
from fastapi import APIRouter, Depends, status
from sqlalchemy.ext.asyncio import AsyncSession

from api.features.auth.controller import AuthController
from api.features.auth.dtos import LoginRequest, RegisterRequest, UserDTO
from api.shared.db import get_db_session
from di.container import ApplicationContainer as DependencyContainer

router = APIRouter()


@router.post("/register", response_model=UserDTO, status_code=status.HTTP_201_CREATED)
@inject
async def register(
    request: RegisterRequest,
    controller: AuthController = Depends(
        Provide[DependencyContainer.controllers.auth_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    """Create a user; the response never includes the password."""
    return await controller.register(request, db_session)


@router.post("/login", response_model=UserDTO)
@inject
async def login(
    request: LoginRequest,
    controller: AuthController = Depends(
        Provide[DependencyContainer.controllers.auth_controller]
    ),
    db_session: AsyncSession = Depends(get_db_session),
):
    return await controller.login(request, db_session)
