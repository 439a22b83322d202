"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.schemas.auth import LoginRequest, RegisterRequest, TokenResponse
from ..core.schemas.common import ErrorResponse
from ..core.services import AuthService
from ..database import get_db_session

router = APIRouter(prefix="/auth", tags=["authentication"])

_error_responses = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/register", response_model=TokenResponse, responses=_error_responses)
async def register(
    request: RegisterRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Register a new user and get a token."""
    auth_service = AuthService(session, settings)
    return await auth_service.register(request)


@router.post("/login", response_model=TokenResponse, responses=_error_responses)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Authenticate user and get a token."""
    auth_service = AuthService(session, settings)
    return await auth_service.login(request)
