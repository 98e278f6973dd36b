"""Authentication API endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from ..config import Settings, get_settings
from ..core.schemas.auth import LoginRequest, LoginResponse, MeResponse
from ..core.schemas.common import ErrorResponse
from ..core.services import AuthService
from ..core.services.auth_service import build_user_summary
from ..database import get_db_session
from ..middleware.auth import TenantContext, get_tenant_context

router = APIRouter(
    prefix="/auth",
    tags=["authentication"],
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)


@router.post("/login", response_model=LoginResponse)
async def login(
    request: LoginRequest,
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
):
    """Login user and get a JWT bearer token."""
    auth_service = AuthService(session, settings)
    return await auth_service.authenticate_user(request)


@router.get("/me", response_model=MeResponse)
async def get_current_user(context: TenantContext = Depends(get_tenant_context)):
    """Get current user profile with their tenant."""
    return MeResponse(user=build_user_summary(context.user, context.tenant))
