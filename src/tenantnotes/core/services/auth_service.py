"""Authentication service implementation."""

from sqlalchemy.ext.asyncio import AsyncSession

from ...config import Settings
from ...security import create_access_token, verify_password
from ..exceptions import InactiveTenantError, InvalidCredentialsError
from ..logging import get_logger
from ..models.tenant import Tenant
from ..models.user import User
from ..repositories.tenant_repository import TenantRepository
from ..repositories.user_repository import UserRepository
from ..schemas.auth import LoginRequest, LoginResponse, TenantSummary, UserSummary

logger = get_logger("auth_service")


def build_user_summary(user: User, tenant: Tenant) -> UserSummary:
    return UserSummary(
        id=user.id,
        email=user.email,
        role=user.role,
        tenant=TenantSummary.model_validate(tenant),
    )


class AuthService:
    """Login with email and password."""

    def __init__(self, session: AsyncSession, settings: Settings):
        self.session = session
        self.settings = settings
        self.user_repo = UserRepository(session)
        self.tenant_repo = TenantRepository(session)

    async def authenticate_user(self, request: LoginRequest) -> LoginResponse:
        """Check credentials and issue a bearer token."""
        user = await self.user_repo.get_by_email(request.email, active_only=True)
        if not user or not verify_password(request.password, user.password_hash):
            logger.warning("Failed login attempt", extra={"email": request.email})
            raise InvalidCredentialsError()

        tenant = await self.tenant_repo.get_by_id(user.tenant_id)
        if not tenant or not tenant.is_active:
            logger.warning("Login refused for inactive tenant", extra={"email": request.email})
            raise InactiveTenantError("Tenant is inactive")

        token = create_access_token(user.id, self.settings)
        logger.info("User logged in", extra={"user_id": str(user.id), "tenant": tenant.slug})

        return LoginResponse(token=token, user=build_user_summary(user, tenant))
