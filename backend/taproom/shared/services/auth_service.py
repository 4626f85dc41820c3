"""
Authentication Service

Business logic for login and the administrator bootstrap.

Service Pattern:
================
Services encapsulate business logic and coordinate between:
- Repositories (data access)
- Security utilities (hashing, tokens)
- Domain logic

Usage:
======
    from taproom.shared.services.auth_service import AuthService

    service = AuthService(db)
    token, expires_in = await service.login("brew1", "s3cret")
"""

from datetime import timedelta
from typing import Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from taproom.config.settings import settings
from taproom.shared.core.exceptions import AuthenticationError
from taproom.shared.core.logging import get_logger
from taproom.shared.models.enums import Role
from taproom.shared.models.user import User
from taproom.shared.repositories.user_repository import UserRepository
from taproom.shared.utils.security import SecurityUtils


log = get_logger("taproom.auth")


class AuthService:
    """
    Service for authentication-related business logic.

    Handles:
    - User authentication (login)
    - JWT token generation
    - Creating the administrator account on startup

    Attributes:
        session: Database session
        repo: UserRepository instance
    """

    def __init__(self, session: AsyncSession) -> None:
        """
        Initialize AuthService.

        Args:
            session: Async database session
        """
        self.session = session
        self.repo = UserRepository(session)

    async def login(self, username: str, password: str) -> Tuple[str, int]:
        """
        Authenticate user and generate token.

        Unknown user, wrong password and disabled account all produce the
        same error.

        Args:
            username: Login name
            password: Plain text password

        Returns:
            Tuple of (access_token, expires_in_seconds)

        Raises:
            AuthenticationError: If credentials are invalid
        """
        user = await self.repo.get_by_name(username)
        if user is None or not await SecurityUtils.verify_password(password, user.password):
            log.info("Login failed", username=username)
            raise AuthenticationError("Invalid username or password")

        if not user.enabled:
            log.info("Login refused for disabled account", user_id=user.id)
            raise AuthenticationError("Invalid username or password")

        return self.issue_token(user)

    @staticmethod
    def issue_token(user: User) -> Tuple[str, int]:
        """Sign an access token for the user."""
        access_token = SecurityUtils.create_access_token(
            data={
                "sub": user.name,
                "user_id": user.id,
                "roles": sorted(role.value for role in user.role_set),
            },
            secret_key=settings.SECRET_KEY,
            expires_delta=timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES),
            algorithm=settings.JWT_ALGORITHM,
        )

        expires_in = settings.ACCESS_TOKEN_EXPIRE_MINUTES * 60  # Convert to seconds

        return access_token, expires_in

    async def ensure_admin(self, username: str, password: str) -> bool:
        """
        Create the administrator account if it does not exist yet.

        Returns:
            True if the account was created, False if it already existed
        """
        if await self.repo.name_exists(username):
            return False

        await self.repo.create(
            name=username,
            password=await SecurityUtils.hash_password(password),
            roles=Role.ADMIN.value,
            enabled=True,
        )
        log.info("Administrator account created", username=username)
        return True
