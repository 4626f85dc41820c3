"""
Security Utilities

Password hashing and JWT token management.

Password Hashing:
=================
Uses bcrypt (via passlib) with automatic salt generation. bcrypt is
deliberately slow, so the hash and verify calls run in a worker thread
(asyncio.to_thread) and never block the event loop.

JWT Tokens:
===========
Uses PyJWT. Access tokens carry:
    sub      → login name
    user_id  → users.id
    roles    → list of role names, e.g. ["MANUFACTURER"]
    exp, iat → standard claims

Usage:
======
    from taproom.shared.utils.security import SecurityUtils

    # Hash password
    hashed = await SecurityUtils.hash_password("password123")

    # Verify password
    if await SecurityUtils.verify_password("password123", hashed):
        print("Password matches!")

    # Create JWT
    token = SecurityUtils.create_access_token(
        data={"sub": "brew1", "user_id": 7, "roles": ["MANUFACTURER"]},
        secret_key="secret",
        expires_delta=timedelta(hours=1)
    )

    # Decode JWT
    payload = SecurityUtils.decode_access_token(token, "secret")
"""

import asyncio
from datetime import datetime, timedelta, timezone
from typing import Any, Optional

import jwt
from passlib.context import CryptContext


# Password hashing configuration
pwd_context = CryptContext(
    schemes=["bcrypt"],
    deprecated="auto",
)


class SecurityUtils:
    """
    Security utilities for authentication.

    Provides:
    - Password hashing with bcrypt
    - JWT token creation and validation
    """

    # ═══════════════════════════════════════════════════════════════════════════
    # PASSWORD HASHING
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    async def hash_password(password: str) -> str:
        """
        Hash password using bcrypt.

        Bcrypt automatically:
        - Generates a random salt
        - Uses a secure work factor
        - Produces a hash that includes the salt

        Args:
            password: Plain text password

        Returns:
            Bcrypt hash string (includes salt)
        """
        return await asyncio.to_thread(pwd_context.hash, password)

    @staticmethod
    async def verify_password(plain_password: str, hashed_password: str) -> bool:
        """
        Verify password against bcrypt hash.

        Args:
            plain_password: Plain text password to verify
            hashed_password: Bcrypt hash to verify against

        Returns:
            True if password matches, False otherwise
        """
        return await asyncio.to_thread(pwd_context.verify, plain_password, hashed_password)

    # ═══════════════════════════════════════════════════════════════════════════
    # JWT TOKENS
    # ═══════════════════════════════════════════════════════════════════════════

    @staticmethod
    def create_access_token(
        data: dict[str, Any],
        secret_key: str,
        expires_delta: Optional[timedelta] = None,
        algorithm: str = "HS256",
    ) -> str:
        """
        Create JWT access token.

        Args:
            data: Payload data to encode (sub, user_id, roles)
            secret_key: Secret key for signing
            expires_delta: Token expiration time (default: 1 hour)
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Encoded JWT token string
        """
        to_encode = data.copy()
        now = datetime.now(timezone.utc)
        expire = now + (expires_delta or timedelta(hours=1))

        # Add standard JWT claims
        to_encode.update({
            "exp": expire,
            "iat": now,
        })

        return jwt.encode(to_encode, secret_key, algorithm=algorithm)

    @staticmethod
    def decode_access_token(
        token: str,
        secret_key: str,
        algorithm: str = "HS256",
    ) -> dict[str, Any]:
        """
        Decode and verify JWT token.

        Args:
            token: JWT token string
            secret_key: Secret key used for signing
            algorithm: JWT algorithm (default: HS256)

        Returns:
            Decoded token payload

        Raises:
            ValueError: If token is expired or invalid

        Example:
            try:
                payload = SecurityUtils.decode_access_token(token, settings.SECRET_KEY)
                user_id = payload["user_id"]
            except ValueError as e:
                raise AuthenticationError(str(e))
        """
        try:
            return jwt.decode(
                token,
                secret_key,
                algorithms=[algorithm],
            )
        except jwt.ExpiredSignatureError:
            raise ValueError("Token has expired")
        except jwt.InvalidTokenError as e:
            raise ValueError(f"Invalid token: {str(e)}")
