"""Caller authentication from bearer tokens.

Tokens are issued by the account service. Each one is signed with
``TOKEN_SECRET`` followed by the per-user ``secret_key``, so rotating a user's
key revokes all of their tokens.
"""
from dataclasses import dataclass
from typing import Optional

from fastapi import Depends, Header, HTTPException
from jose import JWTError, jwt
from sqlalchemy.ext.asyncio import AsyncSession

from tindev.core.config import settings
from tindev.core.exceptions import AuthenticationError, RoleDeniedError
from tindev.core.logging import get_logger
from tindev.database import get_db
from tindev.models.enums import Role
from tindev.repositories.user import UserRepository

logger = get_logger(__name__)


@dataclass(frozen=True)
class CurrentUser:
    """Authenticated caller."""

    user_id: str
    role: Role

    def require(self, role: Role) -> None:
        """Raise RoleDeniedError unless the caller has ``role``."""
        if self.role is not role:
            raise RoleDeniedError(self.role.value, role.value)


def bearer_token(authorization: str) -> str:
    # "Bearer <jwt>" or a bare token; the last word is the token
    return authorization.split(" ")[-1]


async def authenticate(session: AsyncSession, authorization: Optional[str]) -> CurrentUser:
    """Verify an Authorization header value.

    Args:
        session: Database session used to load the token's user
        authorization: Raw header value, may be None

    Returns:
        The authenticated caller

    Raises:
        AuthenticationError: 401 when no header is given, 400 when the token is invalid
    """
    if not authorization:
        raise AuthenticationError(
            "Missing authorization header",
            user_message="Access Denied!",
            status_code=401,
        )

    token = bearer_token(authorization)
    try:
        user_id = jwt.get_unverified_claims(token).get("_id")
    except JWTError as e:
        raise AuthenticationError("Malformed token", original_error=e) from e

    if not user_id:
        raise AuthenticationError("Token carries no user id")

    user = await UserRepository(session).get(user_id)
    if user is None:
        raise AuthenticationError("Token user does not exist", context={"user_id": user_id})

    try:
        payload = jwt.decode(
            token,
            settings.TOKEN_SECRET + user.secret_key,
            algorithms=[settings.JWT_ALGORITHM],
        )
    except JWTError as e:
        raise AuthenticationError(
            "Token signature verification failed",
            context={"user_id": user_id},
            original_error=e,
        ) from e

    try:
        role = Role(payload.get("role") or user.role)
    except ValueError as e:
        raise AuthenticationError(
            "Token carries an unknown role",
            context={"user_id": user_id},
            original_error=e,
        ) from e

    return CurrentUser(user_id=user.id, role=role)


async def get_current_user(
    authorization: Optional[str] = Header(default=None),
    session: AsyncSession = Depends(get_db),
) -> CurrentUser:
    """FastAPI dependency resolving the caller of a request."""
    try:
        return await authenticate(session, authorization)
    except AuthenticationError as e:
        raise HTTPException(status_code=e.status_code, detail=e.user_message)
