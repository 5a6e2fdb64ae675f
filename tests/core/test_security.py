"""Tests for bearer token authentication."""
import pytest
from jose import jwt

from tindev.core.config import settings
from tindev.core.exceptions import AuthenticationError, RoleDeniedError
from tindev.core.security import CurrentUser, authenticate, bearer_token
from tindev.models import Role


def make_token(user_id: str, role: str, secret_key: str = "user-salt") -> str:
    return jwt.encode(
        {"_id": user_id, "role": role},
        settings.TOKEN_SECRET + secret_key,
        algorithm=settings.JWT_ALGORITHM,
    )


def test_bearer_token_takes_last_word():
    """Test header parsing."""
    assert bearer_token("Bearer abc.def") == "abc.def"
    assert bearer_token("abc.def") == "abc.def"


async def test_authenticate_valid_token(db_session, make_user):
    """Test a correctly signed token yields the caller."""
    user = await make_user(role="Company")

    current_user = await authenticate(db_session, f"Bearer {make_token(user.id, 'Company')}")

    assert current_user == CurrentUser(user_id=user.id, role=Role.COMPANY)


async def test_missing_header(db_session):
    """Test missing header is a 401."""
    with pytest.raises(AuthenticationError) as exc_info:
        await authenticate(db_session, None)

    assert exc_info.value.status_code == 401
    assert exc_info.value.user_message == "Access Denied!"


@pytest.mark.parametrize("header", ["Bearer not-a-jwt", "Bearer "])
async def test_malformed_token(db_session, header):
    """Test garbage tokens are a 400."""
    with pytest.raises(AuthenticationError) as exc_info:
        await authenticate(db_session, header)

    assert exc_info.value.status_code == 400
    assert exc_info.value.user_message == "Invalid Token"


async def test_wrong_user_salt(db_session, make_user):
    """Test tokens signed with a rotated salt are rejected."""
    user = await make_user(secret_key="new-salt")
    token = make_token(user.id, "Developer", secret_key="old-salt")

    with pytest.raises(AuthenticationError) as exc_info:
        await authenticate(db_session, f"Bearer {token}")

    assert exc_info.value.status_code == 400


async def test_unknown_user(db_session):
    """Test tokens for deleted users are rejected."""
    with pytest.raises(AuthenticationError):
        await authenticate(db_session, f"Bearer {make_token('ghost', 'Developer')}")


async def test_unknown_role(db_session, make_user):
    """Test tokens with a role outside Company and Developer."""
    user = await make_user(role="Admin")

    with pytest.raises(AuthenticationError):
        await authenticate(db_session, f"Bearer {make_token(user.id, 'Admin')}")


def test_require_role():
    """Test role guard."""
    caller = CurrentUser(user_id="u1", role=Role.DEVELOPER)

    caller.require(Role.DEVELOPER)
    with pytest.raises(RoleDeniedError):
        caller.require(Role.COMPANY)
