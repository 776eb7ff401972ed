# Standard library imports
from typing import Optional

# External package imports
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

# Local application imports
from ...application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from ...application.dto.user_dto import UserResponse
from ...core.security import decode_jwt_token
from ...di.container import get_container


# auto_error=False so a missing header reaches decode_jwt_token and gets the 401 envelope
security_scheme = HTTPBearer(auto_error=False)


async def get_current_user_id(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
) -> str:
    """
    FastAPI dependency returning the user ID of a verified bearer token

    Args:
        credentials: HTTP Bearer token credentials (None if header missing)

    Returns:
        The token's subject (user ID)

    Raises:
        AuthenticationError: If the token is missing, malformed, invalid or expired
    """
    token = credentials.credentials if credentials else None
    payload = decode_jwt_token(token)
    return str(payload["sub"])


async def get_current_user(user_id: str = Depends(get_current_user_id)) -> UserResponse:
    """
    FastAPI dependency to get current authenticated user from JWT token

    Raises:
        NotFoundError: If the token's user no longer exists
    """
    container = get_container()
    get_current_user_use_case = container.get(GetCurrentUserUseCase)
    return await get_current_user_use_case.execute(user_id)
