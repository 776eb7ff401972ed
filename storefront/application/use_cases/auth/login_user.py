# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import AuthenticationError
from ....core.security import verify_password, create_jwt_token
from ...dto.auth_dto import UserLoginRequest, AuthResponse
from ...dto.user_dto import to_user_response

logger = logging.getLogger(__name__)

INVALID_CREDENTIALS_MESSAGE = "Invalid email or password"


class LoginUserUseCase:
    """Use case for authenticating a user and generating JWT token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserLoginRequest) -> AuthResponse:
        """
        Authenticate user and generate access token

        Unknown email and wrong password raise the same error so the caller
        cannot tell which one was wrong.

        Args:
            request: Login request with email and password

        Returns:
            AuthResponse with an access token and the user's profile

        Raises:
            AuthenticationError: If the credentials do not match a user
        """
        user = await self.user_repository.find_by_email(request.email)
        if user is None:
            logger.info("Login failed: unknown email")
            raise AuthenticationError("Login failed: user not found", user_message=INVALID_CREDENTIALS_MESSAGE)

        password_ok = await asyncio.to_thread(verify_password, request.password, user.hashed_password)
        if not password_ok:
            logger.info(f"Login failed: wrong password for user {user.id}")
            raise AuthenticationError("Login failed: password mismatch", user_message=INVALID_CREDENTIALS_MESSAGE)

        token = create_jwt_token(user.id or "", {"email": user.email})
        logger.info(f"User {user.id} logged in")

        return AuthResponse(
            message="Login successful",
            token=token,
            user=to_user_response(user),
        )
