# Standard library imports
import asyncio
import logging

# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import User
from ....domain.exceptions import ConflictError, ValidationError
from ....core.security import hash_password, create_jwt_token
from ....utils.datetime_utils import utc_now
from ...dto.auth_dto import UserRegistrationRequest, AuthResponse
from ...dto.user_dto import to_user_response

logger = logging.getLogger(__name__)


class RegisterUserUseCase:
    """Use case for registering a new user and issuing their first access token"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, request: UserRegistrationRequest) -> AuthResponse:
        """
        Register a new user

        Args:
            request: Registration request with user details (already validated)

        Returns:
            AuthResponse with an access token and the created user's profile

        Raises:
            ConflictError: If a user with this email already exists
            ValidationError: If the user entity rejects the input
        """
        # Check if user already exists
        existing_user = await self.user_repository.find_by_email(request.email)
        if existing_user is not None:
            raise ConflictError(f"Registration rejected, email taken: {request.email}",
                                user_message="Email already exists")

        # bcrypt is deliberately slow; keep it off the event loop
        hashed_password = await asyncio.to_thread(hash_password, request.password)

        try:
            new_user = User(
                id=None,  # Will be set by repository
                name=request.name,
                email=request.email,
                hashed_password=hashed_password,
                phone_number=request.phone_number,
                city=request.city,
                created_at=utc_now(),
            )
        except ValueError as exception:
            raise ValidationError(str(exception))

        # Unique index on email re-checks this at insert time (ConflictError)
        saved_user = await self.user_repository.save(new_user)
        logger.info(f"Registered user {saved_user.id}")

        token = create_jwt_token(saved_user.id or "", {"email": saved_user.email})
        return AuthResponse(
            message="Registration successful",
            token=token,
            user=to_user_response(saved_user),
        )
