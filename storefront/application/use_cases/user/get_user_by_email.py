# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.models.user import normalize_email
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserProfile, UserProfileResponse


class GetUserByEmailUseCase:
    """Use case for looking up a user profile by email"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, email: str, requesting_user_id: str) -> UserProfileResponse:
        """
        Get a user's public profile by email

        Args:
            email: Email to look up (case-insensitive)
            requesting_user_id: ID of the authenticated caller (for authorization check)

        Returns:
            UserProfileResponse with name, email, city and phone number

        Raises:
            NotFoundError: If no such user exists or it is not the caller
        """
        user = await self.user_repository.find_by_email(normalize_email(email))

        if user is None:
            raise NotFoundError(f"No user with email {email}", user_message="User not found")

        if user.id != requesting_user_id:
            raise NotFoundError(f"User {requesting_user_id} asked for another user's profile",
                                user_message="User not found")

        return UserProfileResponse(
            data=UserProfile(
                name=user.name,
                email=user.email,
                city=user.city,
                phone_number=user.phone_number,
            )
        )
