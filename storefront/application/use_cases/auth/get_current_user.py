# Local application imports
from ....domain.repositories.user_repository import UserRepository
from ....domain.exceptions import NotFoundError
from ...dto.user_dto import UserResponse, to_user_response


class GetCurrentUserUseCase:
    """Use case for loading the user a verified token points to"""

    def __init__(self, user_repository: UserRepository) -> None:
        self.user_repository = user_repository

    async def execute(self, user_id: str) -> UserResponse:
        """
        Get the authenticated user's profile

        Args:
            user_id: Subject of an already verified access token

        Returns:
            UserResponse with user information

        Raises:
            NotFoundError: If the user no longer exists
        """
        user = await self.user_repository.find_by_id(user_id)
        if user is None:
            raise NotFoundError(f"User {user_id} from token not found", user_message="User not found")
        return to_user_response(user)
