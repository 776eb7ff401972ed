from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...application.use_cases.user.get_user_by_email import GetUserByEmailUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UserProvider:
    """User profile use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            GetUserByEmailUseCase,
            lambda: GetUserByEmailUseCase(
                user_repository=container.get(UserRepository)
            )
        )
