from .get_user_by_email import GetUserByEmailUseCase

__all__ = ["GetUserByEmailUseCase"]
