# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.user_dto import UserProfileResponse
from ...application.use_cases.user.get_user_by_email import GetUserByEmailUseCase
from ...di.container import get_container
from .dependencies import get_current_user_id


router = APIRouter(tags=["users"])


@router.get("/user/{email}", response_model=UserProfileResponse)
async def get_user_by_email(
    email: str,
    current_user_id: str = Depends(get_current_user_id),
) -> UserProfileResponse:
    """
    Get a user profile by email

    Only the owner of the profile can read it; any other email answers 404.
    """
    container = get_container()
    get_user_use_case = container.get(GetUserByEmailUseCase)
    return await get_user_use_case.execute(email=email, requesting_user_id=current_user_id)
