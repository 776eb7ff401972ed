# External package imports
from fastapi import APIRouter, Depends, status

# Local application imports
from ...application.dto.auth_dto import UserRegistrationRequest, UserLoginRequest, AuthResponse
from ...application.dto.user_dto import UserResponse, CurrentUserResponse
from ...application.use_cases.auth.register_user import RegisterUserUseCase
from ...application.use_cases.auth.login_user import LoginUserUseCase
from ...di.container import get_container
from .dependencies import get_current_user


router = APIRouter(tags=["authentication"])


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register_user(request: UserRegistrationRequest) -> AuthResponse:
    """
    Register a new user

    Args:
        request: User registration request

    Returns:
        AuthResponse with access token and created user information
    """
    container = get_container()
    register_use_case = container.get(RegisterUserUseCase)
    return await register_use_case.execute(request)


@router.post("/login", response_model=AuthResponse)
async def login_user(request: UserLoginRequest) -> AuthResponse:
    """
    Authenticate user and get access token

    Unknown email and wrong password both answer 401 "Invalid email or password".
    """
    container = get_container()
    login_use_case = container.get(LoginUserUseCase)
    return await login_use_case.execute(request)


@router.get("/me", response_model=CurrentUserResponse)
async def get_me(current_user: UserResponse = Depends(get_current_user)) -> CurrentUserResponse:
    """
    Get current authenticated user information
    """
    return CurrentUserResponse(data=current_user)
