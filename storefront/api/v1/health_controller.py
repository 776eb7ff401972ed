from fastapi import APIRouter

from ...application.dto.common_dto import MessageResponse


router = APIRouter(tags=["health"])


@router.get("/health", response_model=MessageResponse)
async def health() -> MessageResponse:
    return MessageResponse(success=True, message="Server is running")
