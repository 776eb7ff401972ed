from pydantic import BaseModel


class MessageResponse(BaseModel):
    """Plain success/message envelope (health check, errors)"""
    success: bool
    message: str
