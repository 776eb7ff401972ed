from typing import Any

from pydantic import BaseModel, Field, field_validator


class PaymentRequest(BaseModel):
    """
    DTO for a payment request.

    ``token`` is what the processor's browser SDK produced: either the token
    id itself or the whole token object, in which case its ``id`` is used.
    ``amount`` is in minor currency units (paise, cents).
    """
    token: str = Field(min_length=1)
    amount: int = Field(gt=0)

    @field_validator("token", mode="before")
    @classmethod
    def _extract_token_id(cls, value: Any) -> Any:
        if isinstance(value, dict):
            return value.get("id")
        return value


class PaymentResponse(BaseModel):
    """DTO for a successful payment: ``data`` carries the processor charge id"""
    success: bool = True
    data: str
