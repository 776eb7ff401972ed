# External package imports
from fastapi import APIRouter, Depends

# Local application imports
from ...application.dto.payment_dto import PaymentRequest, PaymentResponse
from ...application.use_cases.payment.create_payment import CreatePaymentUseCase
from ...di.container import get_container
from .dependencies import get_current_user_id


router = APIRouter(tags=["payment"])


@router.post("/payment", response_model=PaymentResponse)
async def create_payment(
    request: PaymentRequest,
    current_user_id: str = Depends(get_current_user_id),
) -> PaymentResponse:
    """
    Charge the authenticated user through the payment processor

    Args:
        request: Processor token (or token object) and amount in minor units

    Returns:
        PaymentResponse whose ``data`` is the processor charge ID
    """
    container = get_container()
    create_payment_use_case = container.get(CreatePaymentUseCase)
    return await create_payment_use_case.execute(user_id=current_user_id, request=request)
