# Standard library imports
import logging

# Local application imports
from ....domain.repositories.payment_repository import PaymentRepository
from ....domain.payment_gateway import PaymentGateway
from ....domain.models.payment import Payment, PaymentStatus
from ....utils.datetime_utils import utc_now
from ...dto.payment_dto import PaymentRequest, PaymentResponse

logger = logging.getLogger(__name__)


class CreatePaymentUseCase:
    """Use case for charging the authenticated user through the payment processor"""

    def __init__(
        self,
        payment_repository: PaymentRepository,
        payment_gateway: PaymentGateway,
        currency: str,
        description: str,
    ) -> None:
        self.payment_repository = payment_repository
        self.payment_gateway = payment_gateway
        self.currency = currency
        self.description = description

    async def execute(self, user_id: str, request: PaymentRequest) -> PaymentResponse:
        """
        Forward a charge to the processor and record the outcome

        A pending payment record is written before the charge so that an
        attempt is never lost, then updated to completed or failed.

        Args:
            user_id: ID of the authenticated user
            request: Processor source token and amount in minor units

        Returns:
            PaymentResponse with the processor charge ID

        Raises:
            UpstreamError: If the processor rejects the charge or cannot be reached
        """
        payment = await self.payment_repository.save(
            Payment(
                id=None,
                user_id=user_id,
                amount=request.amount,
                currency=self.currency,
                created_at=utc_now(),
            )
        )

        try:
            charge_id = await self.payment_gateway.create_charge(
                source_token=request.token,
                amount=request.amount,
                currency=self.currency,
                description=self.description,
            )
        except Exception as e:
            payment.status = PaymentStatus.FAILED
            await self.payment_repository.save(payment)
            logger.warning(f"Payment {payment.id} for user {user_id} failed: {e}")
            raise

        payment.status = PaymentStatus.COMPLETED
        payment.charge_id = charge_id
        await self.payment_repository.save(payment)
        logger.info(f"Payment {payment.id} for user {user_id} completed: charge {charge_id}")

        return PaymentResponse(data=charge_id)
