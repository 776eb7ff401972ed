# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from pymongo.errors import PyMongoError

# Local application imports
from ...domain.repositories.payment_repository import PaymentRepository
from ...domain.models.payment import Payment
from ...domain.constants import PaymentFields
from ...domain.exceptions import InternalError
from .mongo_connection import get_payment_collection, with_timeout


class MongoPaymentRepository(PaymentRepository):
    """MongoDB implementation of PaymentRepository"""

    def __init__(self, payment_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.payment_collection = (
            payment_collection if payment_collection is not None else get_payment_collection()
        )

    async def save(self, payment: Payment) -> Payment:
        """
        Save payment (create new or update existing)

        Args:
            payment: Payment domain model to save

        Returns:
            Payment with ID set
        """
        payment_dict = {
            PaymentFields.USER_ID: payment.user_id,
            PaymentFields.AMOUNT: payment.amount,
            PaymentFields.CURRENCY: payment.currency,
            PaymentFields.STATUS: payment.status,
            PaymentFields.CHARGE_ID: payment.charge_id,
            PaymentFields.CREATED_AT: payment.created_at,
        }

        try:
            if payment.id:
                await with_timeout(
                    self.payment_collection.update_one(
                        {PaymentFields.MONGO_ID: ObjectId(payment.id)},
                        {"$set": payment_dict},
                    ),
                    "updating payment",
                )
            else:
                result = await with_timeout(self.payment_collection.insert_one(payment_dict), "inserting payment")
                payment.id = str(result.inserted_id)
        except PyMongoError as e:
            raise InternalError(f"Error saving payment for user {payment.user_id}: {str(e)}")

        return payment
