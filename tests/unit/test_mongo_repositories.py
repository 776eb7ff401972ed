"""
Unit tests for the MongoDB repositories with mocked Motor collections.
"""
import asyncio
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from bson import ObjectId
from pymongo.errors import DuplicateKeyError, ServerSelectionTimeoutError

from storefront.api.errors import status_for
from storefront.domain.exceptions import ConflictError, InternalError
from storefront.domain.models.cart import Cart, CartItem
from storefront.domain.models.payment import Payment, PaymentStatus
from storefront.domain.models.user import User
from storefront.infrastructure.db.mongo_cart_repository import MongoCartRepository
from storefront.infrastructure.db.mongo_payment_repository import MongoPaymentRepository
from storefront.infrastructure.db.mongo_product_repository import MongoProductRepository
from storefront.infrastructure.db.mongo_user_repository import MongoUserRepository


def _collection() -> MagicMock:
    collection = MagicMock()
    collection.find_one = AsyncMock()
    collection.insert_one = AsyncMock()
    collection.update_one = AsyncMock()
    return collection


class TestMongoUserRepository:

    @pytest.mark.asyncio
    async def test_find_by_email_queries_lowercased(self):
        collection = _collection()
        object_id = ObjectId()
        collection.find_one.return_value = {
            "_id": object_id, "name": "Ann", "email": "a@x.com", "hashed_password": "h", "city": "Pune",
        }
        user = await MongoUserRepository(collection).find_by_email(" A@X.com ")

        collection.find_one.assert_awaited_once_with({"email": "a@x.com"})
        assert user.id == str(object_id)
        assert user.city == "Pune"

    @pytest.mark.asyncio
    async def test_malformed_id_returns_none(self):
        collection = _collection()
        assert await MongoUserRepository(collection).find_by_id("not-an-object-id") is None
        collection.find_one.assert_not_called()

    @pytest.mark.asyncio
    async def test_duplicate_key_becomes_conflict(self):
        collection = _collection()
        collection.insert_one.side_effect = DuplicateKeyError("E11000 duplicate key error")
        user = User(id=None, name="Ann", email="a@x.com", hashed_password="h")

        with pytest.raises(ConflictError) as exc_info:
            await MongoUserRepository(collection).save(user)
        assert exc_info.value.user_message == "Email already exists"

    @pytest.mark.asyncio
    async def test_driver_error_becomes_internal(self):
        collection = _collection()
        collection.find_one.side_effect = ServerSelectionTimeoutError("no servers")
        with pytest.raises(InternalError):
            await MongoUserRepository(collection).find_by_email("a@x.com")


class TestMongoProductRepository:

    @pytest.mark.asyncio
    async def test_find_by_ids_skips_malformed_ids(self):
        collection = _collection()
        object_id = ObjectId()
        cursor = MagicMock()
        cursor.to_list = AsyncMock(return_value=[{"_id": object_id, "name": "Apple", "price": 30, "stock": 5}])
        collection.find.return_value = cursor

        products = await MongoProductRepository(collection).find_by_ids([str(object_id), "bogus"])

        assert list(products) == [str(object_id)]
        assert products[str(object_id)].price == 30.0
        collection.find.assert_called_once_with({"_id": {"$in": [object_id]}})

    @pytest.mark.asyncio
    async def test_find_by_ids_with_nothing_valid_skips_query(self):
        collection = _collection()
        assert await MongoProductRepository(collection).find_by_ids(["bogus"]) == {}
        collection.find.assert_not_called()


class TestMongoCartRepository:

    @pytest.mark.asyncio
    async def test_save_upserts_by_owner(self):
        collection = _collection()
        collection.find_one.return_value = {
            "_id": ObjectId(), "user_id": "usr-1", "items": [{"product_id": "p1", "quantity": 2}],
        }
        cart = Cart(id=None, user_id="usr-1", items=[CartItem("p1", 2)])

        saved = await MongoCartRepository(collection).save(cart)

        filter_arg, update_arg = collection.update_one.await_args.args
        assert filter_arg == {"user_id": "usr-1"}
        assert update_arg["$set"]["items"] == [{"product_id": "p1", "quantity": 2}]
        assert collection.update_one.await_args.kwargs == {"upsert": True}
        assert saved.user_id == "usr-1"
        assert saved.quantity_of("p1") == 2

    @pytest.mark.asyncio
    async def test_find_by_user_missing_returns_none(self):
        collection = _collection()
        collection.find_one.return_value = None
        assert await MongoCartRepository(collection).find_by_user("usr-1") is None
        collection.find_one.assert_awaited_once_with({"user_id": "usr-1"})


class TestMongoPaymentRepository:

    @pytest.mark.asyncio
    async def test_insert_then_update(self):
        collection = _collection()
        inserted_id = ObjectId()
        collection.insert_one.return_value = MagicMock(inserted_id=inserted_id)
        repo = MongoPaymentRepository(collection)

        payment = await repo.save(Payment(id=None, user_id="usr-1", amount=500, currency="inr"))
        assert payment.id == str(inserted_id)

        payment.status = PaymentStatus.COMPLETED
        payment.charge_id = "ch_1"
        await repo.save(payment)

        filter_arg, update_arg = collection.update_one.await_args.args
        assert filter_arg == {"_id": inserted_id}
        assert update_arg["$set"]["status"] == "completed"
        assert update_arg["$set"]["charge_id"] == "ch_1"


class TestOperationTimeout:

    @pytest.mark.asyncio
    async def test_slow_query_becomes_internal_error(self):
        async def slow_find_one(*args, **kwargs):
            await asyncio.sleep(1)

        collection = _collection()
        collection.find_one.side_effect = slow_find_one
        settings = MagicMock(mongo_operation_timeout_seconds=0.01)

        with patch("storefront.infrastructure.db.mongo_connection.get_settings", return_value=settings):
            with pytest.raises(InternalError, match="Timed out") as exc_info:
                await MongoUserRepository(collection).find_by_email("a@x.com")

        assert "finding user by email" in exc_info.value.message
        assert status_for(exc_info.value) == 500
