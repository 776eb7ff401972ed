"""
Unit tests for cart use cases (Get, Add, Update, Remove).
"""
import pytest

from storefront.application.dto.cart_dto import AddCartItemRequest, UpdateCartItemRequest
from storefront.application.use_cases.cart import (
    AddCartItemUseCase,
    GetCartUseCase,
    RemoveCartItemUseCase,
    UpdateCartItemUseCase,
)
from storefront.domain.exceptions import NotFoundError, ValidationError
from storefront.domain.models.user import User


async def _register(user_repo, name: str, email: str) -> str:
    user = await user_repo.save(User(id=None, name=name, email=email, hashed_password="h"))
    return user.id


@pytest.fixture
def deps(user_repo, cart_repo, product_repo):
    return user_repo, cart_repo, product_repo


class TestGetCartUseCase:

    @pytest.mark.asyncio
    async def test_empty_cart_for_new_user(self, deps, user_repo, cart_repo):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        result = await GetCartUseCase(*deps).execute(user_id)

        assert result.success is True
        assert result.items == []
        assert result.total_items == 0
        assert result.total_amount == 0
        assert cart_repo.saved_for == []

    @pytest.mark.asyncio
    async def test_unknown_user_raises_not_found(self, deps):
        with pytest.raises(NotFoundError) as exc_info:
            await GetCartUseCase(*deps).execute("64b7f0c2a1b2c3d4e5f60718")
        assert exc_info.value.user_message == "User not found"

    @pytest.mark.asyncio
    async def test_lines_for_deleted_products_are_left_out(self, deps, user_repo, product_repo, apple, milk):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        add = AddCartItemUseCase(*deps)
        await add.execute(user_id, AddCartItemRequest(productId=apple.id, quantity=2))
        await add.execute(user_id, AddCartItemRequest(productId=milk.id, quantity=1))

        del product_repo.products[milk.id]
        result = await GetCartUseCase(*deps).execute(user_id)

        assert [line.product.id for line in result.items] == [apple.id]
        assert result.total_items == 2
        assert result.total_amount == 60.0


class TestAddCartItemUseCase:

    @pytest.mark.asyncio
    async def test_adding_same_product_twice_merges_lines(self, deps, user_repo, apple):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        use_case = AddCartItemUseCase(*deps)

        await use_case.execute(user_id, AddCartItemRequest(productId=apple.id, quantity=2))
        result = await use_case.execute(user_id, AddCartItemRequest(productId=apple.id, quantity=3))

        assert len(result.items) == 1
        assert result.items[0].quantity == 5
        assert result.items[0].line_total == 150.0
        assert result.total_amount == 150.0

    @pytest.mark.asyncio
    async def test_carts_are_isolated_per_user(self, deps, user_repo, cart_repo, apple, milk):
        ann = await _register(user_repo, "Ann", "ann@x.com")
        bob = await _register(user_repo, "Bob", "bob@x.com")
        add = AddCartItemUseCase(*deps)

        await add.execute(ann, AddCartItemRequest(productId=apple.id, quantity=1))
        await add.execute(bob, AddCartItemRequest(productId=milk.id, quantity=2))

        ann_cart = await GetCartUseCase(*deps).execute(ann)
        bob_cart = await GetCartUseCase(*deps).execute(bob)
        assert [line.product.id for line in ann_cart.items] == [apple.id]
        assert [line.product.id for line in bob_cart.items] == [milk.id]
        assert cart_repo.saved_for == [ann, bob]

    @pytest.mark.asyncio
    async def test_unknown_product_raises_not_found(self, deps, user_repo, cart_repo):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        with pytest.raises(NotFoundError) as exc_info:
            await AddCartItemUseCase(*deps).execute(user_id, AddCartItemRequest(productId="missing"))
        assert exc_info.value.user_message == "Product not found"
        assert cart_repo.saved_for == []

    @pytest.mark.asyncio
    async def test_stock_limit_counts_quantity_already_in_cart(self, deps, user_repo, cart_repo, milk):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        use_case = AddCartItemUseCase(*deps)
        await use_case.execute(user_id, AddCartItemRequest(productId=milk.id, quantity=2))

        with pytest.raises(ValidationError) as exc_info:
            await use_case.execute(user_id, AddCartItemRequest(productId=milk.id, quantity=2))
        assert exc_info.value.user_message == "Only 3 items left in stock"

        stored = await cart_repo.find_by_user(user_id)
        assert stored.quantity_of(milk.id) == 2


class TestUpdateAndRemoveCartItem:

    @pytest.mark.asyncio
    async def test_update_sets_quantity(self, deps, user_repo, apple):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        await AddCartItemUseCase(*deps).execute(user_id, AddCartItemRequest(productId=apple.id, quantity=4))

        result = await UpdateCartItemUseCase(*deps).execute(user_id, apple.id, UpdateCartItemRequest(quantity=1))
        assert result.items[0].quantity == 1
        assert result.total_amount == 30.0

    @pytest.mark.asyncio
    async def test_update_beyond_stock_rejected(self, deps, user_repo, milk):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        await AddCartItemUseCase(*deps).execute(user_id, AddCartItemRequest(productId=milk.id))

        with pytest.raises(ValidationError):
            await UpdateCartItemUseCase(*deps).execute(user_id, milk.id, UpdateCartItemRequest(quantity=4))

    @pytest.mark.asyncio
    async def test_update_item_not_in_cart(self, deps, user_repo, apple):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        with pytest.raises(NotFoundError) as exc_info:
            await UpdateCartItemUseCase(*deps).execute(user_id, apple.id, UpdateCartItemRequest(quantity=1))
        assert exc_info.value.user_message == "Item not found in cart"

    @pytest.mark.asyncio
    async def test_remove_line(self, deps, user_repo, apple, milk):
        user_id = await _register(user_repo, "Ann", "ann@x.com")
        add = AddCartItemUseCase(*deps)
        await add.execute(user_id, AddCartItemRequest(productId=apple.id))
        await add.execute(user_id, AddCartItemRequest(productId=milk.id))

        result = await RemoveCartItemUseCase(*deps).execute(user_id, apple.id)
        assert [line.product.id for line in result.items] == [milk.id]

        with pytest.raises(NotFoundError):
            await RemoveCartItemUseCase(*deps).execute(user_id, apple.id)
