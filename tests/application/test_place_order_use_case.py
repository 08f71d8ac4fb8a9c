"""Tests for PlaceOrderUseCase."""
from decimal import Decimal

import pytest
from pydantic import ValidationError

from storefront.application.dtos import PlaceOrderRequest
from storefront.application.use_cases import PlaceOrderUseCase
from storefront.domain.exceptions import OrderNotFound, Unauthorized
from storefront.infrastructure.adapters.identity import InMemoryIdentityResolver
from storefront.settings import PlacementSettings

from tests.factories import make_order


@pytest.fixture
def identity_resolver():
    resolver = InMemoryIdentityResolver(PlacementSettings())
    resolver.register("alice", roles=["Customer"])
    resolver.register("carol", roles=["Customer", "Administrator"])
    return resolver


@pytest.fixture
def use_case(identity_resolver, engine):
    return PlaceOrderUseCase(identity_resolver=identity_resolver, engine=engine)


@pytest.mark.asyncio
async def test_customer_places_own_vip_order(use_case, repository):
    repository.add(make_order(customer_id="alice", is_vip_customer=True))

    placed = await use_case.execute(PlaceOrderRequest(order_id="1", user_id="alice"))

    assert placed.status == "Placed"
    assert placed.customer_id == "alice"
    assert placed.subtotal_amount == Decimal("25.00")
    assert placed.discount_amount == Decimal("2.50")
    assert placed.total_amount == Decimal("22.50")
    assert placed.notified is True
    assert [item.line_total_amount for item in placed.items] == [Decimal("20.00"), Decimal("5.00")]


@pytest.mark.asyncio
async def test_administrator_role_places_any_order(use_case, repository):
    repository.add(make_order(customer_id="alice"))

    placed = await use_case.execute(PlaceOrderRequest(order_id="1", user_id="carol"))

    assert placed.total_amount == Decimal("25.00")


@pytest.mark.asyncio
async def test_unknown_user_is_not_administrator(use_case, repository):
    repository.add(make_order(customer_id="alice"))

    with pytest.raises(Unauthorized):
        await use_case.execute(PlaceOrderRequest(order_id="1", user_id="stranger"))


@pytest.mark.asyncio
async def test_engine_errors_propagate(use_case):
    with pytest.raises(OrderNotFound):
        await use_case.execute(PlaceOrderRequest(order_id="404", user_id="alice"))


def test_request_requires_ids():
    with pytest.raises(ValidationError):
        PlaceOrderRequest(order_id="", user_id="alice")
