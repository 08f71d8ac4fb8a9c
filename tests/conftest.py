"""Shared fixtures for storefront tests."""
from decimal import Decimal

import pytest

from storefront.application.services.order_placement_service import OrderPlacementEngine
from storefront.domain.services.discount_policy import DiscountPolicy
from storefront.domain.value_objects import Actor
from storefront.infrastructure.adapters.notifications import MockNotificationService
from storefront.infrastructure.adapters.persistence import InMemoryOrderRepository
from storefront.infrastructure.event_bus import InMemoryEventBus


@pytest.fixture
def repository():
    return InMemoryOrderRepository()


@pytest.fixture
def notification_service():
    return MockNotificationService()


@pytest.fixture
def event_bus():
    return InMemoryEventBus()


@pytest.fixture
def engine(repository, notification_service, event_bus):
    return OrderPlacementEngine(
        order_repository=repository,
        notification_service=notification_service,
        event_publisher=event_bus,
        discount_policy=DiscountPolicy(vip_rate=Decimal("0.10")),
    )


@pytest.fixture
def alice():
    return Actor(identifier="alice")


@pytest.fixture
def admin():
    return Actor(identifier="carol", is_administrator=True)
