"""Tests for notification and identity adapters."""
import logging

import pytest

from storefront.domain.value_objects import Actor, Money
from storefront.infrastructure.adapters.identity import InMemoryIdentityResolver
from storefront.infrastructure.adapters.notifications import (
    LoggingNotificationService,
    MockNotificationService,
)
from storefront.infrastructure.logging import configure_logging, get_logger
from storefront.settings import LoggingSettings, PlacementSettings

from tests.factories import make_order


@pytest.mark.asyncio
async def test_logging_notification_writes_confirmation(caplog):
    order = make_order(order_id="77")
    order.place(Money.parse("25.00"))
    service = LoggingNotificationService(PlacementSettings())

    with caplog.at_level(logging.INFO):
        await service.send_order_confirmation(order)

    assert "Sending order confirmation e-mail for order with ID 77" in caplog.text


@pytest.mark.asyncio
async def test_logging_notification_can_be_disabled(caplog):
    service = LoggingNotificationService(PlacementSettings(notifications_enabled=False))

    with caplog.at_level(logging.INFO):
        await service.send_order_confirmation(make_order())

    assert "Sending order confirmation" not in caplog.text


@pytest.mark.asyncio
async def test_mock_notification_records_and_clears():
    service = MockNotificationService()
    order = make_order()
    order.place(Money.parse("25.00"))

    await service.send_order_confirmation(order)

    assert service.get_notifications() == [
        {"type": "order_confirmation", "order_id": "1", "customer_id": "alice", "total": "25.00"}
    ]
    service.clear()
    assert service.get_notifications() == []


@pytest.mark.asyncio
async def test_identity_resolver_uses_configured_admin_role():
    resolver = InMemoryIdentityResolver(PlacementSettings(admin_role="Ops"))
    resolver.register("dave", roles=["Ops"])
    resolver.register("erin", roles=["Administrator"])

    assert await resolver.resolve("dave") == Actor(identifier="dave", is_administrator=True)
    assert await resolver.resolve("erin") == Actor(identifier="erin", is_administrator=False)
    assert (await resolver.resolve("nobody")).is_administrator is False


def test_actor_can_act_for():
    assert Actor(identifier="alice").can_act_for("alice")
    assert not Actor(identifier="alice").can_act_for("bob")
    assert Actor(identifier="root", is_administrator=True).can_act_for("bob")


def test_actor_requires_identifier():
    with pytest.raises(ValueError):
        Actor(identifier="")


@pytest.fixture
def storefront_logger():
    logger = logging.getLogger("storefront")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers[:] = handlers
    logger.setLevel(level)


def test_configure_logging_applies_level(storefront_logger):
    storefront_logger.handlers.clear()

    configure_logging(LoggingSettings(level="debug"))
    assert storefront_logger.level == logging.DEBUG
    assert len(storefront_logger.handlers) == 1

    configure_logging(LoggingSettings(level="WARNING"))
    assert storefront_logger.level == logging.WARNING
    assert len(storefront_logger.handlers) == 1


def test_get_logger_installs_single_handler():
    logger = get_logger("storefront.tests.single_handler")
    again = get_logger("storefront.tests.single_handler")

    assert logger is again
    assert len(logger.handlers) == 1
