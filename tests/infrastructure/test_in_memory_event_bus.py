"""Tests for InMemoryEventBus."""
from decimal import Decimal

import pytest

from storefront.domain.events import OrderPlacedEvent


def _event(order_id: str = "1") -> OrderPlacedEvent:
    return OrderPlacedEvent(order_id=order_id, customer_id="alice", total_amount=Decimal("25.00"))


@pytest.mark.asyncio
async def test_subscribe_and_publish(event_bus):
    received = []

    async def handler(event):
        received.append(event)

    event_bus.subscribe("OrderPlacedEvent", handler)
    event = _event()
    await event_bus.publish(event)

    assert received == [event]
    assert event_bus.published_events == [event]


@pytest.mark.asyncio
async def test_handlers_only_receive_their_event_type(event_bus):
    received = []

    async def handler(event):
        received.append(event)

    event_bus.subscribe("OrderShippedEvent", handler)
    await event_bus.publish(_event())

    assert received == []


@pytest.mark.asyncio
async def test_failing_handler_does_not_stop_others(event_bus, caplog):
    received = []

    async def broken(event):
        raise RuntimeError("boom")

    async def handler(event):
        received.append(event.order_id)

    event_bus.subscribe("OrderPlacedEvent", broken)
    event_bus.subscribe("OrderPlacedEvent", handler)

    await event_bus.publish(_event("9"))

    assert received == ["9"]
    assert "boom" in caplog.text


@pytest.mark.asyncio
async def test_publish_all_keeps_order(event_bus):
    await event_bus.publish_all([_event("1"), _event("2")])

    assert [e.order_id for e in event_bus.published_events] == ["1", "2"]
    event_bus.clear()
    assert event_bus.published_events == []
