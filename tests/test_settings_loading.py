"""
Test settings loading from the environment.

Verifies that every settings section reads its aliased variables,
validates them, and that the wiring module builds the engine from them.
"""
from __future__ import annotations

from decimal import Decimal

import pytest
from pydantic import ValidationError

# Import storefront.dependencies so dotenv loads exactly once (canonical location).
import storefront.dependencies as dependencies

from storefront.application.dtos import PlaceOrderRequest
from storefront.settings import LoggingSettings, PlacementSettings, get_app_settings

from tests.factories import make_order


@pytest.fixture(autouse=True)
def fresh_dependencies():
    dependencies.reset_dependencies()
    yield
    dependencies.reset_dependencies()


def _collect_alias_map(model) -> dict[str, str]:
    """
    Return map: ENV_ALIAS -> field_name for a Pydantic model.
    """
    return {
        field.alias: field_name
        for field_name, field in type(model).model_fields.items()
        if field.alias
    }


def test_defaults():
    settings = get_app_settings()

    assert settings.placement.vip_discount_rate == Decimal("0.10")
    assert settings.placement.admin_role == "Administrator"
    assert settings.placement.notifications_enabled is True
    assert settings.logging.level == "INFO"


def test_every_field_has_a_unique_storefront_alias():
    settings = get_app_settings()
    seen: set[str] = set()

    for model in (settings.placement, settings.logging):
        for alias in _collect_alias_map(model):
            assert alias.startswith("STOREFRONT_")
            assert alias not in seen, f"Duplicate env alias mapped twice: {alias}"
            seen.add(alias)


def test_values_read_from_environment(monkeypatch):
    monkeypatch.setenv("STOREFRONT_VIP_DISCOUNT_RATE", "0.15")
    monkeypatch.setenv("STOREFRONT_ADMIN_ROLE", "Ops")
    monkeypatch.setenv("STOREFRONT_NOTIFICATIONS_ENABLED", "false")
    monkeypatch.setenv("STOREFRONT_LOG_LEVEL", "DEBUG")

    placement = PlacementSettings()

    assert placement.vip_discount_rate == Decimal("0.15")
    assert placement.admin_role == "Ops"
    assert placement.notifications_enabled is False
    assert LoggingSettings().level == "DEBUG"


@pytest.mark.parametrize("rate", ["1.5", "-0.1", "ten"])
def test_invalid_rate_rejected(monkeypatch, rate):
    monkeypatch.setenv("STOREFRONT_VIP_DISCOUNT_RATE", rate)

    with pytest.raises(ValidationError):
        PlacementSettings()


def test_app_settings_are_cached():
    assert get_app_settings() is get_app_settings()


def test_engine_uses_configured_vip_rate(monkeypatch):
    monkeypatch.setenv("STOREFRONT_VIP_DISCOUNT_RATE", "0.2")

    engine = dependencies.get_placement_engine()

    assert engine.discount_policy.vip_rate == Decimal("0.2")
    assert engine.order_repository is dependencies.get_order_repository()
    assert engine.event_publisher is dependencies.get_event_bus()


@pytest.mark.asyncio
async def test_wired_use_case_places_order():
    dependencies.get_order_repository().add(make_order(customer_id="alice", is_vip_customer=True))

    placed = await dependencies.get_place_order_use_case().execute(
        PlaceOrderRequest(order_id="1", user_id="alice")
    )

    assert placed.total_amount == Decimal("22.50")
    assert len(dependencies.get_event_bus().published_events) == 1
