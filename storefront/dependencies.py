"""
Dependency wiring.

Provides default collaborators for the placement engine and use case.
Transports (HTTP, CLI, workers) call these instead of building adapters
themselves.
"""
from __future__ import annotations

import logging
from pathlib import Path

from dotenv import load_dotenv

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from storefront.application.services.order_placement_service import OrderPlacementEngine
from storefront.application.use_cases.place_order import PlaceOrderUseCase
from storefront.domain.services.discount_policy import DiscountPolicy
from storefront.infrastructure.adapters.identity import InMemoryIdentityResolver
from storefront.infrastructure.adapters.notifications import LoggingNotificationService
from storefront.infrastructure.adapters.persistence import InMemoryOrderRepository
from storefront.infrastructure.event_bus import InMemoryEventBus
from storefront.settings import get_app_settings

logger = logging.getLogger(__name__)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_order_repository = None
_identity_resolver = None
_notification_service = None
_event_bus = None
_placement_engine = None


# =============================================================================
# DEPENDENCIES
# =============================================================================

def get_order_repository() -> InMemoryOrderRepository:
    global _order_repository
    if _order_repository is None:
        _order_repository = InMemoryOrderRepository()
        logger.info("Created InMemoryOrderRepository instance")
    return _order_repository


def get_identity_resolver() -> InMemoryIdentityResolver:
    global _identity_resolver
    if _identity_resolver is None:
        _identity_resolver = InMemoryIdentityResolver(get_app_settings().placement)
    return _identity_resolver


def get_notification_service() -> LoggingNotificationService:
    global _notification_service
    if _notification_service is None:
        _notification_service = LoggingNotificationService(get_app_settings().placement)
    return _notification_service


def get_event_bus() -> InMemoryEventBus:
    global _event_bus
    if _event_bus is None:
        _event_bus = InMemoryEventBus()
    return _event_bus


def get_placement_engine() -> OrderPlacementEngine:
    global _placement_engine
    if _placement_engine is None:
        settings = get_app_settings()
        _placement_engine = OrderPlacementEngine(
            order_repository=get_order_repository(),
            notification_service=get_notification_service(),
            event_publisher=get_event_bus(),
            discount_policy=DiscountPolicy.from_settings(settings.placement),
        )
        logger.info(
            f"Created OrderPlacementEngine (VIP rate: {settings.placement.vip_discount_rate})"
        )
    return _placement_engine


def get_place_order_use_case() -> PlaceOrderUseCase:
    return PlaceOrderUseCase(
        identity_resolver=get_identity_resolver(),
        engine=get_placement_engine(),
    )


def reset_dependencies() -> None:
    """Drop cached singletons and settings (for testing)."""
    global _order_repository, _identity_resolver, _notification_service
    global _event_bus, _placement_engine
    _order_repository = None
    _identity_resolver = None
    _notification_service = None
    _event_bus = None
    _placement_engine = None
    get_app_settings.cache_clear()
