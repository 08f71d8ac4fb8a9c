"""
End-to-End Demo: Order Placement

This demonstrates the complete workflow:
1. Seed Draft orders into the repository
2. Resolve actors from user roles
3. Place orders (regular and VIP customer)
4. Show rejected placements (wrong customer, already placed)
5. Show published events

Uses in-memory adapters (no database or mail server needed).
"""
import asyncio
from decimal import Decimal

from storefront.application.dtos import PlaceOrderRequest
from storefront.dependencies import (
    get_event_bus,
    get_identity_resolver,
    get_order_repository,
    get_place_order_use_case,
)
from storefront.domain import Money, Order, OrderItem, StorefrontError
from storefront.infrastructure.logging import configure_logging, get_logger

configure_logging()
logger = get_logger(__name__)


def _seed() -> None:
    repository = get_order_repository()
    items = [
        OrderItem(product_id="P-100", price=Money.parse("10.00"), quantity=2),
        OrderItem(product_id="P-200", price=Money.parse("5.00"), quantity=1),
    ]
    repository.add(Order(order_id="1001", customer_id="alice", items=list(items)))
    repository.add(
        Order(order_id="1002", customer_id="bob", items=list(items), is_vip_customer=True)
    )

    resolver = get_identity_resolver()
    resolver.register("alice", roles=["Customer"])
    resolver.register("bob", roles=["Customer"])
    resolver.register("carol", roles=["Administrator"])


async def _place(order_id: str, user_id: str) -> None:
    use_case = get_place_order_use_case()
    try:
        placed = await use_case.execute(PlaceOrderRequest(order_id=order_id, user_id=user_id))
    except StorefrontError as e:
        print(f"  ✗ order {order_id} by {user_id}: {type(e).__name__}: {e}")
        return
    print(
        f"  ✓ order {order_id} by {user_id}: subtotal={placed.subtotal_amount} "
        f"discount={placed.discount_amount} total={placed.total_amount}"
    )


async def main():
    print("\n" + "=" * 80)
    print("DEMO: Order Placement")
    print("=" * 80 + "\n")

    _seed()

    await _place("1001", "bob")      # not the owner
    await _place("1001", "alice")    # owner, regular customer
    await _place("1001", "alice")    # already placed
    await _place("1002", "carol")    # administrator, VIP order
    await _place("9999", "alice")    # missing

    print("\nPublished events:")
    for event in get_event_bus().published_events:
        data = event.to_dict()["data"]
        print(f"  {event.event_type}: order={data['order_id']} total={data['total_amount']}")

    assert Decimal(get_event_bus().published_events[-1].total_amount) == Decimal("22.50")
    logger.info("Demo finished")


if __name__ == "__main__":
    asyncio.run(main())
