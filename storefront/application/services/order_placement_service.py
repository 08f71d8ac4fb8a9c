"""
Order Placement Engine.

Moves a Draft order to Placed.

Flow:
1. Load order
2. Validate (status, items, ownership) - first failure wins, nothing mutated
3. Compute total: sum of line totals, minus the VIP discount
4. Mark placed and persist (durability boundary)
5. Run post-commit hooks: confirmation e-mail, OrderPlaced event

Post-commit hooks are best-effort: a failing hook is logged and reported in
PlacementResult.failed_hooks, it never undoes or fails the placement.
"""
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple
import logging

from storefront.application.interfaces import INotificationService
from storefront.domain.entities.order import Order
from storefront.domain.event_bus import EventPublisher
from storefront.domain.exceptions import (
    OrderNotFound,
    PersistenceFailure,
    Unauthorized,
)
from storefront.domain.repositories.order_repository import OrderRepository
from storefront.domain.services.discount_policy import DiscountPolicy
from storefront.domain.value_objects import Actor, ExecutionID, Money


logger = logging.getLogger(__name__)

PostCommitHook = Callable[[Order], Awaitable[None]]


@dataclass(frozen=True)
class PlacementResult:
    """Outcome of a successful placement."""
    order: Order
    subtotal: Money
    discount: Money
    total: Money
    execution_id: ExecutionID
    failed_hooks: Tuple[str, ...] = ()

    @property
    def notified(self) -> bool:
        """True if every post-commit hook succeeded."""
        return not self.failed_hooks


class OrderPlacementEngine:
    """
    Stateless per call; safe to share between concurrent placements of
    different orders. Concurrent placements of the same order are
    serialized by the repository.
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        notification_service: INotificationService,
        event_publisher: EventPublisher,
        discount_policy: Optional[DiscountPolicy] = None,
        extra_hooks: Sequence[PostCommitHook] = (),
    ):
        """
        Initialize engine with collaborators.

        Args:
            order_repository: Loads and saves orders
            notification_service: Sends order confirmations
            event_publisher: Publishes OrderPlacedEvent
            discount_policy: VIP discount rate (default 10%)
            extra_hooks: Additional post-commit hooks, run after the defaults
        """
        self.order_repository = order_repository
        self.notification_service = notification_service
        self.event_publisher = event_publisher
        self.discount_policy = discount_policy or DiscountPolicy()
        self.post_commit_hooks: List[PostCommitHook] = [
            self.send_order_confirmation,
            self.publish_domain_events,
            *extra_hooks,
        ]

    async def place_order(self, order_id: str, actor: Actor) -> PlacementResult:
        """
        Place a Draft order on behalf of actor.

        Raises:
            OrderNotFound: no order with this id
            InvalidState: order is not Draft, or has no items
            Unauthorized: actor is neither the customer nor an administrator
            PersistenceFailure: save failed; order stays Draft
        """
        execution_id = ExecutionID.generate()
        logger.info(f"[{execution_id}] Placing order {order_id} (actor: {actor.identifier})")

        order = await self.order_repository.find_by_id(order_id)
        if order is None:
            raise OrderNotFound(order_id)

        order.ensure_placeable()
        if not actor.can_act_for(order.customer_id):
            logger.warning(
                f"[{execution_id}] Actor {actor.identifier} may not place order {order_id} "
                f"of customer {order.customer_id}"
            )
            raise Unauthorized(order_id, actor.identifier)

        subtotal = order.calculate_subtotal()
        discount = subtotal.multiply(self.discount_policy.rate_for(order))
        total = subtotal.subtract(discount)
        logger.info(
            f"[{execution_id}] Order {order_id}: subtotal={subtotal}, "
            f"discount={discount}, total={total}"
        )

        order.place(total, execution_id)
        await self._persist(order, execution_id)

        failed_hooks = await self._run_post_commit_hooks(order, execution_id)

        logger.info(f"[{execution_id}] Order {order_id} placed")
        return PlacementResult(
            order=order,
            subtotal=subtotal,
            discount=discount,
            total=total,
            execution_id=execution_id,
            failed_hooks=failed_hooks,
        )

    async def _persist(self, order: Order, execution_id: ExecutionID) -> None:
        """Save the order; on any failure revert the in-memory placement."""
        try:
            await self.order_repository.save(order)
        except PersistenceFailure as e:
            order.revert_placement()
            logger.error(f"[{execution_id}] Failed to persist order {order.order_id}: {e}")
            raise
        except Exception as e:
            order.revert_placement()
            logger.error(
                f"[{execution_id}] Failed to persist order {order.order_id}: {e}",
                exc_info=True,
            )
            raise PersistenceFailure(
                f"Failed to persist order {order.order_id}: {e}", order_id=order.order_id
            ) from e

    async def _run_post_commit_hooks(
        self, order: Order, execution_id: ExecutionID
    ) -> Tuple[str, ...]:
        failed = []
        for hook in self.post_commit_hooks:
            name = getattr(hook, "__name__", repr(hook))
            try:
                await hook(order)
            except Exception as e:
                failed.append(name)
                logger.error(
                    f"[{execution_id}] Post-commit hook {name} failed for order "
                    f"{order.order_id}: {e}",
                    exc_info=True,
                )
        return tuple(failed)

    # =========================================================================
    # DEFAULT POST-COMMIT HOOKS
    # =========================================================================

    async def send_order_confirmation(self, order: Order) -> None:
        await self.notification_service.send_order_confirmation(order)

    async def publish_domain_events(self, order: Order) -> None:
        try:
            await self.event_publisher.publish_all(order.get_domain_events())
        finally:
            order.clear_domain_events()
