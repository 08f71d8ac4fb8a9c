"""
In-Memory Identity Resolver.

Maps user ids to role sets; administrator status is membership of the
configured administrator role.
"""
from typing import Dict, Iterable, Set
import logging

from storefront.application.interfaces import IdentityResolver
from storefront.domain.value_objects import Actor
from storefront.settings.sections.placement import PlacementSettings


logger = logging.getLogger(__name__)


class InMemoryIdentityResolver(IdentityResolver):
    """
    Role-based resolver over an in-memory user table.

    Unknown users resolve to a non-administrator Actor: they can still
    place their own orders.
    """

    def __init__(self, settings: PlacementSettings):
        self.admin_role = settings.admin_role
        self._roles: Dict[str, Set[str]] = {}

    def register(self, user_id: str, roles: Iterable[str] = ()) -> None:
        """Register a user and its roles."""
        self._roles[user_id] = set(roles)

    async def resolve(self, user_id: str) -> Actor:
        roles = self._roles.get(user_id)
        if roles is None:
            logger.debug(f"Unknown user {user_id}, resolving without roles")
            roles = set()
        return Actor(identifier=user_id, is_administrator=self.admin_role in roles)
