"""Actor value object."""
from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """
    Identity attempting an operation.

    Resolved outside the domain (see IdentityResolver) and passed in
    explicitly. Never looked up from ambient request context.
    """
    identifier: str
    is_administrator: bool = False

    def __post_init__(self):
        if not self.identifier:
            raise ValueError("Actor identifier cannot be empty")

    def can_act_for(self, customer_id: str) -> bool:
        """Administrators act for anyone, customers only for themselves."""
        return self.is_administrator or self.identifier == customer_id

    def __str__(self) -> str:
        return self.identifier
