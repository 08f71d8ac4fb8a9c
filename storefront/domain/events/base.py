"""
Base Domain Event.

Aggregates collect events while changing state; the application layer
publishes them once the change has been persisted.
"""
from dataclasses import dataclass, field, fields
from datetime import datetime, timezone
from decimal import Decimal
from typing import Optional, Dict, Any
import uuid


@dataclass
class DomainEvent:
    """Record of a state change, keyed by the aggregate it happened to."""

    event_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    event_type: str = field(init=False)
    aggregate_id: str = ""

    # Placement that raised the event, for log correlation
    execution_id: Optional[str] = None
    user_id: Optional[str] = None

    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    def __post_init__(self):
        self.event_type = self.__class__.__name__

    def to_dict(self) -> Dict[str, Any]:
        """
        Serialize for a message bus.

        Subclass fields go under "data"; Decimals are rendered as strings.
        """
        base_names = {f.name for f in fields(DomainEvent)}
        data = {}
        for f in fields(self):
            if f.name in base_names:
                continue
            value = getattr(self, f.name)
            data[f.name] = str(value) if isinstance(value, Decimal) else value

        return {
            "event_id": self.event_id,
            "event_type": self.event_type,
            "aggregate_id": self.aggregate_id,
            "execution_id": self.execution_id,
            "user_id": self.user_id,
            "occurred_at": self.occurred_at.isoformat(),
            "data": data,
        }
