from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commerce_core.domain.events import DomainEvent


class EventPublisher(ABC):
    """Port for publishing domain events.

    Contract:
    - publish() is fire-and-forget: it MUST NOT raise because a subscriber
      failed, and callers never inspect delivery outcome
    - Events are published in the order they were recorded
    - The publisher is injected into use cases; nothing in the domain
      holds a reference to it
    """

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Publish a single domain event."""

    def publish_all(self, events: list[DomainEvent]) -> None:
        for event in events:
            self.publish(event)
