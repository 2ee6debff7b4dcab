from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from commerce_core.domain.entities import Member
    from commerce_core.domain.specifications import Specification
    from commerce_core.domain.value_objects import Email, MemberId


class MemberRepository(ABC):
    """Port for member persistence.

    Contract:
    - Lookups return None if the member does not exist (no exception)
    - save() performs upsert: creates if new, updates if exists
    - E-mail addresses are unique; uniqueness is checked by the use case
    - Implementations are NOT thread-safe; callers must ensure serialization
    """

    @abstractmethod
    def get(self, member_id: MemberId) -> Member | None:
        """Retrieve a member by ID."""

    @abstractmethod
    def get_by_email(self, email: Email) -> Member | None:
        """Retrieve a member by normalized e-mail address."""

    @abstractmethod
    def find_satisfying(self, specification: Specification[Member]) -> list[Member]:
        """All members satisfying ``specification``, in insertion order."""

    @abstractmethod
    def save(self, member: Member) -> Member:
        """Persist a member (upsert semantics) and return it."""
