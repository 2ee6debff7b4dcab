from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from commerce_core.domain.events import (
    DomainEvent,
    EventRecorder,
    MemberActivated,
    MemberCreated,
    MemberDeactivated,
)
from commerce_core.domain.exceptions import InvalidMemberError
from commerce_core.domain.value_objects import Email, MemberId, PhoneNumber

if TYPE_CHECKING:
    from datetime import datetime

    from commerce_core.domain.entities.order import Order


class MemberStatus(Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


@dataclass(eq=False)
class Member(EventRecorder):
    """Member aggregate: holds its orders and an ACTIVE ⇄ INACTIVE lifecycle.

    activate() and deactivate() are unconditional and record an event on
    every call, including repeated ones. Orders may be added in any status.

    Raw strings are accepted for ``email`` and ``phone_number``; phone
    strings are parsed as Korean numbers.
    """

    id: MemberId
    email: Email
    name: str
    phone_number: PhoneNumber
    status: MemberStatus = MemberStatus.ACTIVE
    orders: list[Order] = field(default_factory=list, repr=False)
    created_at: datetime | None = None
    _pending_events: list[DomainEvent] = field(default_factory=list, init=False, repr=False)

    def __post_init__(self) -> None:
        _validate_name(self.name)
        if self.email is None:
            raise InvalidMemberError("Email cannot be null")
        if self.phone_number is None:
            raise InvalidMemberError("Phone number cannot be null")
        if not isinstance(self.email, Email):
            self.email = Email.of(self.email)
        if not isinstance(self.phone_number, PhoneNumber):
            self.phone_number = PhoneNumber.korean(self.phone_number)

    @classmethod
    def register(
        cls,
        email: Email | str,
        name: str,
        phone_number: PhoneNumber | str,
        created_at: datetime | None = None,
    ) -> Member:
        """Create an ACTIVE member and record MemberCreated."""
        member = cls(
            id=MemberId.generate(),
            email=email,  # type: ignore[arg-type]
            name=name,
            phone_number=phone_number,  # type: ignore[arg-type]
            created_at=created_at,
        )
        member._record(MemberCreated(member_id=member.id, email=str(member.email), name=name))
        return member

    @property
    def is_active(self) -> bool:
        return self.status == MemberStatus.ACTIVE

    def add_order(self, order: Order) -> None:
        if order is None:
            raise InvalidMemberError("Order cannot be null")
        self.orders.append(order)
        order.assign_member(self)

    def activate(self) -> None:
        self.status = MemberStatus.ACTIVE
        self._record(MemberActivated(member_id=self.id, email=str(self.email)))

    def deactivate(self) -> None:
        self.status = MemberStatus.INACTIVE
        self._record(MemberDeactivated(member_id=self.id, email=str(self.email)))

    def update_info(self, name: str, phone_number: PhoneNumber | str) -> None:
        _validate_name(name)
        if not isinstance(phone_number, PhoneNumber):
            phone_number = PhoneNumber.korean(phone_number)
        self.name = name
        self.phone_number = phone_number


def _validate_name(name: str) -> None:
    if not isinstance(name, str) or not name.strip():
        raise InvalidMemberError("Name cannot be null or empty")
