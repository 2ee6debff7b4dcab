from __future__ import annotations

from typing import TYPE_CHECKING

from commerce_core.application.ports import MemberRepository

if TYPE_CHECKING:
    from commerce_core.domain.entities import Member
    from commerce_core.domain.specifications import Specification
    from commerce_core.domain.value_objects import Email, MemberId


class InMemoryMemberRepository(MemberRepository):
    """In-memory member repository.

    Implementation notes:
    - Identity map: get() returns the instance that was saved, not a copy
    - Secondary index on the normalized e-mail address
    - NOT thread-safe; relies on external LockProvider for serialization
    """

    def __init__(self) -> None:
        self._members: dict[MemberId, Member] = {}
        self._by_email: dict[Email, MemberId] = {}
        self._indexed_email: dict[MemberId, Email] = {}

    def get(self, member_id: MemberId) -> Member | None:
        return self._members.get(member_id)

    def get_by_email(self, email: Email) -> Member | None:
        member_id = self._by_email.get(email)
        return None if member_id is None else self._members[member_id]

    def find_satisfying(self, specification: Specification[Member]) -> list[Member]:
        return specification.filter(self._members.values())

    def save(self, member: Member) -> Member:
        previous_email = self._indexed_email.get(member.id)
        if previous_email is not None and previous_email != member.email:
            del self._by_email[previous_email]
        self._members[member.id] = member
        self._by_email[member.email] = member.id
        self._indexed_email[member.id] = member.email
        return member
