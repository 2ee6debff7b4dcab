from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commerce_core.application.ports import resource_key
from commerce_core.domain.exceptions import MemberNotFoundError
from commerce_core.domain.value_objects import PhoneNumber

if TYPE_CHECKING:
    from commerce_core.application.ports import LockProvider, MemberRepository
    from commerce_core.domain.entities import Member
    from commerce_core.domain.value_objects import MemberId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class UpdateMemberRequest:
    member_id: MemberId
    name: str
    phone_number: str


@dataclass(frozen=True, slots=True)
class UpdateMemberResponse:
    member: Member


class UpdateMemberUseCase:
    """Replaces a member's name and phone number.

    The phone number is parsed the same way as at registration, so Korean
    and international formats are both accepted. No event is recorded.
    """

    def __init__(self, lock_provider: LockProvider, member_repository: MemberRepository) -> None:
        self._lock_provider = lock_provider
        self._member_repo = member_repository

    def execute(self, request: UpdateMemberRequest) -> UpdateMemberResponse:
        """Raises:
        InvalidPhoneNumberError: The phone number is malformed.
        InvalidMemberError: The name is blank.
        MemberNotFoundError: The member does not exist.
        """
        phone_number = PhoneNumber.parse(request.phone_number)

        with self._lock_provider.acquire(resource_key("member", request.member_id)):
            member = self._member_repo.get(request.member_id)
            if member is None:
                raise MemberNotFoundError(f"Member not found: {request.member_id}")

            member.update_info(request.name, phone_number)
            self._member_repo.save(member)

        logger.info("Updated member %s", member.id)
        return UpdateMemberResponse(member=member)
