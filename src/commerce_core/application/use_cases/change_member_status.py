from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commerce_core.application.ports import resource_key
from commerce_core.domain.entities import MemberStatus
from commerce_core.domain.exceptions import MemberNotFoundError

if TYPE_CHECKING:
    from commerce_core.application.ports import (
        EventPublisher,
        LockProvider,
        MemberRepository,
    )
    from commerce_core.domain.entities import Member
    from commerce_core.domain.value_objects import MemberId

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ChangeMemberStatusRequest:
    member_id: MemberId
    status: MemberStatus


@dataclass(frozen=True, slots=True)
class ChangeMemberStatusResponse:
    member: Member


class ChangeMemberStatusUseCase:
    """Activates or deactivates a member.

    Both transitions are unconditional: requesting the current status is
    allowed and still publishes the corresponding event.
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        member_repository: MemberRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._lock_provider = lock_provider
        self._member_repo = member_repository
        self._publisher = event_publisher

    def execute(self, request: ChangeMemberStatusRequest) -> ChangeMemberStatusResponse:
        """Raises MemberNotFoundError if the member does not exist."""
        with self._lock_provider.acquire(resource_key("member", request.member_id)):
            member = self._member_repo.get(request.member_id)
            if member is None:
                raise MemberNotFoundError(f"Member not found: {request.member_id}")

            if request.status == MemberStatus.ACTIVE:
                member.activate()
            else:
                member.deactivate()
            self._member_repo.save(member)
            events = member.pull_events()

        logger.info("Member %s is now %s", member.id, member.status.value)
        self._publisher.publish_all(events)
        return ChangeMemberStatusResponse(member=member)
