from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from commerce_core.application.ports import resource_key
from commerce_core.domain.entities import Member
from commerce_core.domain.exceptions import MemberAlreadyExistsError
from commerce_core.domain.value_objects import Email, PhoneNumber

if TYPE_CHECKING:
    from commerce_core.application.ports import (
        EventPublisher,
        LockProvider,
        MemberRepository,
        TimeProvider,
    )

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RegisterMemberRequest:
    """Input DTO for member registration.

    ``phone_number`` may be Korean (010-1234-5678) or international
    (+821012345678); the region is detected automatically.
    """

    email: str
    name: str
    phone_number: str


@dataclass(frozen=True, slots=True)
class RegisterMemberResponse:
    member: Member


class RegisterMemberUseCase:
    """Registers a new ACTIVE member.

    Responsibilities:
    - Normalize and validate e-mail and phone number
    - Serialize registrations per e-mail address
    - Reject duplicate e-mail addresses
    - Persist the member and publish MemberCreated
    """

    def __init__(
        self,
        lock_provider: LockProvider,
        time_provider: TimeProvider,
        member_repository: MemberRepository,
        event_publisher: EventPublisher,
    ) -> None:
        self._lock_provider = lock_provider
        self._time_provider = time_provider
        self._member_repo = member_repository
        self._publisher = event_publisher

    def execute(self, request: RegisterMemberRequest) -> RegisterMemberResponse:
        """Register a member.

        Raises:
            InvalidEmailError: Malformed e-mail address.
            InvalidPhoneNumberError: Malformed phone number.
            InvalidMemberError: Blank name.
            MemberAlreadyExistsError: E-mail address already registered.
        """
        email = Email.of(request.email)
        phone_number = PhoneNumber.parse(request.phone_number)

        with self._lock_provider.acquire(resource_key("member-email", email)):
            if self._member_repo.get_by_email(email) is not None:
                raise MemberAlreadyExistsError(f"Member already exists with email: {email}")

            member = Member.register(
                email=email,
                name=request.name,
                phone_number=phone_number,
                created_at=self._time_provider.now(),
            )
            self._member_repo.save(member)
            events = member.pull_events()

        logger.info("Registered member %s (%s)", member.id, email)
        self._publisher.publish_all(events)
        return RegisterMemberResponse(member=member)
