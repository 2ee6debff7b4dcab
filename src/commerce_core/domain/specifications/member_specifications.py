"""Reusable member filters."""

from __future__ import annotations

from typing import TYPE_CHECKING

from commerce_core.domain.entities import MemberStatus
from commerce_core.domain.specifications.specification import Specification, any_of

if TYPE_CHECKING:
    from commerce_core.domain.entities import Member

PREMIUM_MINIMUM_ORDERS = 3
CORPORATE_DOMAINS = ("company.com", "corp.com", "enterprise.com")


def is_active() -> Specification[Member]:
    return Specification(lambda m: m.status == MemberStatus.ACTIVE, "is_active")


def is_inactive() -> Specification[Member]:
    return Specification(lambda m: m.status == MemberStatus.INACTIVE, "is_inactive")


def has_email_domain(domain: str) -> Specification[Member]:
    return Specification(
        lambda m: m.email is not None and m.email.has_domain(domain),
        f"has_email_domain({domain})",
    )


def has_name_containing(fragment: str) -> Specification[Member]:
    """Case-insensitive substring match on the member's name."""
    needle = fragment.lower()
    return Specification(
        lambda m: needle in m.name.lower(),
        f"has_name_containing({fragment})",
    )


def has_korean_phone_number() -> Specification[Member]:
    return Specification(
        lambda m: m.phone_number is not None and m.phone_number.is_korean,
        "has_korean_phone_number",
    )


def has_orders() -> Specification[Member]:
    return Specification(lambda m: bool(m.orders), "has_orders")


def has_minimum_orders(minimum: int) -> Specification[Member]:
    return Specification(
        lambda m: m.orders is not None and len(m.orders) >= minimum,
        f"has_minimum_orders({minimum})",
    )


def is_premium_member() -> Specification[Member]:
    """Active members with at least three orders."""
    return is_active() & has_minimum_orders(PREMIUM_MINIMUM_ORDERS)


def is_corporate_member() -> Specification[Member]:
    """Active members whose e-mail belongs to a known corporate domain."""
    return is_active() & any_of(*(has_email_domain(d) for d in CORPORATE_DOMAINS))
