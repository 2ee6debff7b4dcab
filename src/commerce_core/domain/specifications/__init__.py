"""Specifications - Composable business predicates.

The predicate libraries are exposed as modules so that names such as
``is_pending`` stay unambiguous:

    from commerce_core.domain.specifications import member_specs, order_specs

    member_specs.is_premium_member().is_satisfied_by(member)
"""

from commerce_core.domain.specifications import member_specifications as member_specs
from commerce_core.domain.specifications import order_specifications as order_specs
from commerce_core.domain.specifications.specification import (
    Specification,
    all_of,
    any_of,
    negate,
    specification,
)

__all__ = [
    "Specification",
    "all_of",
    "any_of",
    "member_specs",
    "negate",
    "order_specs",
    "specification",
]
