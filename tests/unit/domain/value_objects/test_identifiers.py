"""Tests for the MemberId, OrderId and PaymentId value objects."""

from dataclasses import FrozenInstanceError
from uuid import UUID, uuid4

import pytest

from commerce_core.domain.exceptions import InvalidIdentifierError
from commerce_core.domain.value_objects import MemberId, OrderId, PaymentId

ID_TYPES = [MemberId, OrderId, PaymentId]


@pytest.mark.parametrize("id_type", ID_TYPES)
class TestIdentifiers:
    """Behaviour shared by every aggregate identifier."""

    def test_generate_returns_uuid(self, id_type: type) -> None:
        identifier = id_type.generate()

        assert isinstance(identifier.value, UUID)

    def test_generate_is_unique(self, id_type: type) -> None:
        assert id_type.generate() != id_type.generate()

    def test_from_string_round_trips_str(self, id_type: type) -> None:
        raw = str(uuid4())

        identifier = id_type.from_string(raw)

        assert str(identifier) == raw

    @pytest.mark.parametrize("raw", ["not-a-uuid", "", None])
    def test_from_string_rejects_invalid(self, id_type: type, raw: object) -> None:
        with pytest.raises(InvalidIdentifierError):
            id_type.from_string(raw)

    def test_is_hashable_and_frozen(self, id_type: type) -> None:
        identifier = id_type.generate()

        assert {identifier: 1}[identifier] == 1
        with pytest.raises(FrozenInstanceError):
            identifier.value = uuid4()


class TestIdentifierTypesAreDistinct:
    def test_same_uuid_different_types_not_equal(self) -> None:
        value = uuid4()

        assert MemberId(value) != OrderId(value)

    @pytest.mark.parametrize(
        ("id_type", "kind"), [(MemberId, "member"), (OrderId, "order"), (PaymentId, "payment")]
    )
    def test_error_message_names_the_kind(self, id_type: type, kind: str) -> None:
        with pytest.raises(InvalidIdentifierError, match=f"Invalid {kind} ID"):
            id_type.from_string("nope")
