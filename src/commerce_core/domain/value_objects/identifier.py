from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar, Self
from uuid import UUID, uuid4

from commerce_core.domain.exceptions import InvalidIdentifierError


@dataclass(frozen=True, slots=True)
class EntityId:
    """Base for aggregate identifiers backed by a UUID v4.

    Subclasses only set ``kind``. Identifiers of different kinds never
    compare equal, even when they wrap the same UUID.
    """

    kind: ClassVar[str] = "entity"

    value: UUID

    @classmethod
    def generate(cls) -> Self:
        return cls(value=uuid4())

    @classmethod
    def from_string(cls, id_str: str) -> Self:
        """Parse a UUID string (with or without hyphens, any case).

        Raises:
            InvalidIdentifierError: If the string is not a valid UUID.
        """
        try:
            return cls(value=UUID(id_str))
        except (ValueError, AttributeError, TypeError) as e:
            raise InvalidIdentifierError(f"Invalid {cls.kind} ID: {id_str}") from e

    def __str__(self) -> str:
        return str(self.value)
