from __future__ import annotations

import re
from dataclasses import dataclass

from commerce_core.domain.exceptions import InvalidEmailError

EMAIL_PATTERN = re.compile(r"^[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}$")


@dataclass(frozen=True, slots=True)
class Email:
    """E-mail address value object.

    The raw value is trimmed and lower-cased before it is matched against
    ``local@domain.tld``; the stored value is always the normalized form.
    """

    value: str

    def __post_init__(self) -> None:
        if self.value is None:
            raise InvalidEmailError("Email cannot be null or empty")
        if not isinstance(self.value, str):
            raise InvalidEmailError(f"Email must be a string, got {type(self.value).__name__}")

        normalized = self.value.strip().lower()
        if not normalized or not EMAIL_PATTERN.fullmatch(normalized):
            raise InvalidEmailError(f"Invalid email format: {self.value!r}")

        if normalized != self.value:
            object.__setattr__(self, "value", normalized)

    @classmethod
    def of(cls, raw: str) -> Email:
        return cls(value=raw)

    @property
    def local_part(self) -> str:
        return self.value.split("@", 1)[0]

    @property
    def domain_part(self) -> str:
        return self.value.split("@", 1)[1]

    def has_domain(self, domain: str) -> bool:
        """True if the address is exactly ``…@domain`` (case-insensitive).

        A missing or non-string domain matches nothing.
        """
        if not isinstance(domain, str):
            return False
        return self.domain_part == domain.strip().lower()

    def __str__(self) -> str:
        return self.value
