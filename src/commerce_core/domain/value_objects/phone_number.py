from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum

from commerce_core.domain.exceptions import InvalidPhoneNumberError

KOREAN_PATTERN = re.compile(r"^\d{3}-\d{4}-\d{4}$")
INTERNATIONAL_PATTERN = re.compile(r"^\+?[1-9]\d{1,14}$")


class PhoneRegion(Enum):
    KOREA = "KR"
    INTERNATIONAL = "INT"


@dataclass(frozen=True, slots=True)
class PhoneNumber:
    """Phone number value object.

    Korean numbers use the ``DDD-DDDD-DDDD`` layout; international numbers
    are E.164-like digits with an optional leading ``+``. Surrounding
    whitespace is trimmed before validation.

    Use the ``korean``, ``international`` or ``parse`` factories; direct
    construction validates ``value`` against the given region.
    """

    value: str
    region: PhoneRegion

    def __post_init__(self) -> None:
        if self.value is None or not isinstance(self.value, str):
            raise InvalidPhoneNumberError("Phone number cannot be null or empty")
        if not isinstance(self.region, PhoneRegion):
            raise InvalidPhoneNumberError(f"Unsupported phone region: {self.region!r}")

        trimmed = self.value.strip()
        pattern = KOREAN_PATTERN if self.region is PhoneRegion.KOREA else INTERNATIONAL_PATTERN
        if not pattern.fullmatch(trimmed):
            raise InvalidPhoneNumberError(f"Invalid phone number format: {self.value!r}")

        if trimmed != self.value:
            object.__setattr__(self, "value", trimmed)

    @classmethod
    def korean(cls, raw: str) -> PhoneNumber:
        return cls(value=raw, region=PhoneRegion.KOREA)

    @classmethod
    def international(cls, raw: str) -> PhoneNumber:
        """Build an international number.

        Raises:
            InvalidPhoneNumberError: If ``raw`` is malformed, or if it is
                actually a Korean-format number.
        """
        phone = cls.parse(raw)
        if not phone.is_international:
            raise InvalidPhoneNumberError(
                f"Invalid international phone number format: {raw!r}"
            )
        return phone

    @classmethod
    def parse(cls, raw: str) -> PhoneNumber:
        """Detect the region from the format; Korean layout wins."""
        if raw is None or not isinstance(raw, str) or not raw.strip():
            raise InvalidPhoneNumberError(f"Invalid phone number format: {raw!r}")
        trimmed = raw.strip()
        if KOREAN_PATTERN.fullmatch(trimmed):
            return cls(value=trimmed, region=PhoneRegion.KOREA)
        if INTERNATIONAL_PATTERN.fullmatch(trimmed):
            return cls(value=trimmed, region=PhoneRegion.INTERNATIONAL)
        raise InvalidPhoneNumberError(f"Invalid phone number format: {raw!r}")

    @property
    def is_korean(self) -> bool:
        return self.region is PhoneRegion.KOREA

    @property
    def is_international(self) -> bool:
        return self.region is PhoneRegion.INTERNATIONAL

    @property
    def formatted(self) -> str:
        if self.is_korean:
            return self.value
        return self.value if self.value.startswith("+") else f"+{self.value}"

    @property
    def digits_only(self) -> str:
        return re.sub(r"\D", "", self.value)

    @property
    def area_code(self) -> str | None:
        if self.is_korean:
            return self.value[:3]
        return None

    def __str__(self) -> str:
        return self.formatted
