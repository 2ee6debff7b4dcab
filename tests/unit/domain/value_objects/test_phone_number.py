"""Tests for the PhoneNumber value object."""

import pytest

from commerce_core.domain.exceptions import InvalidPhoneNumberError
from commerce_core.domain.value_objects import PhoneNumber, PhoneRegion

# =============================================================================
# Korean Numbers
# =============================================================================


class TestKoreanPhoneNumber:
    """Test the DDD-DDDD-DDDD layout."""

    def test_accepts_korean_format(self) -> None:
        phone = PhoneNumber.korean("010-1234-5678")

        assert phone.value == "010-1234-5678"
        assert phone.region is PhoneRegion.KOREA
        assert phone.is_korean
        assert not phone.is_international

    def test_trims_whitespace(self) -> None:
        assert PhoneNumber.korean(" 010-1234-5678 ").value == "010-1234-5678"

    @pytest.mark.parametrize(
        "raw",
        ["01012345678", "010-123-5678", "010-1234-567", "abc-defg-hijk", "", "010-1234-5678-9"],
    )
    def test_rejects_other_layouts(self, raw: str) -> None:
        with pytest.raises(InvalidPhoneNumberError):
            PhoneNumber.korean(raw)

    def test_rejects_none(self) -> None:
        with pytest.raises(InvalidPhoneNumberError):
            PhoneNumber.korean(None)  # type: ignore[arg-type]

    def test_accessors(self) -> None:
        phone = PhoneNumber.korean("010-1234-5678")

        assert phone.formatted == "010-1234-5678"
        assert phone.digits_only == "01012345678"
        assert phone.area_code == "010"
        assert str(phone) == "010-1234-5678"


# =============================================================================
# International Numbers
# =============================================================================


class TestInternationalPhoneNumber:
    """Test E.164-like numbers."""

    @pytest.mark.parametrize("raw", ["+821012345678", "14155552671", "+12"])
    def test_accepts_international_format(self, raw: str) -> None:
        phone = PhoneNumber.international(raw)

        assert phone.is_international
        assert phone.area_code is None

    @pytest.mark.parametrize("raw", ["+0123456", "+1", "+1234567890123456", "+82 10 1234"])
    def test_rejects_malformed(self, raw: str) -> None:
        with pytest.raises(InvalidPhoneNumberError):
            PhoneNumber.international(raw)

    def test_rejects_korean_layout(self) -> None:
        with pytest.raises(InvalidPhoneNumberError, match="international"):
            PhoneNumber.international("010-1234-5678")

    def test_formatted_adds_plus(self) -> None:
        assert PhoneNumber.international("14155552671").formatted == "+14155552671"
        assert PhoneNumber.international("+14155552671").formatted == "+14155552671"

    def test_digits_only_strips_plus(self) -> None:
        assert PhoneNumber.international("+14155552671").digits_only == "14155552671"


# =============================================================================
# Region Detection
# =============================================================================


class TestPhoneNumberParse:
    """Test automatic region detection."""

    def test_korean_layout_detected_first(self) -> None:
        assert PhoneNumber.parse("010-1234-5678").region is PhoneRegion.KOREA

    def test_falls_back_to_international(self) -> None:
        assert PhoneNumber.parse("+821012345678").region is PhoneRegion.INTERNATIONAL

    @pytest.mark.parametrize("raw", ["", "   ", "phone", "010-12-34"])
    def test_rejects_unrecognized(self, raw: str) -> None:
        with pytest.raises(InvalidPhoneNumberError):
            PhoneNumber.parse(raw)

    def test_value_equality_includes_region(self) -> None:
        assert PhoneNumber.parse("010-1234-5678") == PhoneNumber.korean("010-1234-5678")
