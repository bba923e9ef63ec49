"""Tests for domain value objects (GroupCode, CodePrefix, Period, BusinessCode)."""

from datetime import date

import pytest

from admin_core.domain.value_objects.core import BusinessCode, CodePrefix, GroupCode, Period


class TestGroupCode:
    def test_number(self) -> None:
        assert GroupCode("GROUP002").number == 2
        assert GroupCode("STATUS").number is None

    def test_numbered(self) -> None:
        assert GroupCode.numbered(2).value == "GROUP002"
        assert GroupCode.numbered(1234).value == "GROUP1234"

    def test_invalid_rejected(self) -> None:
        with pytest.raises(ValueError, match="non-empty"):
            GroupCode("")
        with pytest.raises(ValueError):
            GroupCode("has space")


class TestCodePrefix:
    def test_valid(self) -> None:
        CodePrefix("USER")
        CodePrefix("MAIN-TASK")
        CodePrefix("IT-EDU2")

    def test_invalid(self) -> None:
        for bad in ("", "user", "MAIN_TASK", "-USER", "USER-"):
            with pytest.raises(ValueError):
                CodePrefix(bad)


class TestPeriod:
    def test_two_digits_only(self) -> None:
        assert Period("25").value == "25"
        for bad in ("2025", "5", "ab"):
            with pytest.raises(ValueError, match="2 digits"):
                Period(bad)

    def test_coerce(self) -> None:
        assert Period.coerce("25").value == "25"
        assert Period.coerce(2025).value == "25"
        assert Period.coerce(2100).value == "00"
        assert Period.coerce(7).value == "07"
        assert Period.coerce(date(2024, 12, 31)).value == "24"
        assert Period.coerce(Period("26")).value == "26"

    def test_coerce_rejects_bool_and_negative(self) -> None:
        with pytest.raises(ValueError):
            Period.coerce(True)
        with pytest.raises(ValueError):
            Period.coerce(-1)


class TestBusinessCode:
    def test_format_pads_ordinal(self) -> None:
        assert str(BusinessCode("MAIN-TASK", "25", 1)) == "MAIN-TASK-25-001"
        assert str(BusinessCode("USER", "25", 42, width=5)) == "USER-25-00042"

    def test_wider_ordinal_rendered_in_full(self) -> None:
        assert str(BusinessCode("USER", "25", 1000)) == "USER-25-1000"

    def test_parse(self) -> None:
        code = BusinessCode.parse("MAIN-TASK-25-003")
        assert (code.prefix, code.period, code.ordinal) == ("MAIN-TASK", "25", 3)

    def test_parse_rejects_malformed(self) -> None:
        for bad in ("USER", "USER-25", "USER-25-01", "USER-2025-001", "user-25-001"):
            with pytest.raises(ValueError):
                BusinessCode.parse(bad)

    def test_ordinal_must_be_positive(self) -> None:
        with pytest.raises(ValueError, match="positive"):
            BusinessCode("USER", "25", 0)
