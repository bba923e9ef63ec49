"""Tests for domain exceptions (error_code, message, details)."""

from admin_core.domain.exceptions import (
    AdminCoreException,
    AllocationConflictException,
    AllocationFailedException,
    AuthorizationException,
    ConfigurationException,
    DuplicateGroupCodeException,
    GroupCodeImmutableException,
    InvalidEnumValueException,
    ResourceNotFoundException,
    SequenceExhaustedException,
    SqlNotConfiguredException,
    ValidationException,
)


def test_base_exception_default_error_code() -> None:
    """Base AdminCoreException uses class name as error_code when not provided."""
    exc = AdminCoreException("Something failed")
    assert exc.message == "Something failed"
    assert exc.error_code == "AdminCoreException"
    assert exc.details == {}


def test_base_exception_custom_error_code_and_details() -> None:
    exc = AdminCoreException("Oops", error_code="CUSTOM", details={"key": "value"})
    assert exc.error_code == "CUSTOM"
    assert exc.details == {"key": "value"}


def test_validation_exception() -> None:
    """ValidationException sets VALIDATION_ERROR and optional field in details."""
    exc = ValidationException("Invalid format", field="period")
    assert exc.error_code == "VALIDATION_ERROR"
    assert exc.details == {"field": "period"}
    assert ValidationException("Invalid").details == {}


def test_invalid_enum_value_is_validation_exception() -> None:
    exc = InvalidEnumValueException("GROUP002", "CANCELLED", table="task", column="status")
    assert isinstance(exc, ValidationException)
    assert exc.error_code == "INVALID_ENUM_VALUE"
    assert exc.details == {
        "group_code": "GROUP002",
        "value": "CANCELLED",
        "table": "task",
        "column": "status",
    }
    assert "CANCELLED" in exc.message


def test_configuration_exception() -> None:
    exc = ConfigurationException("bad binding", details={"bindings": {"a.b": "G"}})
    assert exc.error_code == "CONFIGURATION_ERROR"
    assert exc.details == {"bindings": {"a.b": "G"}}


def test_authorization_exception_message() -> None:
    """AuthorizationException builds message from resource/action when both given."""
    exc = AuthorizationException(resource="report", action="write")
    assert exc.error_code == "PERMISSION_DENIED"
    assert exc.message == "Permission denied: write on report"
    assert exc.details == {"resource": "report", "action": "write"}
    assert AuthorizationException().message == "Permission denied"


def test_resource_not_found() -> None:
    exc = ResourceNotFoundException("role", "EDITOR")
    assert exc.error_code == "RESOURCE_NOT_FOUND"
    assert exc.details == {"resource_type": "role", "resource_id": "EDITOR"}


def test_group_code_immutable() -> None:
    exc = GroupCodeImmutableException("GROUP002", 3)
    assert exc.error_code == "GROUP_CODE_IMMUTABLE"
    assert exc.details == {"group_code": "GROUP002", "subcode_count": 3}


def test_allocation_exceptions() -> None:
    assert AllocationConflictException("USER", "25").error_code == "ALLOCATION_CONFLICT"
    exhausted = SequenceExhaustedException("USER", "25", 3)
    assert exhausted.error_code == "SEQUENCE_EXHAUSTED"
    assert exhausted.details["width"] == 3
    failed = AllocationFailedException("USER", "25", 5)
    assert failed.error_code == "ALLOCATION_FAILED"
    assert failed.details["attempts"] == 5
    assert failed.details["prefix"] == "USER"


def test_duplicate_group_code() -> None:
    exc = DuplicateGroupCodeException("GROUP006")
    assert exc.error_code == "DUPLICATE_GROUP_CODE"
    assert exc.details == {"group_code": "GROUP006"}
    assert "GROUP006" in exc.message


def test_sql_not_configured() -> None:
    exc = SqlNotConfiguredException()
    assert exc.error_code == "SERVICE_UNAVAILABLE"
