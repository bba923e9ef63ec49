"""Domain exceptions for admin-core.

Defines domain-level exceptions that represent business rule violations
and configuration errors. The surrounding application maps them to its
own responses using message, error_code, and details.
"""

from typing import Any


class AdminCoreException(Exception):
    """Base exception for all admin-core errors.

    Attributes:
        message: Human-readable error description.
        error_code: Machine-readable error code.
        details: Additional error context (e.g. group_code, value).
    """

    def __init__(
        self,
        message: str,
        error_code: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error description.
            error_code: Optional machine-readable code; defaults to class name.
            details: Optional dict of extra context.
        """
        self.message = message
        self.error_code = error_code or self.__class__.__name__
        self.details = details or {}
        super().__init__(self.message)


class ConfigurationException(AdminCoreException):
    """Raised when deployed configuration does not match the store (fatal at startup).

    Example: a field binding names a group code that does not exist.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message, "CONFIGURATION_ERROR", details)


class ValidationException(AdminCoreException):
    """Raised when input validation fails (e.g. invalid format or range)."""

    def __init__(self, message: str, field: str | None = None) -> None:
        """Initialize with message and optional field name.

        Args:
            message: Description of the validation failure.
            field: Optional field or attribute that failed validation.
        """
        details = {"field": field} if field else {}
        super().__init__(message, "VALIDATION_ERROR", details)


class InvalidEnumValueException(ValidationException):
    """Raised when a bound column receives a value that is not an active subcode."""

    def __init__(
        self,
        group_code: str,
        value: Any,
        table: str | None = None,
        column: str | None = None,
    ) -> None:
        """Initialize with the governing group and the rejected value.

        Args:
            group_code: Group that governs the field.
            value: The rejected value.
            table: Optional table of the bound field.
            column: Optional column of the bound field.
        """
        super().__init__(
            f"Invalid value {value!r} for group {group_code}", field=column
        )
        self.error_code = "INVALID_ENUM_VALUE"
        self.details = {
            "group_code": group_code,
            "value": value,
            "table": table,
            "column": column,
        }


class GroupCodeImmutableException(AdminCoreException):
    """Raised when renaming a group code that already has subcodes."""

    def __init__(self, group_code: str, subcode_count: int) -> None:
        super().__init__(
            f"Group code {group_code} cannot be renamed: {subcode_count} subcode(s) reference it",
            "GROUP_CODE_IMMUTABLE",
            {"group_code": group_code, "subcode_count": subcode_count},
        )


class DuplicateGroupCodeException(AdminCoreException):
    """Raised when a group would be renamed onto a code another group already uses."""

    def __init__(self, group_code: str) -> None:
        super().__init__(
            f"Group code {group_code} already exists",
            "DUPLICATE_GROUP_CODE",
            {"group_code": group_code},
        )


class AuthorizationException(AdminCoreException):
    """Raised when the user lacks required permissions for the operation.

    The message never says whether the user, the role, or the permission
    was missing.
    """

    def __init__(
        self,
        resource: str | None = None,
        action: str | None = None,
        message: str = "Permission denied",
    ) -> None:
        """Initialize with optional resource, action, and message.

        Args:
            resource: Optional resource (e.g. 'report', '/apps/education').
            action: Optional action that was attempted (e.g. 'read', 'write').
            message: Human-readable message; default used when resource/action omitted.
        """
        if resource and action:
            message = f"Permission denied: {action} on {resource}"
        details: dict[str, Any] = {}
        if resource:
            details["resource"] = resource
        if action:
            details["action"] = action
        super().__init__(message, "PERMISSION_DENIED", details)


class ResourceNotFoundException(AdminCoreException):
    """Raised when a requested resource is not found."""

    def __init__(self, resource_type: str, resource_id: str) -> None:
        """Initialize with resource type and id.

        Args:
            resource_type: Type of resource (e.g. 'role', 'group').
            resource_id: The identifier that was not found.
        """
        super().__init__(
            f"{resource_type} not found: {resource_id}",
            "RESOURCE_NOT_FOUND",
            {"resource_type": resource_type, "resource_id": resource_id},
        )


class AllocationConflictException(AdminCoreException):
    """Raised when a concurrent allocation won the counter row creation; retry."""

    def __init__(self, prefix: str, period: str) -> None:
        super().__init__(
            f"Sequence counter for {prefix}-{period} was created concurrently; retry.",
            "ALLOCATION_CONFLICT",
            {"prefix": prefix, "period": period},
        )


class SequenceExhaustedException(AdminCoreException):
    """Raised when the next ordinal would not fit the configured digit budget."""

    def __init__(self, prefix: str, period: str, width: int) -> None:
        super().__init__(
            f"Sequence for {prefix}-{period} exhausted ({width}-digit ordinal budget)",
            "SEQUENCE_EXHAUSTED",
            {"prefix": prefix, "period": period, "width": width},
        )


class AllocationFailedException(AdminCoreException):
    """Raised when allocation still conflicts after the bounded number of retries."""

    def __init__(self, prefix: str, period: str, attempts: int) -> None:
        super().__init__(
            f"Could not allocate a code for {prefix}-{period} after {attempts} attempts",
            "ALLOCATION_FAILED",
            {"prefix": prefix, "period": period, "attempts": attempts},
        )


class SqlNotConfiguredException(AdminCoreException):
    """Raised when an operation requires the SQL store but no DATABASE_URL is set."""

    def __init__(self) -> None:
        super().__init__(
            message="This operation requires a SQL database that is not configured.",
            error_code="SERVICE_UNAVAILABLE",
        )
