"""Error hierarchy for pagebundle.

Error layers:
- PageBundleError: Base class for all pagebundle errors
- DomainError: Business rule violations, lookups of missing entities
- InfrastructureError: System-level failures like an unreachable database
"""


class PageBundleError(Exception):
    """Base class for all pagebundle errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors
# =============================================================================


class DomainError(PageBundleError):
    """Base class for domain errors."""


class NotFoundError(DomainError):
    """Entity not found."""


class ValidationError(DomainError):
    """Input validation failed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message, code="VALIDATION_ERROR")
        self.field = field


# =============================================================================
# Infrastructure Errors
# =============================================================================


class InfrastructureError(PageBundleError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend (database) is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
