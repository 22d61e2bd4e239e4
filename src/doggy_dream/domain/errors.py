"""Domain error classes.

Protocol-agnostic errors that represent business and upstream failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from __future__ import annotations

from typing import Any

from doggy_dream.domain.pipeline import PipelineStage


class DomainError(Exception):
    """Base class for all domain errors.

    Contains business error information that can be translated
    to any transport format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Business rule validation error.

    Examples:
        - size outside of the accepted range
        - negative offset
        - malformed sort specifier

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
                   Example: [{"field": "size", "message": "Must be >= 1"}]
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class PagingValidationError(ValidationError):
    """Raised when size or offset parameters are invalid."""


class FilterValidationError(ValidationError):
    """Raised when the sort specifier is invalid."""


class UpstreamError(DomainError):
    """The catalog/search service answered with a failure.

    Carries the pipeline stage that failed and the upstream HTTP status
    (None when the request never produced a response, e.g. a timeout).

    Protocol mappings:
        - REST: 502 Bad Gateway, or 401 when the upstream rejected the session
    """

    error_code: str = "UPSTREAM_ERROR"
    stage: PipelineStage | None = None
    default_message: str = "Upstream request failed"

    def __init__(
        self,
        status: int | None = None,
        message: str | None = None,
        **context: Any,
    ) -> None:
        self.status = status
        super().__init__(message or self.default_message, **context)

    def to_dict(self) -> dict[str, Any]:
        result = super().to_dict()
        if self.stage is not None:
            result["stage"] = self.stage.value
        result["upstream_status"] = self.status
        return result


class UpstreamUnavailable(UpstreamError):
    """Breed catalog could not be loaded."""

    error_code: str = "UPSTREAM_UNAVAILABLE"
    stage = PipelineStage.FETCHING_CATALOG
    default_message = "Failed to fetch breed names"


class SearchFailed(UpstreamError):
    """Filtered search call failed."""

    error_code: str = "SEARCH_FAILED"
    stage = PipelineStage.FETCHING_SEARCH
    default_message = "Failed to search dogs"


class HydrationFailed(UpstreamError):
    """Bulk record hydration failed."""

    error_code: str = "HYDRATION_FAILED"
    stage = PipelineStage.HYDRATING_RESULTS
    default_message = "Failed to fetch dog records"


class AuthenticationFailed(UpstreamError):
    """Upstream refused the login.

    Protocol mappings:
        - REST: 401 Unauthorized
    """

    error_code: str = "AUTHENTICATION_FAILED"
    default_message = "Failed to log in"
