"""Tests for domain error classes."""

from doggy_dream.domain.errors import (
    AuthenticationFailed,
    DomainError,
    HydrationFailed,
    PagingValidationError,
    SearchFailed,
    UpstreamError,
    UpstreamUnavailable,
    ValidationError,
)
from doggy_dream.domain.pipeline import PipelineStage


class TestDomainError:
    """Tests for base DomainError class."""

    def test_creates_error_with_message(self) -> None:
        """DomainError stores message and has correct error code."""
        error = DomainError("Something went wrong")

        assert error.message == "Something went wrong"
        assert error.error_code == "DOMAIN_ERROR"
        assert error.context == {}

    def test_to_dict_returns_structured_format(self) -> None:
        """DomainError.to_dict() returns structured error format."""
        error = DomainError("Test error", field="test", value=123)

        assert error.to_dict() == {
            "message": "Test error",
            "code": "DOMAIN_ERROR",
            "field": "test",
            "value": 123,
        }

    def test_str_representation(self) -> None:
        assert str(DomainError("Test message")) == "Test message"


class TestValidationError:
    """Tests for ValidationError class."""

    def test_creates_simple_validation_error(self) -> None:
        error = ValidationError("Invalid input")

        assert error.message == "Invalid input"
        assert error.error_code == "VALIDATION_ERROR"
        assert error.errors is None

    def test_creates_validation_error_with_field_errors(self) -> None:
        errors = [{"field": "size", "message": "Must be >= 1"}]

        error = ValidationError(errors=errors)

        assert error.message == "Validation failed"
        assert error.to_dict() == {
            "message": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }

    def test_paging_error_is_validation_error(self) -> None:
        error = PagingValidationError("size must be >= 1")

        assert isinstance(error, ValidationError)
        assert error.error_code == "VALIDATION_ERROR"


class TestUpstreamErrors:
    """Tests for the upstream failure taxonomy."""

    def test_each_error_names_its_stage(self) -> None:
        assert UpstreamUnavailable(status=503).stage is PipelineStage.FETCHING_CATALOG
        assert SearchFailed(status=500).stage is PipelineStage.FETCHING_SEARCH
        assert HydrationFailed(status=400).stage is PipelineStage.HYDRATING_RESULTS

    def test_carries_upstream_status(self) -> None:
        error = SearchFailed(status=500)

        assert error.status == 500
        assert error.message == "Failed to search dogs"
        assert isinstance(error, UpstreamError)

    def test_to_dict_includes_stage_and_status(self) -> None:
        error = HydrationFailed(status=502)

        assert error.to_dict() == {
            "message": "Failed to fetch dog records",
            "code": "HYDRATION_FAILED",
            "stage": "hydrate",
            "upstream_status": 502,
        }

    def test_status_is_none_without_a_response(self) -> None:
        error = UpstreamUnavailable(message="Failed to fetch breed names: timed out")

        assert error.status is None
        assert error.to_dict()["upstream_status"] is None

    def test_authentication_failed_has_no_stage(self) -> None:
        error = AuthenticationFailed(status=401)

        assert error.error_code == "AUTHENTICATION_FAILED"
        assert "stage" not in error.to_dict()
