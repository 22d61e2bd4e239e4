"""REST API error response models.

Structured error responses that provide consistent format for all HTTP errors.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors.

    Used in validation errors to indicate which field failed and why.
    """

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "size",
                "message": "Input should be less than or equal to 100",
                "code": "less_than_equal",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Supports:
    - Simple errors (just detail and code)
    - Multi-field validation errors (detail + errors array)
    - Upstream failures (detail + code + stage + upstream_status)

    Examples:
        Upstream failure during search:
            {
                "detail": "Failed to search dogs",
                "code": "SEARCH_FAILED",
                "stage": "search",
                "upstream_status": 500
            }

        Validation error with multiple fields:
            {
                "detail": "Invalid request parameters",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "from",
                        "message": "Input should be greater than or equal to 0",
                        "code": "greater_than_equal"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None
    stage: str | None = None
    upstream_status: int | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "detail": "Failed to search dogs",
                    "code": "SEARCH_FAILED",
                    "stage": "search",
                    "upstream_status": 500,
                },
                {
                    "detail": "Invalid request parameters",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "from",
                            "message": "Input should be greater than or equal to 0",
                            "code": "greater_than_equal",
                        },
                    ],
                },
            ]
        }
    )
