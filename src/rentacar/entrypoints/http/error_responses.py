"""REST API error response models.

Every error the API returns uses the same body, whichever layer raised it.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Field-level error entry, used by validation errors."""

    field: str
    message: str
    code: str | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "end_date",
                "message": "Must be after start_date",
                "code": "INVALID_RANGE",
            }
        }
    )


class ErrorResponse(BaseModel):
    """Structured error response format.

    Examples:
        Simple error:
            {
                "detail": "Car with id '...' not found",
                "code": "NOT_FOUND"
            }

        Validation error with field details:
            {
                "detail": "Validation failed",
                "code": "VALIDATION_ERROR",
                "errors": [
                    {
                        "field": "price_min",
                        "message": "Must be less than or equal to price_max",
                        "code": "INVALID_RANGE"
                    }
                ]
            }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"detail": "Incorrect password", "code": "INVALID_CREDENTIALS"},
                {"detail": "Storage is unavailable, try again", "code": "PERSISTENCE_ERROR"},
                {
                    "detail": "Validation failed",
                    "code": "VALIDATION_ERROR",
                    "errors": [
                        {
                            "field": "password",
                            "message": "Must be at least 6 characters",
                        }
                    ],
                },
            ]
        }
    )
