from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class LoginRequestDTO(BaseModel):
    email: str = Field(min_length=3, examples=["budi@example.com"])
    password: str = Field(min_length=1)


class RegisterRequestDTO(BaseModel):
    email: str = Field(min_length=3, examples=["budi@example.com"])
    password: str = Field(min_length=6, description="At least 6 characters")
    name: str = Field(min_length=1, examples=["Budi Santoso"])
    phone: str | None = Field(default=None, examples=["+62 812 3456 7890"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "budi@example.com",
                "password": "rahasia123",
                "name": "Budi Santoso",
                "phone": "+62 812 3456 7890",
            }
        }
    )


class UserResponseDTO(BaseModel):
    """Redacted user; the credential never appears in a response."""

    id: str
    email: str
    name: str
    phone: str | None = None
    role: str
    is_active: bool
    avatar: str | None = None
    created_at: datetime | None = None
