# File: funapp/schemas/auth.py

from decimal import Decimal

from pydantic import BaseModel, EmailStr, Field, field_validator

MAX_COORDINATE_DECIMALS = 10


def _decimal_places(value: float) -> int:
    exponent = Decimal(repr(value)).normalize().as_tuple().exponent
    return -exponent if exponent < 0 else 0


class SignupRequest(BaseModel):
    email: EmailStr
    name: str = Field(min_length=1)
    password: str = Field(min_length=1)
    latitude: float = Field(allow_inf_nan=False)
    longitude: float = Field(allow_inf_nan=False)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "email": "test@example.com",
                    "name": "Ahmed",
                    "password": "123456",
                    "latitude": 30.0444,
                    "longitude": 31.2357,
                }
            ]
        }
    }

    @field_validator("name", "password")
    @classmethod
    def not_blank(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("must not be empty")
        return v

    @field_validator("latitude", "longitude", mode="before")
    @classmethod
    def numeric_only(cls, v):
        # Reject "30.1" and True; pydantic would otherwise coerce them.
        if isinstance(v, bool) or not isinstance(v, (int, float)):
            raise ValueError("must be a number")
        return v

    @field_validator("latitude", "longitude")
    @classmethod
    def bounded_precision(cls, v: float) -> float:
        if _decimal_places(v) > MAX_COORDINATE_DECIMALS:
            raise ValueError(
                f"must have at most {MAX_COORDINATE_DECIMALS} decimal places"
            )
        return v


class Token(BaseModel):
    access_token: str


class TokenClaims(BaseModel):
    """Identity claims carried inside an access token."""
    sub: str = Field(min_length=1)
    email: str
