"""
Airport Pydantic model for the FlightFinder API.

The model is frozen so a record can be shared between requests without
anyone being able to change it after the provider is built.
"""

from pydantic import BaseModel, Field, ConfigDict


class AirportModel(BaseModel):
    """Airport information model."""
    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    code: str = Field(..., pattern=r"^[A-Z]{3}$", description="IATA airport code")
    name: str = Field(..., min_length=1, max_length=80, description="Airport display name")
    city: str = Field(..., min_length=1, max_length=50, description="City the airport serves")
