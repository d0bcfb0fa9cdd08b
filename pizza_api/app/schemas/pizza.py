"""
Pydantic schemas for pizza records.

A pizza is a named item with a non-negative integer price.  Records
are frozen once constructed so the shared catalog can be read from
any number of concurrent requests without copying.
"""

from pydantic import BaseModel, ConfigDict, Field


class Pizza(BaseModel):
    """A single catalog record."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., min_length=1, description="Unique pizza name, matched case-sensitively")
    price: int = Field(..., ge=0, description="Price in whole currency units")


class PizzaError(BaseModel):
    """Body returned with HTTP 400 when a lookup fails."""

    error: str = Field(..., description="Human readable reason for the failure")
