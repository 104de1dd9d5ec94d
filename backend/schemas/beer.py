from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator, model_validator


class BeerType(str, Enum):
    """Closed set of beer styles; serialized by name, with a display label."""

    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"
    WEISS = "WEISS"
    PILSEN = "PILSEN"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class BeerCreate(BaseModel):
    # a client-sent id is accepted and ignored; the database assigns one
    id: Optional[int] = None

    name: str = Field(min_length=1, max_length=200)
    brand: str = Field(min_length=1, max_length=200)
    max: int = Field(ge=0, le=500)
    quantity: int = Field(ge=0, le=100)
    type: BeerType

    @field_validator("name", "brand", mode="before")
    @classmethod
    def _strip_required(cls, v):
        if isinstance(v, str):
            v = v.strip()
            if not v:
                raise ValueError("field is required")
        return v

    @model_validator(mode="after")
    def _quantity_within_max(self):
        if self.quantity > self.max:
            raise ValueError("quantity cannot be greater than max")
        return self


class BeerRead(BaseModel):
    id: int
    name: str
    brand: str
    max: int
    quantity: int
    type: BeerType

    class Config:
        from_attributes = True


class QuantityUpdate(BaseModel):
    quantity: int = Field(ge=0, le=100)
