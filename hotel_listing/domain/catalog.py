"""
Catalog Domain Models

Defines Country and Hotel Data Transfer Objects (DTOs).
Update models leave every field optional: only explicitly sent fields are merged onto the stored row.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ============ Country ============

class CountryBase(BaseModel):
    """Country Base Model"""

    # Country Name
    name: str = Field(..., min_length=1, max_length=100, description="Country Name")
    # Short code
    short_name: Optional[str] = Field(None, max_length=10, description="Short Name")


class CountryCreate(CountryBase):
    """Create Country Request Model"""
    pass


class CountryUpdate(BaseModel):
    """Update Country Request Model (All fields optional, name not nullable)"""

    # When sent, must match the id in the path
    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    short_name: Optional[str] = Field(None, max_length=10)

    @field_validator("name")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class CountryResponse(CountryBase):
    """Country Response Model"""

    id: int = Field(..., description="Country ID")

    model_config = ConfigDict(from_attributes=True)


# ============ Hotel ============

class HotelBase(BaseModel):
    """Hotel Base Model"""

    # Hotel Name
    name: str = Field(..., min_length=1, max_length=200, description="Hotel Name")
    # Address
    address: Optional[str] = Field(None, max_length=500, description="Address")
    # Rating
    rating: float = Field(0, ge=0, description="Rating")


class HotelCreate(HotelBase):
    """Create Hotel Request Model"""

    # Must reference an existing country
    country_id: int = Field(..., ge=1, description="Country ID")


class HotelUpdate(BaseModel):
    """Update Hotel Request Model (All fields optional, only address nullable)"""

    # When sent, must match the id in the path
    id: Optional[int] = None
    name: Optional[str] = Field(None, min_length=1, max_length=200)
    address: Optional[str] = Field(None, max_length=500)
    rating: Optional[float] = Field(None, ge=0)
    country_id: Optional[int] = Field(None, ge=1)

    @field_validator("name", "rating", "country_id")
    @classmethod
    def reject_null(cls, v):
        if v is None:
            raise ValueError("may be omitted but not null")
        return v


class HotelResponse(HotelBase):
    """Hotel Response Model (flat)"""

    id: int = Field(..., description="Hotel ID")
    country_id: int = Field(..., description="Country ID")

    model_config = ConfigDict(from_attributes=True)


class HotelDetail(HotelBase):
    """Hotel Detail Model, including its country"""

    id: int = Field(..., description="Hotel ID")
    country: CountryResponse = Field(..., description="Country")

    model_config = ConfigDict(from_attributes=True)


class CountryDetail(CountryBase):
    """Country Detail Model, including its hotels"""

    id: int = Field(..., description="Country ID")
    hotels: list[HotelResponse] = Field(default_factory=list, description="Hotels")

    model_config = ConfigDict(from_attributes=True)
