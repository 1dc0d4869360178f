from typing import Optional, List, Any
from pydantic import BaseModel, Field, field_validator
from datetime import datetime

from app.schemas.business_hours import BusinessHoursOut, check_slot_times


class StoreCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=1024)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    categories: List[str] = Field(default_factory=list, max_length=10)
    business_hours: Optional[Any] = None
    parking_info: str = Field(default="", max_length=1000)
    website_url: str = Field(default="", max_length=1024)
    google_map_url: str = Field(default="", max_length=1024)
    sns_urls: List[str] = Field(default_factory=list, max_length=10)
    tags: List[str] = Field(default_factory=list, max_length=20)
    photos: List[str] = Field(default_factory=list, max_length=20)

    @field_validator('business_hours')
    @classmethod
    def validate_slot_times(cls, v):
        return check_slot_times(v)


class StoreUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=255)
    address: Optional[str] = Field(None, min_length=1, max_length=1024)
    latitude: Optional[float] = Field(None, ge=-90, le=90)
    longitude: Optional[float] = Field(None, ge=-180, le=180)
    categories: Optional[List[str]] = Field(None, max_length=10)
    business_hours: Optional[Any] = None
    parking_info: Optional[str] = Field(None, max_length=1000)
    website_url: Optional[str] = Field(None, max_length=1024)
    google_map_url: Optional[str] = Field(None, max_length=1024)
    sns_urls: Optional[List[str]] = Field(None, max_length=10)
    tags: Optional[List[str]] = Field(None, max_length=20)
    photos: Optional[List[str]] = Field(None, max_length=20)

    @field_validator('business_hours')
    @classmethod
    def validate_slot_times(cls, v):
        return check_slot_times(v)


class StoreOut(BaseModel):
    id: str
    name: str
    address: str
    latitude: float
    longitude: float
    categories: List[str] = []
    business_hours: BusinessHoursOut
    parking_info: str = ""
    website_url: str = ""
    google_map_url: str = ""
    sns_urls: List[str] = []
    tags: List[str] = []
    photos: List[str] = []
    created_at: datetime
    updated_at: datetime
