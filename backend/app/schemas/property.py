# app/schemas/property.py
from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class PropertyBase(BaseModel):
    model_config = ConfigDict(str_strip_whitespace=True)

    title: str = Field(..., min_length=1)
    address: str = Field(..., min_length=1)
    deposit: int = Field(..., ge=0)
    monthly_rent: int = Field(..., ge=0)
    # None = 모름, 0 = 관리비 없음 (둘은 다름)
    maintenance_fee: Optional[int] = Field(None, ge=0)
    description: str = ""
    other_info: Optional[str] = None
    photos: List[str] = Field(default_factory=list)
    category: Optional[str] = None
    original_url: Optional[str] = None


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(BaseModel):
    """부분 수정. 보낸 필드만 반영 (exclude_unset)."""
    model_config = ConfigDict(str_strip_whitespace=True)

    title: Optional[str] = Field(None, min_length=1)
    address: Optional[str] = Field(None, min_length=1)
    deposit: Optional[int] = Field(None, ge=0)
    monthly_rent: Optional[int] = Field(None, ge=0)
    maintenance_fee: Optional[int] = Field(None, ge=0)
    description: Optional[str] = None
    other_info: Optional[str] = None
    photos: Optional[List[str]] = None
    category: Optional[str] = None
    original_url: Optional[str] = None


class PropertyOut(PropertyBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_active: int
    is_deleted: int
    deleted_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
