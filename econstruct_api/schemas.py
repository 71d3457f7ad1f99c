from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field


class LocationModel(BaseModel):
    lat: float = Field(ge=-90.0, le=90.0)
    lng: float = Field(ge=-180.0, le=180.0)


class UploadValidateModel(BaseModel):
    file_name: str = ""


class UploadValidateResponse(BaseModel):
    file_name: str
    number: Optional[int] = None
    code: Optional[str] = None
    error: Optional[str] = None


class SelectionModel(BaseModel):
    file_name: str = ""
    location: Optional[LocationModel] = None


class ContinueResponse(BaseModel):
    code: str
    path: str


class GeocodeResponse(BaseModel):
    location: Optional[LocationModel] = None
    error: Optional[str] = None
