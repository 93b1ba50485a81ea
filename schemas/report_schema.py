from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from schemas.fields import UtcDatetime


class MissingPersonSchema(BaseModel):
    missing_person_name: str = Field(min_length=1)
    gender: Optional[str] = None
    age_at_missing: Optional[int] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    last_seen_at: UtcDatetime
    last_seen_location: str = Field(min_length=1)
    description: Optional[str] = None
    main_photo_url: Optional[str] = None


class UpdateMissingPersonSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
    missing_person_name: Optional[str] = None
    gender: Optional[str] = None
    age_at_missing: Optional[int] = None
    height: Optional[float] = None
    weight: Optional[float] = None
    last_seen_at: Optional[UtcDatetime] = None
    last_seen_location: Optional[str] = None
    description: Optional[str] = None
    main_photo_url: Optional[str] = None


class MissingAnimalSchema(BaseModel):
    animal_type: str = Field(min_length=1)
    breed: Optional[str] = None
    animal_name: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    last_seen_at: UtcDatetime
    last_seen_location: str = Field(min_length=1)
    description: Optional[str] = None
    main_photo_url: Optional[str] = None


class UpdateMissingAnimalSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    status: Optional[str] = None
    animal_type: Optional[str] = None
    breed: Optional[str] = None
    animal_name: Optional[str] = None
    gender: Optional[str] = None
    age: Optional[int] = None
    last_seen_at: Optional[UtcDatetime] = None
    last_seen_location: Optional[str] = None
    description: Optional[str] = None
    main_photo_url: Optional[str] = None
