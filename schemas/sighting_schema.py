from typing import Optional

from pydantic import BaseModel, Field

from schemas.fields import UtcDatetime


class SightingSchema(BaseModel):
    sighting_at: UtcDatetime
    sighting_location: str = Field(min_length=1)
    description: Optional[str] = None
    sighting_photo_url: Optional[str] = None
