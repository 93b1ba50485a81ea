from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Optional


class RegisterSchema(BaseModel):
    phone_number: str = Field(min_length=1)
    real_name: str = Field(min_length=1)
    nickname: str = Field(min_length=1, max_length=50)
    ci: str = Field(min_length=1)
    firebase_uid: str = Field(min_length=1)


class UpdateProfileSchema(BaseModel):
    model_config = ConfigDict(extra="ignore")

    nickname: Optional[str] = Field(default=None, min_length=1, max_length=50)
    profile_image_url: Optional[str] = None

    @field_validator("nickname")
    @classmethod
    def nickname_not_null(cls, value):
        # only runs when the client actually sent the key
        if value is None:
            raise ValueError("nickname cannot be null")
        return value
