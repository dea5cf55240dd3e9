from datetime import datetime
from typing import Optional

from pydantic import AliasChoices, AwareDatetime, BaseModel, Field, field_validator, model_validator


class CampaignCreate(BaseModel):
    name: str = Field(..., min_length=1)

    valid_from: AwareDatetime = Field(..., validation_alias=AliasChoices("validFrom", "valid_from"))
    valid_to: AwareDatetime = Field(..., validation_alias=AliasChoices("validTo", "valid_to"))

    amount: float = Field(..., gt=0, allow_inf_nan=False)
    currency: str = Field(..., pattern=r"^[A-Za-z]{3}$")

    prefix: str = Field(..., min_length=3)

    @field_validator("name", "prefix", mode="before")
    @classmethod
    def strip_text(cls, v):
        return v.strip() if isinstance(v, str) else v

    @field_validator("currency")
    @classmethod
    def upper_currency(cls, v: str) -> str:
        return v.upper()

    @model_validator(mode="after")
    def validate_window(self) -> "CampaignCreate":
        if self.valid_to <= self.valid_from:
            raise ValueError("validTo must be after validFrom")
        return self


class CampaignOut(BaseModel):
    id: str
    name: str

    valid_from: datetime = Field(
        validation_alias=AliasChoices("valid_from", "validFrom"),
        serialization_alias="validFrom",
    )
    valid_to: datetime = Field(
        validation_alias=AliasChoices("valid_to", "validTo"),
        serialization_alias="validTo",
    )

    amount: float
    currency: str
    prefix: str

    created_at: Optional[datetime] = Field(
        default=None,
        validation_alias=AliasChoices("created_at", "createdAt"),
        serialization_alias="createdAt",
    )

    class Config:
        from_attributes = True
