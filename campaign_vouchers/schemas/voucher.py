from pydantic import AliasChoices, BaseModel, Field

from campaign_vouchers.config import MAX_VOUCHERS_PER_REQUEST


class VoucherCreate(BaseModel):
    count: int = Field(..., ge=1, le=MAX_VOUCHERS_PER_REQUEST)


class VoucherOut(BaseModel):
    id: str
    code: str
    campaign_id: str = Field(
        validation_alias=AliasChoices("campaign_id", "campaignId"),
        serialization_alias="campaignId",
    )

    class Config:
        from_attributes = True


class VouchersCreated(BaseModel):
    created: int
