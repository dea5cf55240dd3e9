from fastapi import APIRouter, Depends, Response, status

from campaign_vouchers.deps.campaign import get_path_campaign
from campaign_vouchers.errors import CampaignNotFound
from campaign_vouchers.models.campaign import Campaign
from campaign_vouchers.schemas.campaign import CampaignCreate, CampaignOut
from campaign_vouchers.services.campaign_service import CampaignRegistry
from campaign_vouchers.store import get_registry


router = APIRouter(prefix="/campaigns", tags=["campaigns"])


@router.get("", response_model=list[CampaignOut])
async def list_campaigns(registry: CampaignRegistry = Depends(get_registry)):
    return [CampaignOut.model_validate(c) for c in registry.list_campaigns()]


@router.post("", response_model=CampaignOut, status_code=status.HTTP_201_CREATED)
async def create_campaign(
    payload: CampaignCreate,
    registry: CampaignRegistry = Depends(get_registry),
):
    # DuplicateName -> 409
    campaign = registry.create_campaign(payload)
    return CampaignOut.model_validate(campaign)


@router.get("/{campaign_id}", response_model=CampaignOut)
async def get_campaign(campaign: Campaign = Depends(get_path_campaign)):
    return CampaignOut.model_validate(campaign)


@router.delete("/{campaign_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_campaign(
    campaign_id: str,
    registry: CampaignRegistry = Depends(get_registry),
):
    # also drops the campaign's vouchers and frees their codes
    if not registry.delete_campaign(campaign_id):
        raise CampaignNotFound(details={"campaign_id": campaign_id})
    return Response(status_code=status.HTTP_204_NO_CONTENT)
