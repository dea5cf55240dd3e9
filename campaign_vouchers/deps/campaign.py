from fastapi import Depends, Path

from campaign_vouchers.models.campaign import Campaign
from campaign_vouchers.services.campaign_service import CampaignRegistry
from campaign_vouchers.store import get_registry


async def get_path_campaign(
    campaign_id: str = Path(...),
    registry: CampaignRegistry = Depends(get_registry),
) -> Campaign:
    # raises CampaignNotFound -> 404
    return registry.require_campaign(campaign_id)
