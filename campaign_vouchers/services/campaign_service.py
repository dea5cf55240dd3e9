from __future__ import annotations

import logging
import uuid
from typing import Callable, Optional

from campaign_vouchers.errors import CampaignNotFound, DuplicateName
from campaign_vouchers.models.campaign import Campaign
from campaign_vouchers.schemas.campaign import CampaignCreate


logger = logging.getLogger(__name__)


class CampaignRegistry:
    """In-memory campaign collection.

    Owns the campaigns and the case-insensitive name index. Deletes are
    broadcast to the registered listeners (the voucher engine releases the
    campaign's vouchers from there).
    """

    def __init__(self) -> None:
        self._campaigns: dict[str, Campaign] = {}
        self._ids_by_name: dict[str, str] = {}
        self._delete_listeners: list[Callable[[str], object]] = []

    def add_delete_listener(self, callback: Callable[[str], object]) -> None:
        self._delete_listeners.append(callback)

    def create_campaign(self, data: CampaignCreate) -> Campaign:
        campaign = Campaign(
            id=str(uuid.uuid4()),
            name=data.name,
            valid_from=data.valid_from,
            valid_to=data.valid_to,
            amount=data.amount,
            currency=data.currency,
            prefix=data.prefix,
        )
        if campaign.name_key in self._ids_by_name:
            logger.info("duplicate campaign name rejected", extra={"campaign_name": data.name})
            raise DuplicateName(details={"name": data.name})

        self._campaigns[campaign.id] = campaign
        self._ids_by_name[campaign.name_key] = campaign.id

        logger.info(
            "campaign created",
            extra={"campaign_id": campaign.id, "campaign_name": campaign.name, "prefix": campaign.prefix},
        )
        return campaign

    def list_campaigns(self) -> list[Campaign]:
        return list(self._campaigns.values())

    def get_campaign(self, campaign_id: str) -> Optional[Campaign]:
        return self._campaigns.get(campaign_id)

    def require_campaign(self, campaign_id: str) -> Campaign:
        campaign = self._campaigns.get(campaign_id)
        if campaign is None:
            raise CampaignNotFound(details={"campaign_id": campaign_id})
        return campaign

    def delete_campaign(self, campaign_id: str) -> bool:
        campaign = self._campaigns.pop(campaign_id, None)
        if campaign is None:
            return False

        self._ids_by_name.pop(campaign.name_key, None)
        for callback in self._delete_listeners:
            callback(campaign_id)

        logger.info("campaign deleted", extra={"campaign_id": campaign_id, "campaign_name": campaign.name})
        return True

    def __len__(self) -> int:
        return len(self._campaigns)

    def __contains__(self, campaign_id: object) -> bool:
        return campaign_id in self._campaigns
