from campaign_vouchers.services.campaign_service import CampaignRegistry
from campaign_vouchers.services.voucher_service import VoucherEngine


# In-memory store, lives as long as the process. Nothing is persisted.


def build_store(**engine_options) -> tuple[CampaignRegistry, VoucherEngine]:
    registry = CampaignRegistry()
    engine = VoucherEngine(registry, **engine_options)
    return registry, engine


registry, engine = build_store()


def get_registry() -> CampaignRegistry:
    return registry


def get_engine() -> VoucherEngine:
    return engine
