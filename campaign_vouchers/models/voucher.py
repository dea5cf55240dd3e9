from dataclasses import dataclass


@dataclass(frozen=True)
class Voucher:
    id: str

    # e.g. "SUMMER-0AB12Z", unique across all campaigns
    code: str

    campaign_id: str
