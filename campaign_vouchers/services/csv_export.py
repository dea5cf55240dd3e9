import re
from typing import Iterable, Optional

from campaign_vouchers.models.campaign import Campaign
from campaign_vouchers.models.voucher import Voucher


CSV_HEADER = "id,code,campaignId"


def vouchers_to_csv(vouchers: Iterable[Voucher]) -> str:
    # fields are written verbatim, without quoting
    rows = [f"{v.id},{v.code},{v.campaign_id}" for v in vouchers]
    return "\n".join([CSV_HEADER, *rows])


def csv_filename(campaign: Optional[Campaign], fallback: str) -> str:
    """Download name for a campaign's voucher export, e.g. ``vouchers-summer_sale.csv``."""
    safe_name = ""
    if campaign is not None:
        safe_name = re.sub(r"[^a-z0-9]", "_", campaign.name, flags=re.IGNORECASE).lower()
    return f"vouchers-{safe_name or fallback}.csv"
