from fastapi import APIRouter, Depends, Response

from campaign_vouchers.schemas.voucher import VoucherCreate, VoucherOut, VouchersCreated
from campaign_vouchers.services.campaign_service import CampaignRegistry
from campaign_vouchers.services.csv_export import csv_filename, vouchers_to_csv
from campaign_vouchers.services.voucher_service import VoucherEngine
from campaign_vouchers.store import get_engine, get_registry


router = APIRouter(prefix="/campaigns", tags=["vouchers"])


@router.post("/{campaign_id}/vouchers", response_model=VouchersCreated)
async def create_vouchers(
    campaign_id: str,
    payload: VoucherCreate,
    engine: VoucherEngine = Depends(get_engine),
):
    # yields to the event loop every few thousand vouchers
    created = await engine.create_vouchers(campaign_id, payload.count)
    return VouchersCreated(created=len(created))


@router.get("/{campaign_id}/vouchers", response_model=list[VoucherOut])
async def list_vouchers(
    campaign_id: str,
    engine: VoucherEngine = Depends(get_engine),
):
    return [VoucherOut.model_validate(v) for v in engine.list_vouchers(campaign_id)]


@router.get("/{campaign_id}/vouchers.csv")
async def download_vouchers_csv(
    campaign_id: str,
    registry: CampaignRegistry = Depends(get_registry),
    engine: VoucherEngine = Depends(get_engine),
):
    vouchers = engine.list_vouchers(campaign_id)
    filename = csv_filename(registry.get_campaign(campaign_id), fallback=campaign_id)
    return Response(
        content=vouchers_to_csv(vouchers),
        media_type="text/csv",
        headers={"Content-Disposition": f'attachment; filename="{filename}"'},
    )
