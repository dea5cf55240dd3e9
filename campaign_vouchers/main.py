from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from campaign_vouchers import config
from campaign_vouchers.errors import (
    CampaignNotFound,
    CodeSpaceExhausted,
    DuplicateName,
    InvalidVoucherCount,
    VoucherStoreError,
)
from campaign_vouchers.logging_config import setup_logging

from campaign_vouchers.routes.campaigns import router as campaigns_router
from campaign_vouchers.routes.vouchers import router as vouchers_router


logger = logging.getLogger(__name__)

_ERROR_STATUS = {
    DuplicateName: 409,
    CampaignNotFound: 404,
    InvalidVoucherCount: 400,
    CodeSpaceExhausted: 409,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    logger.info("Campaign Vouchers API starting", extra={"batch_size": config.VOUCHER_BATCH_SIZE})
    yield
    logger.info("Campaign Vouchers API stopped")


app = FastAPI(title="Campaign Vouchers", lifespan=lifespan)

# ─── CORS ─────────────────────────────────────────────────────────
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "DELETE", "OPTIONS"],
    allow_headers=["Content-Type"],
)


# ─── Domain errors → HTTP ─────────────────────────────────────────
@app.exception_handler(VoucherStoreError)
async def voucher_store_error_handler(_: Request, exc: VoucherStoreError) -> JSONResponse:
    status_code = _ERROR_STATUS.get(type(exc), 400)
    return JSONResponse(status_code=status_code, content={"detail": exc.message})


app.include_router(campaigns_router)
app.include_router(vouchers_router)


@app.get("/health")
async def health():
    return {"ok": True}


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("campaign_vouchers.main:app", host=config.HOST, port=config.PORT, reload=True)
