"""
Domain errors raised by the campaign registry and the voucher engine.

The HTTP layer maps them to status codes in ``campaign_vouchers.main``.
"""

from __future__ import annotations

from typing import Any, Optional


class VoucherStoreError(Exception):
    message = "Voucher store error"

    def __init__(self, message: Optional[str] = None, details: Optional[dict[str, Any]] = None) -> None:
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)

    def __str__(self) -> str:
        return self.message


class DuplicateName(VoucherStoreError):
    message = "Campaign name already exists"


class CampaignNotFound(VoucherStoreError):
    message = "Campaign not found"


class InvalidVoucherCount(VoucherStoreError):
    message = "Voucher count must be a positive integer"


class CodeSpaceExhausted(VoucherStoreError):
    message = "No free voucher codes left for this prefix"
