from __future__ import annotations

import asyncio
import logging
import secrets
import string
import time
import uuid
from collections import Counter
from typing import Callable

from campaign_vouchers import config
from campaign_vouchers.errors import CampaignNotFound, CodeSpaceExhausted, InvalidVoucherCount
from campaign_vouchers.models.campaign import Campaign
from campaign_vouchers.models.voucher import Voucher
from campaign_vouchers.services.campaign_service import CampaignRegistry


logger = logging.getLogger(__name__)

# Voucher code format = PREFIX-XXXXXX, XXXXXX being base36 (0-9, A-Z)
CODE_LENGTH = 6
CODE_ALPHABET = string.digits + string.ascii_uppercase
CODE_SPACE = len(CODE_ALPHABET) ** CODE_LENGTH


def to_base36(n: int, length: int = CODE_LENGTH) -> str:
    """Render ``n`` in upper-case base36, zero-padded to ``length``."""
    if n < 0:
        raise ValueError("n must be >= 0")
    digits = []
    while n:
        n, rem = divmod(n, len(CODE_ALPHABET))
        digits.append(CODE_ALPHABET[rem])
    return "".join(reversed(digits)).rjust(length, "0")


def _code_prefix(code: str) -> str:
    return code[: -(CODE_LENGTH + 1)]


class VoucherEngine:
    """Generates and stores voucher codes.

    Owns the voucher collection and the global set of live codes. A code is
    drawn, checked against the set and committed without an ``await`` in
    between, so concurrent generations on the same event loop cannot
    commit the same code. Long generations hand control back to the loop
    every ``batch_size`` vouchers.
    """

    def __init__(
        self,
        registry: CampaignRegistry,
        *,
        batch_size: int = config.VOUCHER_BATCH_SIZE,
        max_code_attempts: int = config.MAX_CODE_ATTEMPTS,
        randbelow: Callable[[int], int] = secrets.randbelow,
    ) -> None:
        if batch_size < 1:
            raise ValueError("batch_size must be >= 1")
        if max_code_attempts < 1:
            raise ValueError("max_code_attempts must be >= 1")

        self._registry = registry
        self._batch_size = batch_size
        self._max_code_attempts = max_code_attempts
        self._randbelow = randbelow

        self._vouchers: dict[str, Voucher] = {}
        self._by_campaign: dict[str, list[Voucher]] = {}
        self._codes: set[str] = set()
        self._codes_by_prefix: Counter[str] = Counter()

        registry.add_delete_listener(self.release_campaign_vouchers)

    # ---------------- generation ----------------

    async def create_vouchers(self, campaign_id: str, count: int) -> list[Voucher]:
        if isinstance(count, bool) or not isinstance(count, int) or count < 1:
            raise InvalidVoucherCount(details={"count": count})

        campaign = self._registry.require_campaign(campaign_id)

        free = CODE_SPACE - self._codes_by_prefix[campaign.prefix]
        if count > free:
            logger.warning(
                "voucher request exceeds free code space",
                extra={"campaign_id": campaign_id, "prefix": campaign.prefix, "count": count, "free": free},
            )
            raise CodeSpaceExhausted(details={"prefix": campaign.prefix, "requested": count, "free": free})

        logger.info(
            "voucher generation started",
            extra={"campaign_id": campaign_id, "count": count, "batch_size": self._batch_size},
        )
        started = time.perf_counter()

        created: list[Voucher] = []
        for i in range(count):
            code = self._draw_code(campaign)
            created.append(self._commit(campaign, code))

            if (i + 1) % self._batch_size == 0:
                logger.debug(
                    "voucher batch committed",
                    extra={"campaign_id": campaign_id, "committed": i + 1, "count": count},
                )
                await asyncio.sleep(0)

                # the campaign may have been deleted while we were suspended;
                # its vouchers were released by the delete listener
                if campaign_id not in self._registry:
                    logger.info(
                        "voucher generation aborted, campaign deleted",
                        extra={"campaign_id": campaign_id, "committed": i + 1, "count": count},
                    )
                    raise CampaignNotFound(details={"campaign_id": campaign_id})

        logger.info(
            "voucher generation finished",
            extra={
                "campaign_id": campaign_id,
                "created": len(created),
                "elapsed_ms": round((time.perf_counter() - started) * 1000, 1),
            },
        )
        return created

    def _draw_code(self, campaign: Campaign) -> str:
        for attempt in range(1, self._max_code_attempts + 1):
            code = f"{campaign.prefix}-{to_base36(self._randbelow(CODE_SPACE))}"
            if code not in self._codes:
                return code
            logger.debug("voucher code collision", extra={"code": code, "attempt": attempt})

        logger.warning(
            "no free voucher code found",
            extra={"campaign_id": campaign.id, "prefix": campaign.prefix, "attempts": self._max_code_attempts},
        )
        raise CodeSpaceExhausted(
            details={"prefix": campaign.prefix, "attempts": self._max_code_attempts},
        )

    def _commit(self, campaign: Campaign, code: str) -> Voucher:
        voucher = Voucher(id=str(uuid.uuid4()), code=code, campaign_id=campaign.id)
        self._codes.add(code)
        self._codes_by_prefix[campaign.prefix] += 1
        self._vouchers[voucher.id] = voucher
        self._by_campaign.setdefault(campaign.id, []).append(voucher)
        return voucher

    # ---------------- reads ----------------

    def list_vouchers(self, campaign_id: str) -> list[Voucher]:
        return list(self._by_campaign.get(campaign_id, ()))

    def code_in_use(self, code: str) -> bool:
        return code in self._codes

    def __len__(self) -> int:
        return len(self._vouchers)

    # ---------------- cascade delete ----------------

    def release_campaign_vouchers(self, campaign_id: str) -> int:
        vouchers = self._by_campaign.pop(campaign_id, [])
        for voucher in vouchers:
            self._codes.discard(voucher.code)
            self._vouchers.pop(voucher.id, None)

            prefix = _code_prefix(voucher.code)
            self._codes_by_prefix[prefix] -= 1
            if self._codes_by_prefix[prefix] <= 0:
                del self._codes_by_prefix[prefix]

        if vouchers:
            logger.info("vouchers released", extra={"campaign_id": campaign_id, "released": len(vouchers)})
        return len(vouchers)
