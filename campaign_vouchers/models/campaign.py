from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Campaign:
    id: str

    name: str

    valid_from: datetime
    valid_to: datetime

    # discount value, always > 0
    amount: float
    currency: str

    # used when generating voucher codes: "<prefix>-XXXXXX"
    prefix: str

    created_at: datetime = field(default_factory=_utcnow)

    @property
    def name_key(self) -> str:
        return self.name.strip().casefold()
