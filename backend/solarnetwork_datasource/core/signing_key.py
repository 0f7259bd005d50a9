"""SNWS2 Signing Key — two-round HMAC-SHA256 key derivation scoped to a UTC day.

Invariants:
    - key is 64 lowercase hex chars (32 bytes of SHA-256 output)
    - key depends only on (secret, UTC calendar date of now)
    - SigningKeyInfo.date keeps the full instant, not the truncated date
    - Secrets are encoded as UTF-8 before hashing

Design Decisions:
    - No secret validation here: empty secrets are rejected by the health check,
      derivation stays total (ADR: single responsibility)
    - Naive datetimes are read as UTC, never local time
"""

import hashlib
import hmac
from dataclasses import dataclass
from datetime import datetime, timezone

SECRET_PREFIX = "SNWS2"
DATE_FORMAT = "%Y%m%d"
HASH_DATA = "snws2_request"
SIGNING_KEY_RESOURCE = "sk"
SECRET_ENCODING = "utf-8"


@dataclass(frozen=True)
class SigningKeyInfo:
    """Derived signing key plus the instant it was derived for."""
    key: str
    date: datetime

    def is_valid_at(self, instant: datetime) -> bool:
        """True while instant falls on the same UTC calendar day as date."""
        return utc_date_string(instant) == utc_date_string(self.date)


def to_utc(instant: datetime) -> datetime:
    if instant.tzinfo is None:
        return instant.replace(tzinfo=timezone.utc)
    return instant.astimezone(timezone.utc)


def utc_date_string(instant: datetime) -> str:
    """Format instant as the YYYYMMDD UTC date signed in round one."""
    return to_utc(instant).strftime(DATE_FORMAT)


def derive_signing_key(secret: str, now: datetime) -> SigningKeyInfo:
    """Derive the SNWS2 signing key valid for the UTC day of now."""
    now = to_utc(now)
    day_key = hmac.new(
        (SECRET_PREFIX + secret).encode(SECRET_ENCODING),
        utc_date_string(now).encode("ascii"),
        hashlib.sha256,
    ).digest()
    request_key = hmac.new(
        day_key, HASH_DATA.encode("ascii"), hashlib.sha256,
    ).hexdigest()
    return SigningKeyInfo(key=request_key, date=now)
