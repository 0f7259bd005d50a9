"""SNWS2 Signing Key — verifies the two-round HMAC derivation.

Tests:
    - Pinned fixture for secret "mysecret" on 2024-01-15
    - Same UTC day → same key; different day or secret → different key
    - key is 64 lowercase hex chars; date keeps the full instant
    - Naive datetimes read as UTC; other offsets converted to UTC first
    - Empty and non-ASCII secrets are well-defined
"""

import hashlib
import hmac
import re
from dataclasses import FrozenInstanceError
from datetime import datetime, timedelta, timezone

import pytest

from solarnetwork_datasource.core.signing_key import (
    DATE_FORMAT, HASH_DATA, SECRET_PREFIX, SIGNING_KEY_RESOURCE,
    SigningKeyInfo, derive_signing_key, utc_date_string,
)
from tests.signing_fixtures import MYSECRET_20240115, MYSECRET_20240116

JAN_15 = datetime(2024, 1, 15, tzinfo=timezone.utc)


def test_constants():
    assert SECRET_PREFIX == "SNWS2"
    assert DATE_FORMAT == "%Y%m%d"
    assert HASH_DATA == "snws2_request"
    assert SIGNING_KEY_RESOURCE == "sk"


def test_pinned_fixture_for_mysecret():
    info = derive_signing_key("mysecret", JAN_15)
    assert info.key == MYSECRET_20240115


def test_matches_manual_two_round_construction():
    k1 = hmac.new(b"SNWS2mysecret", b"20240115", hashlib.sha256).digest()
    k2 = hmac.new(k1, b"snws2_request", hashlib.sha256).hexdigest()
    assert derive_signing_key("mysecret", JAN_15).key == k2


def test_same_key_within_utc_day():
    early = derive_signing_key("mysecret", JAN_15)
    late = derive_signing_key("mysecret", JAN_15 + timedelta(hours=23, minutes=59))
    assert early.key == late.key


def test_key_changes_across_utc_days():
    next_day = derive_signing_key("mysecret", JAN_15 + timedelta(days=1))
    assert next_day.key == MYSECRET_20240116
    assert next_day.key != MYSECRET_20240115


def test_key_changes_with_secret():
    a = derive_signing_key("mysecret", JAN_15)
    b = derive_signing_key("mysecret2", JAN_15)
    assert a.key != b.key


def test_key_is_64_lowercase_hex():
    for secret in ("mysecret", "", "ÄÖÜ-secret", "x" * 500):
        key = derive_signing_key(secret, JAN_15).key
        assert re.fullmatch(r"[0-9a-f]{64}", key)


def test_date_keeps_full_instant():
    now = datetime(2024, 1, 15, 10, 20, 30, 123456, tzinfo=timezone.utc)
    assert derive_signing_key("mysecret", now).date == now


def test_naive_datetime_treated_as_utc():
    naive = datetime(2024, 1, 15, 10, 0)
    info = derive_signing_key("mysecret", naive)
    assert info.key == MYSECRET_20240115
    assert info.date.tzinfo == timezone.utc


def test_offset_datetime_converted_to_utc_day():
    # 2024-01-16 01:00 at +05:00 is still 2024-01-15 in UTC
    tz = timezone(timedelta(hours=5))
    info = derive_signing_key("mysecret", datetime(2024, 1, 16, 1, 0, tzinfo=tz))
    assert info.key == MYSECRET_20240115
    assert info.date == datetime(2024, 1, 15, 20, 0, tzinfo=timezone.utc)


def test_empty_secret_is_well_defined():
    assert derive_signing_key("", JAN_15).key == derive_signing_key("", JAN_15).key
    assert derive_signing_key("", JAN_15).key != MYSECRET_20240115


def test_non_ascii_secret_hashed_as_utf8():
    secret = "sécret-☀"
    k1 = hmac.new(("SNWS2" + secret).encode("utf-8"), b"20240115", hashlib.sha256).digest()
    expected = hmac.new(k1, b"snws2_request", hashlib.sha256).hexdigest()
    assert derive_signing_key(secret, JAN_15).key == expected


def test_utc_date_string():
    assert utc_date_string(JAN_15) == "20240115"
    assert utc_date_string(datetime(2024, 12, 31, 23, 59, 59)) == "20241231"


def test_is_valid_at_same_day_only():
    info = derive_signing_key("mysecret", JAN_15 + timedelta(hours=3))
    assert info.is_valid_at(JAN_15 + timedelta(hours=23, minutes=59, seconds=59))
    assert not info.is_valid_at(JAN_15 + timedelta(days=1))
    assert not info.is_valid_at(JAN_15 - timedelta(seconds=1))


def test_signing_key_info_is_immutable():
    info = SigningKeyInfo(key=MYSECRET_20240115, date=JAN_15)
    with pytest.raises(FrozenInstanceError):
        info.key = "0" * 64
