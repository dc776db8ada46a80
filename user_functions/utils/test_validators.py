# user_functions/utils/test_validators.py
"""
입력 검증 함수 테스트

사용법: python -m pytest user_functions/utils/test_validators.py -v
"""

from datetime import datetime, timedelta, timezone

import pytest
from user_functions.utils.validators import (
    contains_korean_script,
    is_valid_email_shape,
    is_at_least_one_minute_old,
)


@pytest.mark.parametrize("text", ["민수", "Minsu김", "ㄱ", "ㅏ", "\u1100"])
def test_contains_korean_script_detects_hangul(text):
    assert contains_korean_script(text)


@pytest.mark.parametrize("text", ["Minsu", "", "a|b", "José", "田中"])
def test_contains_korean_script_ignores_other_scripts(text):
    assert not contains_korean_script(text)


def test_is_valid_email_shape():
    assert is_valid_email_shape("a@b.com")
    assert is_valid_email_shape("@")
    assert not is_valid_email_shape("abc")
    assert not is_valid_email_shape(123)
    assert not is_valid_email_shape(None)


def test_is_at_least_one_minute_old_boundary():
    """정확히 60,000ms 가 지난 시점부터 True"""
    created = datetime(2024, 1, 15, 10, 30, tzinfo=timezone.utc)

    assert not is_at_least_one_minute_old(created, now=created)
    assert not is_at_least_one_minute_old(created, now=created + timedelta(milliseconds=59999))
    assert is_at_least_one_minute_old(created, now=created + timedelta(milliseconds=60000))
    assert is_at_least_one_minute_old(created, now=created + timedelta(hours=1))


def test_is_at_least_one_minute_old_accepts_store_values():
    now = datetime(2024, 1, 15, 10, 31, tzinfo=timezone.utc)

    assert is_at_least_one_minute_old("2024-01-15T10:30:00Z", now=now)
    assert is_at_least_one_minute_old(datetime(2024, 1, 15, 10, 30), now=now)  # naive = UTC
    assert not is_at_least_one_minute_old(int(now.timestamp() * 1000) - 1000, now=now)


def test_is_at_least_one_minute_old_defaults_to_current_time():
    assert is_at_least_one_minute_old(datetime.now(timezone.utc) - timedelta(minutes=2))
    assert not is_at_least_one_minute_old(datetime.now(timezone.utc))


def test_is_at_least_one_minute_old_rejects_unknown_values():
    with pytest.raises(ValueError):
        is_at_least_one_minute_old(object())
