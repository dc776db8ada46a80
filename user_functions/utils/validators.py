# user_functions/utils/validators.py
"""
사용자 입력 검증용 순수 함수 모음.
"""
import re
from datetime import datetime, timedelta
from typing import Any, Optional

from .datetime_utils import DateTimeUtils

# 한글 자모(U+1100-U+11FF), 호환용 자음/모음(ㄱ-ㅎ, ㅏ-ㅣ), 완성형 음절(가-힣)
KOREAN_SCRIPT_PATTERN = re.compile(r'[\u1100-\u11ff\u3131-\u314e\u314f-\u3163\uac00-\ud7a3]')

MIN_DELETE_AGE = timedelta(minutes=1)


def contains_korean_script(text: Any) -> bool:
    """문자열에 한글 문자가 하나라도 포함되어 있으면 True."""
    return KOREAN_SCRIPT_PATTERN.search(str(text)) is not None


def is_valid_email_shape(value: Any) -> bool:
    """문자열이고 '@' 를 포함하면 True. RFC 수준의 검사는 하지 않습니다."""
    return isinstance(value, str) and "@" in value


def is_at_least_one_minute_old(timestamp: Any, now: Optional[datetime] = None) -> bool:
    """
    timestamp 로부터 1분(60,000ms) 이상 지났는지 확인합니다.

    :param timestamp: Firestore 타임스탬프 등 DateTimeUtils.to_utc_datetime 이 해석할 수 있는 값
    :param now: 비교 기준 시각 (기본값: 현재 UTC 시각)
    :raises ValueError: timestamp 를 시점으로 해석할 수 없는 경우
    """
    created_at = DateTimeUtils.to_utc_datetime(timestamp)
    current = DateTimeUtils.to_utc_datetime(now) if now is not None else DateTimeUtils.now()
    return current - created_at >= MIN_DELETE_AGE
