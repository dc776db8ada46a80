# user_functions/utils/datetime_utils.py
"""
Firestore 타임스탬프와 JSON 응답 사이의 시간 변환을 담당하는 유틸리티 모듈

이 모듈의 목적:
1. Firestore 에서 읽은 시간 값을 UTC timezone-aware datetime 으로 통일
2. 응답 본문에 들어가는 datetime 을 ISO 문자열로 변환
"""

import logging
from datetime import datetime, timezone
from typing import Any
from dateutil import parser as dateutil_parser

logger = logging.getLogger(__name__)


class DateTimeUtils:
    """시간/날짜 처리를 위한 중앙화된 유틸리티 클래스"""

    @staticmethod
    def now() -> datetime:
        """현재 시간을 UTC timezone-aware datetime으로 반환"""
        return datetime.now(timezone.utc)

    @staticmethod
    def parse_iso_datetime(iso_string: str) -> datetime:
        """
        ISO 포맷 문자열을 datetime 객체로 파싱

        지원 포맷:
        - 2024-01-15T10:30:00Z
        - 2024-01-15T10:30:00+09:00
        - 2024-01-15T10:30:00.123456Z
        - 2024-01-15T10:30:00
        """
        try:
            if not iso_string:
                raise ValueError("빈 문자열은 파싱할 수 없습니다")

            if iso_string.endswith('Z'):
                iso_string = iso_string[:-1] + '+00:00'

            dt = dateutil_parser.isoparse(iso_string)

            # timezone-naive인 경우 UTC로 가정
            if dt.tzinfo is None:
                dt = dt.replace(tzinfo=timezone.utc)

            return dt.astimezone(timezone.utc)

        except Exception as e:
            logger.error(f"ISO datetime 파싱 실패: {iso_string} - {e}")
            raise ValueError(f"잘못된 ISO 날짜 형식입니다: {iso_string}")

    @staticmethod
    def from_timestamp_ms(timestamp_ms: float) -> datetime:
        """Unix timestamp (밀리초)를 UTC datetime 객체로 변환"""
        return datetime.fromtimestamp(timestamp_ms / 1000.0, tz=timezone.utc)

    @staticmethod
    def to_utc_datetime(value: Any) -> datetime:
        """
        Firestore 에 저장된 시점 값을 UTC datetime 으로 변환

        변환 규칙:
        - datetime (Firestore DatetimeWithNanoseconds 포함) -> UTC 정규화
        - protobuf Timestamp -> ToDatetime()
        - ISO 문자열 -> 파싱
        - 숫자 -> 밀리초 단위 Unix timestamp

        Raises:
            ValueError: 시점으로 해석할 수 없는 값인 경우
        """
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return value.replace(tzinfo=timezone.utc)
            return value.astimezone(timezone.utc)

        if isinstance(value, str):
            return DateTimeUtils.parse_iso_datetime(value)

        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return DateTimeUtils.from_timestamp_ms(value)

        if hasattr(value, 'ToDatetime'):
            return value.ToDatetime(tzinfo=timezone.utc)

        raise ValueError(f"datetime 으로 변환할 수 없는 값입니다: {value!r} ({type(value)})")

    @staticmethod
    def to_iso_string(dt: datetime) -> str:
        """datetime 객체를 'Z' 접미사가 붙은 ISO 포맷 문자열로 변환"""
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        else:
            dt = dt.astimezone(timezone.utc)
        return dt.isoformat().replace('+00:00', 'Z')

    @staticmethod
    def for_json(obj: Any) -> Any:
        """
        Firestore 에서 읽은 문서를 JSON 응답용으로 변환

        - datetime / Timestamp -> ISO 문자열
        - dict/list 내부 재귀적 변환
        """
        if isinstance(obj, datetime) or hasattr(obj, 'ToDatetime'):
            return DateTimeUtils.to_iso_string(DateTimeUtils.to_utc_datetime(obj))
        elif isinstance(obj, dict):
            return {k: DateTimeUtils.for_json(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [DateTimeUtils.for_json(item) for item in obj]
        return obj

