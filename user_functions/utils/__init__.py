# user_functions/utils/__init__.py
"""
유틸리티 모듈 패키지

시간 변환과 입력 검증처럼 프로젝트 전체에서 공통으로 사용되는 함수들을 포함합니다.
"""

from .datetime_utils import DateTimeUtils
from .validators import (
    MIN_DELETE_AGE,
    contains_korean_script,
    is_valid_email_shape,
    is_at_least_one_minute_old,
)

__all__ = [
    'DateTimeUtils',
    'MIN_DELETE_AGE',
    'contains_korean_script', 'is_valid_email_shape', 'is_at_least_one_minute_old',
]
