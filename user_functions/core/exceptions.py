# user_functions/core/exceptions.py
"""
API 요청 처리 중 발생하는 도메인 예외 클래스 모음.

각 예외는 HTTP 상태 코드와 응답 본문의 키('error' 또는 'message')를 함께 가지고 있으며,
app/__init__.py 의 전역 에러 핸들러가 이를 JSON 응답으로 변환합니다.
"""
from typing import Any, Dict


class ApiError(Exception):
    """모든 API 예외의 기반 클래스."""
    status_code = 500
    body_key = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self) -> Dict[str, Any]:
        return {self.body_key: self.message}


class MethodNotAllowedError(ApiError):
    status_code = 405

    def __init__(self, message: str = "Method Not Allowed"):
        super().__init__(message)


class RequestValidationError(ApiError):
    """필수 파라미터 누락 등 잘못된 요청 (400)."""
    status_code = 400


class UserNotFoundError(ApiError):
    status_code = 404
    body_key = "message"

    def __init__(self, message: str = "User not found"):
        super().__init__(message)


class DeletionForbiddenError(ApiError):
    """생성 후 1분이 지나지 않은 사용자 삭제 시도 (403)."""
    status_code = 403

    def __init__(self, message: str = "User cannot be deleted within 1 minute of creation"):
        super().__init__(message)


class StoreError(ApiError):
    """Firestore 호출 실패. 원본 오류 메시지를 그대로 전달합니다."""
    status_code = 500


def first_error_message(messages: Any) -> str:
    """marshmallow 의 중첩된 에러 메시지 구조에서 첫 번째 메시지를 꺼냅니다."""
    if isinstance(messages, dict):
        for value in messages.values():
            return first_error_message(value)
        return ""
    if isinstance(messages, (list, tuple)):
        return first_error_message(messages[0]) if messages else ""
    return str(messages)
