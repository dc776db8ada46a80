# user_functions/api/users/services.py

import logging
from datetime import datetime
from typing import Dict, Any, Optional

from user_functions.core.exceptions import UserNotFoundError, DeletionForbiddenError
from user_functions.models.user import User
from user_functions.services.firestore_service import UserStore
from user_functions.utils.validators import is_at_least_one_minute_old


class UserService:
    """
    사용자 CRUD 비즈니스 로직을 담당하는 서비스 클래스.
    - 입력 검증은 routes 의 스키마에서 끝난 상태로 호출됩니다.
    - 조회는 항상 name 으로 첫 번째 일치 문서 하나만 사용합니다.
    """
    def __init__(self, store: UserStore):
        self.store = store

    def _find_user_snapshot(self, name: str):
        snapshot = self.store.find_first_by_name(name)
        if snapshot is None:
            raise UserNotFoundError()
        return snapshot

    def create_user(self, name: str, email: str) -> str:
        """새 사용자를 생성하고 문서 ID를 반환합니다."""
        return self.store.add_user(name, email)

    def get_user(self, name: str) -> Dict[str, Any]:
        """name 으로 사용자를 조회하여 {id, ...필드} 형태로 반환합니다."""
        snapshot = self._find_user_snapshot(name)
        return User.from_snapshot(snapshot).to_response()

    def update_user(self, name: str, update_fields: Dict[str, Any]) -> None:
        """전달된 필드만 병합하는 부분 업데이트."""
        snapshot = self._find_user_snapshot(name)
        self.store.update_user(snapshot, update_fields)

    def delete_user(self, name: str, now: Optional[datetime] = None) -> None:
        """
        사용자를 삭제합니다. createdAt 이 없거나 생성 후 1분이 지나지 않았으면 거부합니다.
        """
        snapshot = self._find_user_snapshot(name)
        user = User.from_snapshot(snapshot)

        if not user.created_at:
            raise DeletionForbiddenError()
        try:
            old_enough = is_at_least_one_minute_old(user.created_at, now)
        except ValueError as e:
            logging.warning(f"createdAt 값을 해석할 수 없어 삭제를 거부합니다 (Doc ID: {user.user_id}): {e}")
            raise DeletionForbiddenError() from e
        if not old_enough:
            raise DeletionForbiddenError()

        self.store.delete_user(snapshot)
