# user_functions/services/firestore_service.py
import logging
from typing import Any, Dict, Optional
from firebase_admin import firestore

from user_functions.core.exceptions import StoreError


class UserStore:
    """
    Firestore 'users' 컬렉션에 대한 얇은 래퍼.
    컬렉션 참조는 생성 시 주입받으며, 모든 Firestore 오류는 StoreError 로 감싸서 전달합니다.
    """
    def __init__(self, users_ref):
        self.users_ref = users_ref

    @classmethod
    def from_client(cls, db, collection_name: str = 'users') -> "UserStore":
        return cls(db.collection(collection_name))

    def add_user(self, name: str, email: str) -> str:
        """
        새 사용자 문서를 추가하고 문서 ID를 반환합니다.
        createdAt 은 Firestore 서버 타임스탬프로 기록됩니다.
        """
        try:
            _, doc_ref = self.users_ref.add({
                'name': name,
                'email': email,
                'createdAt': firestore.SERVER_TIMESTAMP,
            })
            logging.info(f"Firestore 사용자 생성 성공 (Doc ID: {doc_ref.id})")
            return doc_ref.id
        except Exception as e:
            logging.error(f"Firestore 사용자 생성 실패 (name: {name}): {e}", exc_info=True)
            raise StoreError(str(e)) from e

    def find_first_by_name(self, name: str) -> Optional[Any]:
        """name 이 일치하는 첫 번째 문서의 스냅샷을 반환합니다. 없으면 None."""
        try:
            query = self.users_ref.where('name', '==', name).limit(1).stream()
            return next(query, None)
        except Exception as e:
            logging.error(f"Firestore 사용자 조회 실패 (name: {name}): {e}", exc_info=True)
            raise StoreError(str(e)) from e

    def update_user(self, snapshot, fields: Dict[str, Any]) -> None:
        """주어진 필드만 기존 문서에 병합합니다."""
        try:
            snapshot.reference.update(fields)
            logging.info(f"Firestore 사용자 수정 성공 (Doc ID: {snapshot.id}, fields: {sorted(fields)})")
        except Exception as e:
            logging.error(f"Firestore 사용자 수정 실패 (Doc ID: {snapshot.id}): {e}", exc_info=True)
            raise StoreError(str(e)) from e

    def delete_user(self, snapshot) -> None:
        try:
            snapshot.reference.delete()
            logging.info(f"Firestore 사용자 삭제 성공 (Doc ID: {snapshot.id})")
        except Exception as e:
            logging.error(f"Firestore 사용자 삭제 실패 (Doc ID: {snapshot.id}): {e}", exc_info=True)
            raise StoreError(str(e)) from e
