# user_functions/models/user.py
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from user_functions.utils.datetime_utils import DateTimeUtils


@dataclass
class User:
    """
    Firestore 'users' 컬렉션의 문서 구조를 정의하는 데이터클래스.
    스키마가 고정되지 않은 문서이므로 저장된 필드는 null 값까지 포함해 fields 에 그대로 보관합니다.
    """
    user_id: str
    fields: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_snapshot(cls, snapshot) -> "User":
        """Firestore DocumentSnapshot 으로부터 User 인스턴스를 생성합니다."""
        return cls(user_id=snapshot.id, fields=dict(snapshot.to_dict() or {}))

    @property
    def name(self) -> Optional[str]:
        return self.fields.get('name')

    @property
    def email(self) -> Optional[str]:
        return self.fields.get('email')

    @property
    def created_at(self) -> Any:
        # Firestore 서버 타임스탬프 (저장된 원본 값)
        return self.fields.get('createdAt')

    def to_dict(self) -> Dict[str, Any]:
        """저장된 필드 그대로의 딕셔너리 (id 제외)."""
        return dict(self.fields)

    def to_response(self) -> Dict[str, Any]:
        """GET 응답 본문: {id, ...저장된 필드} (datetime 은 ISO 문자열)."""
        return {'id': self.user_id, **DateTimeUtils.for_json(self.to_dict())}
