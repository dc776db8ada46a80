# user_functions/api/users/schemas.py
from marshmallow import Schema, fields, validate, pre_load, ValidationError, INCLUDE, EXCLUDE

from user_functions.utils.validators import contains_korean_script, is_valid_email_shape

# 업데이트로 변경할 수 없는 필드
IMMUTABLE_FIELDS = ('id', 'createdAt')


def _validate_name_script(value: str) -> None:
    if contains_korean_script(value):
        raise ValidationError("Name cannot contain Korean characters")


def _validate_email(value: str) -> None:
    if not is_valid_email_shape(value):
        raise ValidationError("Invalid email format")


def _validate_update_email(value: str) -> None:
    if not is_valid_email_shape(value):
        raise ValidationError("Invalid email format: missing @")


class UserCreateSchema(Schema):
    """
    POST /createUser
    사용자 생성 요청 본문의 유효성을 검사하는 스키마.
    누락 검사 -> 한글 이름 검사 -> 이메일 형식 검사 순으로 오류가 보고됩니다.
    """
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(
        required=True,
        validate=_validate_name_script,
        error_messages={"invalid": "Name must be a string"},
    )
    email = fields.Str(
        required=True,
        validate=_validate_email,
        error_messages={"invalid": "Invalid email format"},
    )

    @pre_load
    def require_name_and_email(self, data, **kwargs):
        if not isinstance(data, dict) or not data.get('name') or not data.get('email'):
            raise ValidationError("Missing name or email")
        return data


class UserUpdateSchema(Schema):
    """
    PUT /updateUser?name=...
    부분 업데이트 요청 본문. 알 수 없는 필드는 그대로 병합되며,
    email/name 이 포함된 경우에만 형식을 검사합니다.
    """
    class Meta:
        unknown = INCLUDE

    name = fields.Str(
        validate=[validate.Length(min=1, error="Name cannot be empty"), _validate_name_script],
        error_messages={"invalid": "Name must be a string", "null": "Name cannot be empty"},
    )
    email = fields.Str(
        validate=_validate_update_email,
        error_messages={
            "invalid": "Invalid email format: missing @",
            "null": "Invalid email format: missing @",
        },
    )

    @pre_load
    def require_fields(self, data, **kwargs):
        if not isinstance(data, dict) or not data:
            raise ValidationError("Missing user name or update data")
        for field_name in IMMUTABLE_FIELDS:
            if field_name in data:
                raise ValidationError(f"Field cannot be updated: {field_name}", field_name)
        return data
