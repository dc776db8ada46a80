# user_functions/api/users/routes.py
from flask import Blueprint, request, jsonify, current_app

from user_functions.core.exceptions import MethodNotAllowedError, RequestValidationError
from user_functions.api.users.schemas import UserCreateSchema, UserUpdateSchema

users_bp = Blueprint('users_bp', __name__)

# 모든 메서드를 받아 각 핸들러에서 직접 검사합니다 (잘못된 메서드는 JSON 405).
ACCEPTED_METHODS = ['GET', 'POST', 'PUT', 'PATCH', 'DELETE', 'OPTIONS']


def _require_method(expected: str) -> None:
    if request.method != expected:
        raise MethodNotAllowedError()


def _require_name_param(message: str) -> str:
    name = request.args.get('name')
    if not name:
        raise RequestValidationError(message)
    return name


@users_bp.route('/createUser', methods=ACCEPTED_METHODS, provide_automatic_options=False)
def create_user():
    """
    새 사용자를 생성합니다.
    - 성공 시 생성된 문서 ID와 함께 201 Created 를 반환합니다.
    """
    _require_method('POST')
    user_service = current_app.services['users']
    data = UserCreateSchema().load(request.get_json(silent=True))
    user_id = user_service.create_user(data['name'], data['email'])
    return jsonify({"id": user_id, "message": "User created"}), 201


@users_bp.route('/getUser', methods=ACCEPTED_METHODS, provide_automatic_options=False)
def get_user():
    """name 쿼리 파라미터로 사용자를 조회합니다."""
    _require_method('GET')
    user_service = current_app.services['users']
    name = _require_name_param("Missing user name in query")
    return jsonify(user_service.get_user(name)), 200


@users_bp.route('/updateUser', methods=ACCEPTED_METHODS, provide_automatic_options=False)
def update_user():
    """name 으로 찾은 사용자에 요청 본문의 필드만 병합합니다."""
    _require_method('PUT')
    user_service = current_app.services['users']
    name = _require_name_param("Missing user name or update data")
    update_fields = UserUpdateSchema().load(request.get_json(silent=True))
    user_service.update_user(name, update_fields)
    return jsonify({"message": "User updated successfully"}), 200


@users_bp.route('/deleteUser', methods=ACCEPTED_METHODS, provide_automatic_options=False)
def delete_user():
    """
    사용자를 삭제합니다. (생성 후 1분이 지난 경우만)
    """
    _require_method('DELETE')
    user_service = current_app.services['users']
    name = _require_name_param("Missing user name in query")
    user_service.delete_user(name)
    return jsonify({"message": "User deleted successfully"}), 200
