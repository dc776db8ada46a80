# user_functions/__init__.py

# =====================================================================================
# 1. 환경 변수 로드 (가장 먼저 실행)
# =====================================================================================
from dotenv import load_dotenv
load_dotenv()

# =====================================================================================
# 2. 모듈 임포트 (Module Imports)
# =====================================================================================
import os
import logging
from typing import Optional
from flask import Flask, jsonify
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException, MethodNotAllowed
import firebase_admin
from firebase_admin import credentials, firestore

# - 설정
from user_functions.core.config import config_by_name
from user_functions.core.exceptions import ApiError, first_error_message

# - API 블루프린트
from user_functions.api.users.routes import users_bp

# - 서비스 모듈
from user_functions.services.firestore_service import UserStore
from user_functions.api.users.services import UserService


def _init_firebase(app: Flask) -> None:
    """firebase-admin 기본 앱을 한 번만 초기화합니다."""
    if firebase_admin._apps:
        return
    options = {}
    if app.config.get('FIREBASE_PROJECT_ID'):
        options['projectId'] = app.config['FIREBASE_PROJECT_ID']

    cred_path = app.config.get('FIREBASE_CREDENTIALS_PATH')
    if cred_path:
        if not os.path.exists(cred_path):
            raise FileNotFoundError(f"Firebase 인증 파일을 찾을 수 없습니다: {cred_path}")
        firebase_admin.initialize_app(credentials.Certificate(cred_path), options or None)
    else:
        # Cloud Functions 런타임에서는 Application Default Credentials 사용
        firebase_admin.initialize_app(options=options or None)


def create_app(config_name: Optional[str] = None, store: Optional[UserStore] = None) -> Flask:
    """
    Flask 애플리케이션 팩토리 함수.

    :param config_name: 'development' | 'testing' | 'production' (기본값: FLASK_ENV)
    :param store: 주입할 UserStore. 없으면 firebase-admin 으로 Firestore 에 연결합니다.
    """
    # =====================================================================================
    # 3. Flask 앱 생성 및 기본 설정
    # =====================================================================================
    config_name = config_name or os.getenv('FLASK_ENV', 'development')

    app = Flask(__name__)
    app.config.from_object(config_by_name[config_name])
    app.json.ensure_ascii = False

    # =====================================================================================
    # 4. 서비스 인스턴스 생성 및 'app.services'에 저장 (의존성 주입)
    # =====================================================================================
    if store is None:
        _init_firebase(app)
        store = UserStore.from_client(firestore.client(), app.config['USERS_COLLECTION'])
        logging.info(f"Firestore user store initialized (collection: {app.config['USERS_COLLECTION']})")

    app.services = {}
    app.services['users'] = UserService(store=store)

    # =====================================================================================
    # 5. 블루프린트 등록
    # =====================================================================================
    app.register_blueprint(users_bp)

    # =====================================================================================
    # 6. 전역 에러 핸들러 설정
    # =====================================================================================
    @app.errorhandler(ApiError)
    def handle_api_error(err: ApiError):
        return jsonify(err.to_dict()), err.status_code

    @app.errorhandler(ValidationError)
    def handle_marshmallow_validation(err):
        response = {"error": first_error_message(err.messages), "details": err.messages}
        return jsonify(response), 400

    @app.errorhandler(Exception)
    def handle_generic_exception(err):
        if isinstance(err, MethodNotAllowed):
            return jsonify({"error": "Method Not Allowed"}), 405
        if isinstance(err, HTTPException):
            return jsonify({"error": err.name}), err.code
        # 다른 핸들러에서 처리되지 않은 모든 예외를 여기서 처리
        logging.error(f"An unhandled exception occurred: {err}", exc_info=True)
        return jsonify({"error": str(err)}), 500

    # =====================================================================================
    # 7. 로깅 및 앱 반환
    # =====================================================================================
    if not app.debug:
        logging.basicConfig(level=logging.INFO, format='%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]')

    logging.info(f"Flask app created for '{config_name}' environment.")

    return app
