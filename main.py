# main.py
# Cloud Functions for Firebase 진입점. 각 함수는 요청을 Flask 앱의 해당 라우트로 넘깁니다.
import os
from typing import Optional
from flask import Flask
from firebase_functions import https_fn

from user_functions import create_app
from user_functions.core.config import Config

_app: Optional[Flask] = None


def _get_app() -> Flask:
    # 콜드 스타트 시 한 번만 생성
    global _app
    if _app is None:
        _app = create_app(os.getenv('FLASK_ENV', 'production'))
    return _app


def _dispatch(req: https_fn.Request, path: str) -> https_fn.Response:
    """함수 이름이 곧 경로이므로 PATH_INFO 를 라우트 경로로 바꿔 디스패치합니다."""
    app = _get_app()
    environ = dict(req.environ)
    environ['PATH_INFO'] = path
    with app.request_context(environ):
        return app.full_dispatch_request()


@https_fn.on_request(region=Config.FUNCTIONS_REGION, max_instances=Config.FUNCTIONS_MAX_INSTANCES)
def createUser(req: https_fn.Request) -> https_fn.Response:
    return _dispatch(req, '/createUser')


@https_fn.on_request(region=Config.FUNCTIONS_REGION, max_instances=Config.FUNCTIONS_MAX_INSTANCES)
def getUser(req: https_fn.Request) -> https_fn.Response:
    return _dispatch(req, '/getUser')


@https_fn.on_request(region=Config.FUNCTIONS_REGION, max_instances=Config.FUNCTIONS_MAX_INSTANCES)
def updateUser(req: https_fn.Request) -> https_fn.Response:
    return _dispatch(req, '/updateUser')


@https_fn.on_request(region=Config.FUNCTIONS_REGION, max_instances=Config.FUNCTIONS_MAX_INSTANCES)
def deleteUser(req: https_fn.Request) -> https_fn.Response:
    return _dispatch(req, '/deleteUser')
