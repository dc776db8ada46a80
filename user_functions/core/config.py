# user_functions/core/config.py

import os


class Config:
    """모든 환경 설정의 기반이 되는 공통 설정 클래스입니다."""
    # 서비스 계정 키 파일 경로. 비어 있으면 Application Default Credentials 를 사용합니다 (Cloud Functions 환경).
    FIREBASE_CREDENTIALS_PATH = os.getenv('FIREBASE_CREDENTIALS_PATH')
    FIREBASE_PROJECT_ID = os.getenv('FIREBASE_PROJECT_ID')
    USERS_COLLECTION = os.getenv('USERS_COLLECTION', 'users')

    # Cloud Functions 배포 옵션 (main.py 의 데코레이터에서 사용)
    FUNCTIONS_REGION = os.getenv('FUNCTIONS_REGION', 'us-central1')
    FUNCTIONS_MAX_INSTANCES = int(os.getenv('FUNCTIONS_MAX_INSTANCES', 10))


class DevelopmentConfig(Config):
    """개발 환경을 위한 설정 클래스입니다."""
    DEBUG = True
    FIREBASE_CREDENTIALS_PATH = os.getenv('DEV_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)


class TestingConfig(Config):
    """테스트 환경을 위한 설정 클래스입니다."""
    TESTING = True
    DEBUG = False
    FIREBASE_CREDENTIALS_PATH = os.getenv('TEST_FIREBASE_CREDENTIALS_PATH', Config.FIREBASE_CREDENTIALS_PATH)


class ProductionConfig(Config):
    """Cloud Functions 배포 환경."""
    DEBUG = False


# create_app 에서 FLASK_ENV 값에 따라 설정 클래스를 선택하는 데 사용됩니다.
config_by_name = dict(
    development=DevelopmentConfig,
    testing=TestingConfig,
    production=ProductionConfig
)
