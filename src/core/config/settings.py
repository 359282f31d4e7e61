from pydantic_settings import BaseSettings
from typing import Optional


class AppSettings(BaseSettings):
    APP_NAME: str = "GitHub Repo Sync"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    HOST: str = "0.0.0.0"
    PORT: int = 3000

    # ===== MongoDB =====
    DATABASE_URL: str = "mongodb://localhost:27017"
    DATABASE_NAME: str = "github_sync"
    REPOS_COLLECTION: str = "repositories"

    # ===== GitHub Webhook =====
    # 비어 있으면 모든 webhook 요청을 거부 (fail closed)
    WEBHOOK_SECRET: Optional[str] = None

    # created 이벤트를 name 기준 upsert로 처리할지 여부
    UPSERT_ON_CREATE: bool = False

    class Config:
        # 로컬 개발은 .env, 배포는 docker-compose env_file
        env_file = ".env"
        extra = "ignore"


settings = AppSettings()
