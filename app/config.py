"""애플리케이션 설정"""
from pydantic_settings import BaseSettings
from typing import List, Optional


class Settings(BaseSettings):
    """환경변수 기반 설정"""

    # API Keys (없으면 요청 시점에 ConfigurationError)
    stability_api_key: Optional[str] = None

    # Application
    app_name: str = "Room Remodel API"
    app_version: str = "1.0.0"
    debug: bool = False

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # CORS
    cors_origins: List[str] = ["http://localhost:3000", "http://localhost:8000"]

    # Stability AI
    stability_api_host: str = "https://api.stability.ai"
    stability_engine_id: str = "stable-diffusion-xl-1024-v1-0"
    stability_timeout_seconds: float = 90.0  # 생성 자체가 30~60초 걸림

    # Logging
    log_level: str = "INFO"
    log_dir: str = "logs"

    class Config:
        env_file = ".env"
        case_sensitive = False


# 전역 설정 인스턴스
settings = Settings()
