from typing import Literal

from pydantic import model_validator
from pydantic_settings import BaseSettings

DEFAULT_JWT_SECRET = "dev-only-jwt-secret-change-me-in-production"


class Settings(BaseSettings):
    app_env: Literal["dev", "test", "prod"] = "dev"
    jwt_secret: str = DEFAULT_JWT_SECRET
    jwt_algorithm: str = "HS256"
    token_ttl_seconds: int = 60 * 60  # 1 hour
    session_cookie_name: str = "session"
    session_cookie_secure: bool = False
    login_rejected_status: int = 208  # 401 is the conventional choice
    log_level: str = "INFO"
    cors_origins: list[str] = ["http://localhost:8000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}

    @model_validator(mode="after")
    def check_jwt_secret(self) -> "Settings":
        if len(self.jwt_secret.encode()) < 32:
            raise ValueError("JWT_SECRET must be at least 32 bytes for HS256")
        if self.app_env == "prod" and self.jwt_secret == DEFAULT_JWT_SECRET:
            raise ValueError("JWT_SECRET must be set in production")
        return self


settings = Settings()
