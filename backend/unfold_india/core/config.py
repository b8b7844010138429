from functools import lru_cache
from typing import Literal

from pydantic_settings import BaseSettings
from pydantic import Field


class Settings(BaseSettings):
    environment: Literal["development", "staging", "production"] = Field(
        default="development"
    )
    log_level: str = Field(default="INFO")
    database_url: str = Field(default="sqlite:///./unfold_india.db")
    jwt_secret_key: str = Field(...)
    jwt_algorithm: str = Field(default="HS256")
    access_token_expire_minutes: int = Field(default=60)
    refresh_token_expire_minutes: int = Field(default=60 * 24 * 7)

    chat_responder: Literal["canned"] = Field(default="canned")
    chat_page_size: int = Field(default=10, ge=1, le=100)
    chat_reply_delay_seconds: float = Field(default=2.0, ge=0)
    route_search_delay_seconds: float = Field(default=2.0, ge=0)
    translation_delay_seconds: float = Field(default=1.5, ge=0)

    storage_backend: Literal["local", "s3"] = Field(default="local")
    storage_root: str = Field(default="./media")
    avatar_bucket: str = Field(default="avatars")
    public_base_url: str = Field(default="http://localhost:8000")
    s3_region: str = Field(default="ap-south-1")
    s3_endpoint_url: str | None = Field(default=None)

    cors_origins: list[str] = Field(
        default=[
            "http://localhost:5173",
            "http://127.0.0.1:5173",
            "http://localhost:8080",
            "http://127.0.0.1:8080",
        ]
    )

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False


@lru_cache
def get_settings() -> Settings:
    return Settings()
