import logging
from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    project_name: str = "EduLearn"
    database_url: str = "sqlite:///./edulearn.db"
    secret_key: str = "change-me"
    algorithm: str = "HS256"
    admin_token_expire_days: int = 7
    user_token_expire_days: int = 30
    files_dir: str = "uploads"
    files_base_url: str = "/uploads"
    max_note_size: int = 50 * 1024 * 1024
    cascade_subject_delete: bool = True
    log_level: str = "INFO"

    default_admin_email: str = "admin@edulearn.com"
    default_admin_username: str = "admin"
    default_admin_password: str = "admin123"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def configure_logging() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
