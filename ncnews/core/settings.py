import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, List

from dotenv import load_dotenv
from pydantic import Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

try:
    '''
    os.getenv 보다 먼저 .env를 로드한다.
    '''
    load_dotenv(".env", override=False, encoding="utf-8")
except Exception as e:
    # 설정 로딩은 pydantic-settings가 처리하므로 무시 가능
    print(f"load_dotenv error: {e}")

APP_DIR = Path(__file__).resolve().parent.parent
ROOT_DIR = APP_DIR.parent
ENDPOINTS_FILE = APP_DIR / "endpoints.json"


class Settings(BaseSettings):
    """Values left empty here are filled from the environment or .env."""
    APP_ENV: str = "development"
    APP_NAME: str = "NC News"
    APP_VERSION: str = "1.0.0"
    APP_DESCRIPTION: str = "News API serving topics, articles, comments and users."

    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    DB_TYPE: str = "mysql"
    DB_DRIVER: str = "aiomysql"
    DB_NAME: Optional[str] = None
    DB_HOST: Optional[str] = None
    DB_PORT: Optional[str] = None
    DB_USER: Optional[str] = None
    DB_PASSWORD: Optional[str] = None
    # 전체 URL을 직접 지정하면 위의 DB_* 조합보다 우선한다.
    DATABASE_URL: Optional[str] = None

    ORIGINS: List[str] = Field(default_factory=list)

    DEFAULT_ARTICLE_IMG_URL: str = "https://images.pexels.com/photos/97050/pexels-photo-97050.jpeg?w=700&h=700"
    DEFAULT_PAGE_LIMIT: int = 10

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @property
    def database_url(self) -> str:
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (f"{self.DB_TYPE}+{self.DB_DRIVER}://{self.DB_USER}:{self.DB_PASSWORD}"
                f"@{self.DB_HOST}:{self.DB_PORT}/{self.DB_NAME}?charset=utf8mb4")


class DevSettings(Settings):
    DEBUG: bool = Field(True, validation_alias="DEBUG_TRUE")

    DB_NAME: Optional[str] = Field("nc_news", validation_alias="DEV_DB_NAME")
    DB_HOST: Optional[str] = Field("localhost", validation_alias="DEV_DB_HOST")
    DB_PORT: Optional[str] = Field("3306", validation_alias="DEV_DB_PORT")
    DB_USER: Optional[str] = Field("root", validation_alias="DEV_DB_USER")
    DB_PASSWORD: Optional[str] = Field("", validation_alias="DEV_DB_PASSWORD")


class TestSettings(Settings):
    DATABASE_URL: Optional[str] = Field("sqlite+aiosqlite://", validation_alias="TEST_DATABASE_URL")
    LOG_LEVEL: str = "WARNING"


class ProdSettings(Settings):
    APP_NAME: str = Field("NC News", validation_alias="PROD_APP_NAME")

    DB_NAME: Optional[str] = Field(None, validation_alias="PROD_DB_NAME")
    DB_HOST: Optional[str] = Field(None, validation_alias="PROD_DB_HOST")
    DB_PORT: Optional[str] = Field(None, validation_alias="PROD_DB_PORT")
    DB_USER: Optional[str] = Field(None, validation_alias="PROD_DB_USER")
    DB_PASSWORD: Optional[str] = Field(None, validation_alias="PROD_DB_PASSWORD")

    # 운영에서는 DB 접속 정보 필수
    @model_validator(mode="after")
    def ensure_database(self):
        if self.DATABASE_URL:
            return self
        if not all([self.DB_NAME, self.DB_HOST, self.DB_PORT, self.DB_USER]):
            raise ValueError("In production, DATABASE_URL or PROD_DB_* settings must be set.")
        return self


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    app_env = os.getenv("APP_ENV", "development").strip().lower()
    if app_env == "production":
        return ProdSettings()
    if app_env == "test":
        return TestSettings()
    return DevSettings()

CONFIG = get_settings()
