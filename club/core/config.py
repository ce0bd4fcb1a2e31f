from pydantic_settings import BaseSettings, SettingsConfigDict
from typing import Dict, List

class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
    )

    APP_ENV: str = "local"
    APP_NAME: str = "club-topics"

    DATABASE_URL: str

    JWT_SECRET: str = "change_me_jwt"
    JWT_TTL_MINUTES: int = 240

    CORS_ORIGINS: str = "http://localhost:3000"

    # key:Display name pairs
    CATEGORIES: str = "share:Share,ask:Questions,job:Jobs,go:Go"
    DEFAULT_PAGE_SIZE: int = 20
    MAX_PAGE_SIZE: int = 100

    @property
    def cors_origins_list(self) -> List[str]:
        return [o.strip() for o in self.CORS_ORIGINS.split(",") if o.strip()]

    @property
    def categories_map(self) -> Dict[str, str]:
        result: Dict[str, str] = {}
        for item in self.CATEGORIES.split(","):
            key, _, name = item.partition(":")
            key = key.strip()
            if key:
                result[key] = name.strip() or key
        return result

settings = Settings()
