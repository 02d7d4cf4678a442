from pathlib import Path
from typing import List, Literal

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    DATABASE_URL: str

    JWT_SECRET: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # "captain": only the team captain may enrol the team in a league
    # "member": any rostered player may do it
    LEAGUE_JOIN_POLICY: Literal["captain", "member"] = "captain"

    DEFAULT_TEAM_LOGO: str = "https://images.pexels.com/photos/274506/pexels-photo-274506.jpeg"
    DEFAULT_MAX_PLAYERS: int = 22

    LOG_LEVEL: str = "INFO"

    # Comma-separated list, "*" allows any origin
    CORS_ORIGINS: str = "*"

    # Go up two levels from core/config.py → project root
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        extra="ignore",
    )

    @property
    def cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",") if origin.strip()]


settings = Settings()
