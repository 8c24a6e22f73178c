from pathlib import Path
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # In-memory by default; any SQLAlchemy URL works
    DATABASE_URL: str = "sqlite://"
    SQL_ECHO: bool = False
    LOG_LEVEL: str = "INFO"

    # "accumulate" re-applies standings on a resubmitted result, "reject" ignores it
    RESULT_RESUBMISSION_POLICY: Literal["accumulate", "reject"] = "accumulate"
    # Old behaviour: a result with a 0 score never reaches the standings
    LEGACY_SKIP_ZERO_SCORES: bool = False

    # Go up two levels from core/config.py → project root
    model_config = SettingsConfigDict(
        env_file=str(Path(__file__).resolve().parents[2] / ".env"),
        extra="ignore",
    )

settings = Settings()
