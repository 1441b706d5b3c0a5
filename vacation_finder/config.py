# vacation_finder/config.py
from typing import Literal
from pydantic_settings import BaseSettings, SettingsConfigDict

class Settings(BaseSettings):
    # App
    APP_ENV: Literal["dev", "prod", "staging"] = "dev"

    # Search
    DEFAULT_BUDGET: float = 800.0
    LABEL_LOCALE: Literal["es", "en"] = "es"
    FLIGHTS_PATH: str = "data/flights.json"

    # Export metadata
    TRAVELLER_LABEL: str = "Nelsona (65)"
    ASSISTANT_LABEL: str = "Valentina (16)"

    # read .env and ignore any extra keys
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

settings = Settings()
