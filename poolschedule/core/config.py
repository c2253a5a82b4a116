from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"

    STORE_PROVIDER: str = "memory"  # "memory" | "json"
    DATA_FILE: str = "./data/schedule.json"
    SEED_DEFAULT_RESOURCES: bool = True

    TRAVEL_BUFFER_MINUTES: int = 30
    DEFAULT_SLOT_DURATION_MINUTES: int = 60
    DEFAULT_WINDOW_START: str = "08:00"
    DEFAULT_WINDOW_END: str = "20:00"


settings = Settings()
