from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    CATALOG_SOURCE: str = "sample"  # "sample" | "json"
    CATALOG_PATH: str = "./data/services.json"

    DEFAULT_SORT_MODE: str = "rating"
    SESSION_LIMIT: int = 1000

    ENV: str = "dev"
    LOG_LEVEL: str = "INFO"


settings = Settings()
