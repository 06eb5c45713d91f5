from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    MAX_AMORTIZATION_MONTHS: int = 1200
    DEFAULT_CURRENCY: str = "USD"
    CHART_ALL_MAX_MONTHS: int = 60
    DEFAULT_PAYMENT_MULTIPLIER: float = 1.2
    CORS_ORIGINS: list[str] = ["http://localhost:8081"]
    LOG_LEVEL: str = "INFO"

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
