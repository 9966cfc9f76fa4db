from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_file_encoding": "utf-8", "env_prefix": "DEALMETRICS_"}

    # App
    api_title: str = "Deal Metrics"
    debug: bool = False
    log_level: str = "INFO"
    cors_origins: list[str] = ["*"]

    # Presentation rounding (the engine itself never rounds)
    money_places: int = 2
    ratio_places: int = 4

    # Flat cash flow horizon for return projections
    projection_years: int = 5


settings = Settings()
