from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    app_name: str = "vehicle-registry-api"
    app_version: str = "0.1.0"
    log_level: str = "INFO"
    seed_file: str = ""  # JSON array of vehicles; empty = no file
    seed_demo_data: bool = True
    cors_origins: list[str] = ["http://localhost:8000"]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
