from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # API configuration
    api_version: str = "1.0"
    allowed_origins: List[str] = ["*"]
    log_level: str = "INFO"

    # Route synthesis
    # Fix the template draw for demos and reproducible runs
    random_seed: Optional[int] = None
    # Artificial delay around generation, only for exercising UI loading states
    simulated_latency_ms: int = 0

    # MongoDB configuration for saved routes
    mongo_uri: str = "mongodb://localhost:27017"
    mongo_db_name: str = "pacetrail"
    mongo_routes_collection: str = "saved_routes"
    mongo_timeout_ms: int = 2000

    # Session tokens
    auth_secret_key: str = "change-me"
    auth_algorithm: str = "HS256"
    auth_token_expire_days: int = 30

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


settings = Settings()
