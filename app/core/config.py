from pathlib import Path
from pydantic_settings import BaseSettings
import os
from dotenv import load_dotenv

env = os.getenv("ENV", "dev")
if env == "dev":
    dotenv_path = ".env"
else:
    dotenv_path = f".env.{env}"
load_dotenv(dotenv_path=dotenv_path, override=True)

DEFAULT_CHAINS_CONFIG_DIR = str(Path(__file__).resolve().parents[1] / "data" / "chains")


def _as_bool(value: str) -> bool:
    return value.strip().lower() in ("1", "true", "yes", "on")


class Settings(BaseSettings):
    PROJECT_NAME: str = "CCIP Chains API"
    ENV: str = env

    DEFAULT_ENVIRONMENT: str = os.getenv("DEFAULT_ENVIRONMENT", "mainnet")
    CHAINS_CONFIG_DIR: str = os.getenv("CHAINS_CONFIG_DIR", DEFAULT_CHAINS_CONFIG_DIR)

    # sent with every 200 response
    CACHE_CONTROL: str = os.getenv(
        "CACHE_CONTROL", "public, s-maxage=300, stale-while-revalidate=600"
    )
    EXPOSE_ERROR_DETAILS: bool = _as_bool(os.getenv("EXPOSE_ERROR_DETAILS", "true"))

    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")
    LOG_LEVEL_APP: str = os.getenv("LOG_LEVEL_APP", "INFO")


settings = Settings()
