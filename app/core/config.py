import os
from pydantic_settings import BaseSettings
from dotenv import load_dotenv
from typing import List, Literal
from app.core.constants import (
    DOCUMENTATION_HOST_MARKERS,
    TOP_TIER_DOMAINS,
    SECOND_TIER_DOMAINS,
)

load_dotenv()

class Settings(BaseSettings):
    API_V1_STR: str = "/api/v1"
    PROJECT_NAME: str = "AI Readiness API"
    APP_ENV: Literal["development", "production"] = os.getenv("APP_ENV", "development")
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

    # CORS
    CORS_ORIGINS: list = [
        "http://localhost:3000",
    ]

    FRONTEND_URL: str = os.getenv("FRONTEND_URL", "http://localhost:3000")

    # Storage
    STORAGE_BACKEND: Literal["memory", "firestore"] = os.getenv("STORAGE_BACKEND", "memory")
    FIREBASE_SERVICE_ACCOUNT_KEY_PATH: str = os.getenv("FIREBASE_SERVICE_ACCOUNT_KEY_PATH", "")
    FIREBASE_SERVICE_ACCOUNT_JSON: str = os.getenv("FIREBASE_SERVICE_ACCOUNT_JSON", "")

    # Scraping and probing
    SCRAPE_TIMEOUT_SECONDS: float = float(os.getenv("SCRAPE_TIMEOUT_SECONDS", "15"))
    PROBE_TIMEOUT_SECONDS: float = float(os.getenv("PROBE_TIMEOUT_SECONDS", "3"))

    # Replace a crashing analyzer with a failed placeholder instead of aborting the report
    ISOLATE_ANALYZER_FAULTS: bool = os.getenv("ISOLATE_ANALYZER_FAULTS", "true").lower() in ("1", "true", "yes")

    # Domain reputation lists
    DOCUMENTATION_HOST_MARKERS: List[str] = list(DOCUMENTATION_HOST_MARKERS)
    TOP_TIER_DOMAINS: List[str] = list(TOP_TIER_DOMAINS)
    SECOND_TIER_DOMAINS: List[str] = list(SECOND_TIER_DOMAINS)

    class Config:
        case_sensitive = True


settings = Settings()
