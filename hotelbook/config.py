import os
from dotenv import load_dotenv

load_dotenv()

class Settings:
    APP_NAME: str = os.getenv("APP_NAME", "Hotel Booking API")
    # Core settings
    SECRET_KEY: str = os.getenv("SECRET_KEY", "dev-secret-key-change-me")
    DEBUG: bool = os.getenv("DEBUG", "false").lower() == "true"

    # Database: sqlite file by default, or a hosted Postgres URL
    DATABASE_URL: str = os.getenv("DATABASE_URL", "sqlite:///./hotel.db")

    # Bearer tokens
    TOKEN_MAX_AGE_SECONDS: int = int(os.getenv("TOKEN_MAX_AGE_SECONDS", "3600"))

    # Seed data
    SEED_ROOMS_FILE: str = os.getenv("SEED_ROOMS_FILE", "")
    DEFAULT_USER_EMAIL: str = os.getenv("DEFAULT_USER_EMAIL", "test@example.com")
    DEFAULT_USER_PASSWORD: str = os.getenv("DEFAULT_USER_PASSWORD", "password123")

    # CORS, comma separated
    CORS_ORIGINS: list[str] = [o.strip() for o in os.getenv("CORS_ORIGINS", "*").split(",") if o.strip()]

    # Rate Limiting
    RATE_LIMIT_ENABLED: bool = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    RATE_LIMIT_DEFAULT: str = os.getenv("RATE_LIMIT_DEFAULT", "100/minute")
    RATE_LIMIT_AUTH: str = os.getenv("RATE_LIMIT_AUTH", "10/minute")

settings = Settings()
