import os
from datetime import timedelta

from dotenv import load_dotenv


load_dotenv()


def _env_int(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    return int(value)


class Config:
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///forum.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY", "dev-secret-change-me-in-production")
    JWT_ACCESS_TOKEN_EXPIRES = timedelta(seconds=_env_int("ACCESS_TOKEN_AGE", 3000))
    JWT_REFRESH_TOKEN_EXPIRES = timedelta(
        seconds=_env_int("REFRESH_TOKEN_AGE", 30 * 24 * 60 * 60)
    )

    HOST = os.getenv("HOST", "localhost")
    PORT = _env_int("PORT", 5000)

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").strip().upper()
