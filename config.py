# config.py
import os
from dotenv import load_dotenv

load_dotenv()


def _env_flag(name, default):
    return os.getenv(name, default).lower() in ("1", "true", "yes")


class Config:
    """Settings for the landing page, the RQ worker and the mailer."""

    # Flask
    SECRET_KEY = os.getenv("SECRET_KEY", "dev_key_not_for_production")
    TESTING = False

    # Database
    SQLALCHEMY_DATABASE_URI = os.getenv("DATABASE_URL", "sqlite:///requests.db")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Redis / RQ
    REDIS_URL = os.getenv("REDIS_URL", "redis://localhost:6379")
    RQ_QUEUE_NAME = os.getenv("RQ_QUEUE_NAME", "default")

    # Delivery job
    DELIVERY_ENABLED = _env_flag("DELIVERY_ENABLED", "true")
    DELIVERY_MAX_RETRIES = int(os.getenv("DELIVERY_MAX_RETRIES", "3"))
    DELIVERY_RETRY_INTERVALS = [10, 30, 60]  # seconds

    # SMTP
    SMTP_HOST = os.getenv("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT = int(os.getenv("SMTP_PORT", "465"))
    EMAIL_ADDRESS = os.getenv("EMAIL_ADDRESS")
    EMAIL_PASSWORD = os.getenv("EMAIL_PASSWORD")

    # Ebook
    EBOOK_TITLE = os.getenv("EBOOK_TITLE", "Design Systems for Business Growth")
    EBOOK_DOWNLOAD_URL = os.getenv("EBOOK_DOWNLOAD_URL")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = "sqlite://"
    DELIVERY_ENABLED = False
    EMAIL_ADDRESS = "ebooks@example.com"
    EBOOK_DOWNLOAD_URL = "https://example.com/ebook.pdf"
