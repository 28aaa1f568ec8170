"""Application configuration settings"""

import os
from dotenv import load_dotenv

load_dotenv()

_TRUTHY = {"1", "true", "yes", "on"}


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in _TRUTHY


class Config:
    TESTING = _env_bool("TESTING", "false")
    DEBUG = _env_bool("DEBUG", "false")

    # Logging
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_PATH = os.getenv("LOG_PATH", "")
    LOG_FORMAT = os.getenv(
        "LOG_FORMAT",
        "%(asctime)s %(levelname)s [%(correlation_id)s] %(name)s: %(message)s",
    )

    # OpenAI
    OPENAI_KEY = os.getenv("OPENAI_API_KEY", "")
    OPENAI_MODEL = os.getenv("OPENAI_MODEL", "gpt-4o")
    OPENAI_TEMPERATURE = float(os.getenv("OPENAI_TEMPERATURE", "0.7"))
    CHAT_MAX_TOKENS = int(os.getenv("CHAT_MAX_TOKENS", "500"))
    EXTRACTION_MAX_TOKENS = int(os.getenv("EXTRACTION_MAX_TOKENS", "200"))

    # LLM resilience
    LLM_TIMEOUT = float(os.getenv("LLM_TIMEOUT", "40"))
    LLM_CONNECT_TIMEOUT = float(os.getenv("LLM_CONNECT_TIMEOUT", "10"))
    LLM_MAX_RETRIES = int(os.getenv("LLM_MAX_RETRIES", "2"))
    LLM_CB_FAILURE_THRESHOLD = int(os.getenv("LLM_CB_FAILURE_THRESHOLD", "5"))
    LLM_CB_RECOVERY_TIMEOUT = int(os.getenv("LLM_CB_RECOVERY_TIMEOUT", "30"))

    # Search intent keywords (comma separated, empty = built-in defaults)
    SEARCH_KEYWORDS = [
        k.strip() for k in os.getenv("SEARCH_KEYWORDS", "").split(",") if k.strip()
    ]

    # Storage: "memory" (demo / tests) or "prisma" (PostgreSQL)
    STORAGE_BACKEND = os.getenv("STORAGE_BACKEND", "memory").lower()
    SEED_DEMO_LISTINGS = _env_bool("SEED_DEMO_LISTINGS", "true")

    # Conversations
    SERIALIZE_CONVERSATION_TURNS = _env_bool("SERIALIZE_CONVERSATION_TURNS", "true")
    CONVERSATION_TITLE_LENGTH = int(os.getenv("CONVERSATION_TITLE_LENGTH", "30"))
    CONVERSATION_MESSAGE_LIMIT: int = int(
        os.getenv("CONVERSATION_MESSAGE_LIMIT", "200")
    )
    CONVERSATION_USER_LIMIT: int = int(os.getenv("CONVERSATION_USER_LIMIT", "50"))

    # Viewing appointments per subscription tier (-1 = unlimited)
    APPOINTMENT_LIMITS = {
        "free": int(os.getenv("APPOINTMENT_LIMIT_FREE", "1")),
        "monthly": int(os.getenv("APPOINTMENT_LIMIT_MONTHLY", "10")),
        "annual": int(os.getenv("APPOINTMENT_LIMIT_ANNUAL", "-1")),
    }

    # Lease analysis (tiers allowed, comma separated)
    LEASE_ANALYSIS_TIERS = frozenset(
        t.strip()
        for t in os.getenv("LEASE_ANALYSIS_TIERS", "monthly,annual").split(",")
        if t.strip()
    )
    LEASE_TEXT_MAX_LENGTH = int(os.getenv("LEASE_TEXT_MAX_LENGTH", "20000"))
    LEASE_ANALYSIS_MAX_TOKENS = int(os.getenv("LEASE_ANALYSIS_MAX_TOKENS", "1000"))

    # Auth
    SERVICE_AUTH_SECRET = os.getenv("SERVICE_AUTH_SECRET", "")
    SERVICE_AUTH_ISSUER = os.getenv("SERVICE_AUTH_ISSUER", "flatmate-web")
    SERVICE_AUTH_AUDIENCE = os.getenv("SERVICE_AUTH_AUDIENCE", "flatmate-api")


class DevelopmentConfig(Config):
    """Development configuration"""

    DEBUG = True


class TestingConfig(Config):
    """Testing configuration"""

    TESTING = True
    SEED_DEMO_LISTINGS = False


class ProductionConfig(Config):
    """Production configuration"""

    pass


# Configuration dictionary
config = {
    "development": DevelopmentConfig,
    "testing": TestingConfig,
    "production": ProductionConfig,
    "default": DevelopmentConfig,
}


def get_config(env=None):
    """Get configuration based on environment"""
    if env is None:
        env = os.getenv("APP_ENV", "development")
    return config.get(env, config["default"])
