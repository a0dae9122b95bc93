import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


def _get(key, default):
    """Environment variable wins over env.yaml; non-string settings are parsed as YAML scalars"""
    if key in os.environ:
        raw = os.environ[key]
        return raw if isinstance(default, str) else yaml.safe_load(raw)
    return data.get(key, default)


class ApplicationConfig:
    DB_URI = _get("DB_URI", "sqlite+aiosqlite:///./forum.db")
    AUTO_CREATE_TABLES = bool(_get("AUTO_CREATE_TABLES", True))
    API_PREFIX = _get("API_PREFIX", "/api")
    API_PORT = int(_get("API_PORT", 8080))
    API_HOST = _get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = _get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = _get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = _get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(_get("ENABLE_LOGGING_MIDDLEWARE", 1))
    JWT_SECRET = _get("JWT_SECRET", "dev-secret-key-change-in-production")
    JWT_ALGORITHM = _get("JWT_ALGORITHM", "HS256")
    ACCESS_TOKEN_TTL_HOURS = int(_get("ACCESS_TOKEN_TTL_HOURS", 24))
    RESET_TOKEN_TTL_MINUTES = int(_get("RESET_TOKEN_TTL_MINUTES", 60))
    BCRYPT_ROUNDS = int(_get("BCRYPT_ROUNDS", 12))
    SMTP_HOST = _get("SMTP_HOST", "")
    SMTP_PORT = int(_get("SMTP_PORT", 587))
    SMTP_USERNAME = _get("SMTP_USERNAME", "")
    SMTP_PASSWORD = _get("SMTP_PASSWORD", "")
    SMTP_FROM = _get("SMTP_FROM", "no-reply@localhost")
    SMTP_USE_TLS = bool(_get("SMTP_USE_TLS", True))
    FRONTEND_URL = _get("FRONTEND_URL", "http://localhost:3000")
