import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file) or dict()
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./staffdesk.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")

    # Token signing - session and reset keys must differ
    JWT_SECRET = data.get("JWT_SECRET", "dev-secret-key-change-in-production")
    RESET_PASSWORD_SECRET = data.get(
        "RESET_PASSWORD_SECRET", "dev-reset-secret-key-change-in-production"
    )
    JWT_ALGORITHM = data.get("JWT_ALGORITHM", "HS256")
    SESSION_TOKEN_TTL_MINUTES = int(data.get("SESSION_TOKEN_TTL_MINUTES", 60))
    RESET_TOKEN_TTL_MINUTES = int(data.get("RESET_TOKEN_TTL_MINUTES", 15))

    OTP_TTL_MINUTES = int(data.get("OTP_TTL_MINUTES", 10))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))

    # Outgoing mail
    MAIL_ENABLED = bool(data.get("MAIL_ENABLED", False))
    SMTP_HOST = data.get("SMTP_HOST", "smtp.gmail.com")
    SMTP_PORT = int(data.get("SMTP_PORT", 587))
    SMTP_USERNAME = data.get("SMTP_USERNAME", "")
    SMTP_PASSWORD = data.get("SMTP_PASSWORD", "")
    SMTP_USE_SSL = bool(data.get("SMTP_USE_SSL", False))
    SMTP_USE_STARTTLS = bool(data.get("SMTP_USE_STARTTLS", True))
    MAIL_FROM = data.get("MAIL_FROM", "")
