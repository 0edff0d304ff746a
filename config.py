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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./vet_checkin.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ADMIN_API_KEY = data.get("ADMIN_API_KEY", "test-admin-key-12345")
    ADMIN_EMAIL = data.get("ADMIN_EMAIL", "admin@example.com")
    ADMIN_PASSWORD = data.get("ADMIN_PASSWORD", "change-me")
    APP_URL = data.get("APP_URL", "http://localhost:3000")
    RESEND_API_KEY = data.get("RESEND_API_KEY", "")
    RESEND_API_URL = data.get("RESEND_API_URL", "https://api.resend.com/emails")
    EMAIL_FROM = data.get("EMAIL_FROM", "Vet Check-in <noreply@example.com>")
    EMAIL_MAX_RETRIES = int(data.get("EMAIL_MAX_RETRIES", 3))
    EMAIL_RETRY_DELAY_SECONDS = float(data.get("EMAIL_RETRY_DELAY_SECONDS", 2))
    EXPOSE_RESET_TOKENS = bool(data.get("EXPOSE_RESET_TOKENS", 0))
    ADMIN_RESET_TOKEN_STORE = data.get("ADMIN_RESET_TOKEN_STORE", "database")
    CHECKIN_CODE_TTL_HOURS = int(data.get("CHECKIN_CODE_TTL_HOURS", 8))
    SIGNUP_CODE_TTL_HOURS = int(data.get("SIGNUP_CODE_TTL_HOURS", 24))
    ADMIN_RESET_TOKEN_TTL_HOURS = int(data.get("ADMIN_RESET_TOKEN_TTL_HOURS", 1))
    CLINIC_RESET_TOKEN_TTL_HOURS = int(data.get("CLINIC_RESET_TOKEN_TTL_HOURS", 24))
