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
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = int(os.getenv("PORT", data.get("API_PORT", 3000)))
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["*"])
    CORS_ALLOW_CREDENTIALS = bool(data.get("CORS_ALLOW_CREDENTIALS", False))
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Static assets and generated artifacts
    PUBLIC_DIR = data.get("PUBLIC_DIR", os.path.join(ROOT_PATH, "public"))
    GENERATED_DIR = data.get("GENERATED_DIR", os.path.join(PUBLIC_DIR, "generated"))
    GENERATED_URL_PREFIX = data.get("GENERATED_URL_PREFIX", "/generated")

    # Invoice store
    DATA_DIR = data.get("DATA_DIR", os.path.join(ROOT_PATH, "data"))
    DB_URI = data.get(
        "DB_URI", "sqlite+aiosqlite:///" + os.path.join(DATA_DIR, "invoices.db")
    )
