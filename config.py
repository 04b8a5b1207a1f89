import os
import yaml

ROOT_PATH = os.path.dirname(__file__)
CONFIG_FILE_PATH = os.path.join(ROOT_PATH, "env.yaml")

if os.path.exists(CONFIG_FILE_PATH):
    with open(CONFIG_FILE_PATH, "r") as r_file:
        data = yaml.safe_load(r_file)
else:
    data = dict()


class ApplicationConfig:
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./invoicing.db")
    API_PREFIX = data.get("API_PREFIX", "/api")
    API_PORT = data.get("API_PORT", 8000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    API_RELOAD = bool(data.get("API_RELOAD", False))
    CORS_ORIGINS = data.get("CORS_ORIGINS", [])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_SENTRY = data.get("ENABLE_SENTRY", 0)
    DSN_SENTRY = data.get("DSN_SENTRY", "")
    SENTRY_ENVIRONMENT = data.get("SENTRY_ENVIRONMENT", "dev")

    # Tax jurisdiction: clients registered in this state are billed in-state (CGST + SGST)
    BUSINESS_HOME_STATE = data.get("BUSINESS_HOME_STATE", "Maharashtra")

    # Issuer details printed on invoice PDFs
    COMPANY_NAME = data.get("COMPANY_NAME", "Brainpower Medical Supplies")
    COMPANY_ADDRESS = data.get("COMPANY_ADDRESS", "221 Linking Road, Mumbai, Maharashtra 400050")

    # Create missing tables at startup (no migration tool is shipped)
    DB_CREATE_TABLES = bool(data.get("DB_CREATE_TABLES", True))
