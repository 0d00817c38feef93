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
    DB_URI = data.get("DB_URI", "sqlite+aiosqlite:///./signup.db")
    API_PREFIX = data.get("API_PREFIX", "")
    API_PORT = data.get("API_PORT", 5000)
    API_HOST = data.get("API_HOST", "0.0.0.0")
    CORS_ORIGINS = data.get("CORS_ORIGINS", ["http://localhost:3000"])
    CORS_ALLOW_CREDENTIALS = data.get("CORS_ALLOW_CREDENTIALS", True)
    LOG_LEVEL = data.get("LOG_LEVEL", "INFO")
    ENABLE_LOGGING_MIDDLEWARE = bool(data.get("ENABLE_LOGGING_MIDDLEWARE", 1))

    # Agent / provisioning platform
    API_KEY = data.get("API_KEY", os.environ.get("API_KEY", ""))
    AGENT_API_BASE_URL = data.get(
        "AGENT_API_BASE_URL", "https://eu-gcp-api.vg-stuff.com/v3"
    )
    PROVISIONING_API_BASE_URL = data.get(
        "PROVISIONING_API_BASE_URL", "https://eu-vg-edge.moeaymandev.workers.dev/v2"
    )
    BUSINESS_TYPE_TEMPLATES = data.get(
        "BUSINESS_TYPE_TEMPLATES",
        {
            "dropshipper": "szTb6eGNjla2iTx3hcu6",
            "themePage": "byOtkIyMEY5GIhD",
            "influencer": "z5Doy15F7X2L4aOy1EOv",
            "other": "mjXeeYgqbAu0pCrzgbCy",
        },
    )
    DEFAULT_WIDGET_ID = data.get("DEFAULT_WIDGET_ID", "mjXeeYgqbAu0pCrzgbCy")
    CALL_AGENT_ID = data.get("CALL_AGENT_ID", "tTKtg6VdMS9UKvKg2WtU")
    OUTBOUND_TIMEOUT_SECONDS = float(data.get("OUTBOUND_TIMEOUT_SECONDS", 15))
    STEP_TIMEOUT_SECONDS = float(data.get("STEP_TIMEOUT_SECONDS", 20))

    # Identity store
    SIGNUP_ENABLED = bool(data.get("SIGNUP_ENABLED", True))
    MIN_PASSWORD_LENGTH = int(data.get("MIN_PASSWORD_LENGTH", 0))
    BCRYPT_ROUNDS = int(data.get("BCRYPT_ROUNDS", 12))
