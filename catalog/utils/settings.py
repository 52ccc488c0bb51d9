# catalog/utils/settings.py
import os
from dotenv import load_dotenv

load_dotenv()


def _int_env(name: str, default: int) -> int:
    try:
        return int(os.getenv(name, ""))
    except ValueError:
        return default


def _float_env(name: str) -> float | None:
    value = os.getenv(name)
    if not value:
        return None
    try:
        return float(value)
    except ValueError:
        return None


ACCOUNTS_BASE_URL = os.getenv("ACCOUNTS_BASE_URL", "http://accounts-api:3002")
ACCOUNTS_TIMEOUT_SECONDS = _float_env("ACCOUNTS_TIMEOUT_SECONDS")
CHARGE_ON_ASSIGN = os.getenv("CHARGE_ON_ASSIGN") == "true"
PORT = _int_env("PORT", 3003)
ACCOUNTS_MOCK_PORT = _int_env("PORT", 3002)
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
