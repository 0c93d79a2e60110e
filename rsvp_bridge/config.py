import os
from typing import TypedDict

from dotenv import load_dotenv


DEFAULT_SHEET_RANGE = "A1:K137"
DEFAULT_PORT = 4500
DEFAULT_TIMEOUT_SECONDS = 30.0

TRUTHY = {"1", "true", "yes", "on"}


class AppConfig(TypedDict):
    """Configuration for the application"""

    GOOGLE_SHEET_ID: str
    GOOGLE_SHEET_PAGE_NAME: str
    GOOGLE_SHEET_RANGE: str
    GOOGLE_CREDENTIALS: str | None
    GOOGLE_CLIENT_EMAIL: str | None
    GOOGLE_PRIVATE_KEY: str | None
    SHEETS_TIMEOUT_SECONDS: float
    RESTRICT_MARKS_TO_INVITED: bool
    HOST: str
    PORT: int


def load_config() -> AppConfig:
    """Load configuration from environment variables"""
    load_dotenv()

    required_vars = {
        "GOOGLE_SHEET_ID": os.getenv("GOOGLE_SHEET_ID"),
        "GOOGLE_SHEET_PAGE_NAME": os.getenv("GOOGLE_SHEET_PAGE_NAME"),
    }
    credentials_vars = {
        "GOOGLE_CREDENTIALS": os.getenv("GOOGLE_CREDENTIALS"),
        "GOOGLE_CLIENT_EMAIL": os.getenv("GOOGLE_CLIENT_EMAIL"),
        "GOOGLE_PRIVATE_KEY": os.getenv("GOOGLE_PRIVATE_KEY"),
    }

    missing = [k for k, v in required_vars.items() if not v]
    if not credentials_vars["GOOGLE_CREDENTIALS"]:
        # without a key file both halves of the inline key are needed
        missing += [
            k for k in ("GOOGLE_CLIENT_EMAIL", "GOOGLE_PRIVATE_KEY") if not credentials_vars[k]
        ]
    if missing:
        raise OSError(f"Missing required environment variables: {', '.join(missing)}")

    try:
        port = int(os.getenv("PORT") or DEFAULT_PORT)
        timeout = float(os.getenv("SHEETS_TIMEOUT_SECONDS") or DEFAULT_TIMEOUT_SECONDS)
    except ValueError as e:
        raise OSError(f"Invalid numeric environment variable: {e}") from e

    return {
        **required_vars,
        **credentials_vars,
        "GOOGLE_SHEET_RANGE": os.getenv("GOOGLE_SHEET_RANGE") or DEFAULT_SHEET_RANGE,
        "SHEETS_TIMEOUT_SECONDS": timeout,
        "RESTRICT_MARKS_TO_INVITED": os.getenv("RESTRICT_MARKS_TO_INVITED", "").strip().lower() in TRUTHY,
        "HOST": os.getenv("HOST") or "0.0.0.0",
        "PORT": port,
    }
