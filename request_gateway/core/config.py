import os
from dotenv import load_dotenv
from pathlib import Path

# load .env at startup from project root
# Path(__file__) is request_gateway/core/config.py, so we go up 2 levels to reach project root
project_root = Path(__file__).parent.parent.parent
load_dotenv(dotenv_path=project_root / ".env")

# Upstream API
API_BASE_URL = os.getenv("API_BASE_URL")
API_CONNECT_TIMEOUT = float(os.getenv("API_CONNECT_TIMEOUT", "10"))
API_RECEIVE_TIMEOUT = float(os.getenv("API_RECEIVE_TIMEOUT", "15"))

# Connectivity pre-check
CONNECTIVITY_CHECK_HOST = os.getenv("CONNECTIVITY_CHECK_HOST", "1.1.1.1")
CONNECTIVITY_CHECK_PORT = int(os.getenv("CONNECTIVITY_CHECK_PORT", "53"))
CONNECTIVITY_CHECK_TIMEOUT = float(os.getenv("CONNECTIVITY_CHECK_TIMEOUT", "3"))

# Logging
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def validate_config():
    """Validate that required environment variables are set."""
    required_vars = [
        ("API_BASE_URL", API_BASE_URL),
    ]

    missing_vars = [name for name, value in required_vars if not value]

    if missing_vars:
        raise ValueError(
            f"Missing required environment variables: {', '.join(missing_vars)}\n"
            "Please check your .env file and ensure all required variables are set."
        )
