"""
Runtime configuration for MealMatch.

Values are read from the environment (optionally via a .env file at the
repository root). Import this module instead of calling os.getenv directly.
"""

import os
from pathlib import Path

from dotenv import load_dotenv
load_dotenv(Path(__file__).parent.parent / ".env")


# Recipe source site
SOURCE_ORIGIN = os.getenv("SOURCE_ORIGIN", "https://cookpad.com").rstrip("/")
SEARCH_PATH = os.getenv("SEARCH_PATH", "/search/{term}")

# Scraping limits
MAX_DETAIL_PAGES = int(os.getenv("MAX_DETAIL_PAGES", "5"))
HTTP_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "30"))

# Server
RECIPES_FILE = Path(os.getenv("RECIPES_FILE", Path(__file__).parent.parent / "recipes.json")).expanduser()
API_PREFIX = os.getenv("API_PREFIX", "")

# Client
API_URL = os.getenv("API_URL", "http://localhost:8000")
LOCAL_STORAGE_FILE = Path(
    os.getenv("LOCAL_STORAGE_FILE", Path.home() / ".mealmatch" / "local_storage.json")
).expanduser()

# Output
CLI_MODE = os.getenv("CLI_MODE", "true").lower() == "true"
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
