"""Configuration management for instagraph."""

from pathlib import Path

# Project root directory
PROJECT_ROOT = Path(__file__).parent.parent.parent

# Logs configuration
LOG_DIR = PROJECT_ROOT / "logs"
LOG_FILE = LOG_DIR / "instagraph.log"

# Instagram Graph API endpoints
API_BASE_URL = "https://graph.instagram.com/"
ME_PATH = "me/"
MEDIA_PATH = "media/"

# Default field selections
USER_FIELDS = "account_type,id,media_count,username"
MEDIA_FIELDS = "caption,id,media_type,media_url,permalink,thumbnail_url,timestamp,username"

# HTTP configuration
CONNECT_TIMEOUT = 10.0  # Seconds
READ_TIMEOUT = 30.0  # Seconds

# App information
APP_NAME = "instagraph"
APP_VERSION = "0.1.0"

USER_AGENT = f"{APP_NAME}/{APP_VERSION}"
