import os

from config.config import env_bool, kiosk_config

SECRET_KEY = "test-secret"

KIOSK_CONFIG = kiosk_config(fallback_policy="fail_closed")
KIOSK_CONFIG["directory_base_url"] = os.getenv("DIRECTORY_BASE_URL", "http://directory.test/webhook")

DEBUG = False
TESTING = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING")

# Tests drive the roster load themselves.
AUTO_LOAD_ROSTER = env_bool("AUTO_LOAD_ROSTER", "0")
