import os

from config.config import env_bool, kiosk_config

SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key")

# Development shows the seed roster when the directory is unreachable.
KIOSK_CONFIG = kiosk_config(fallback_policy="fail_open")

DEBUG = True
LOG_LEVEL = os.getenv("LOG_LEVEL", "DEBUG")

# Fetch the roster in the background on startup
AUTO_LOAD_ROSTER = env_bool("AUTO_LOAD_ROSTER", "1")
