import os

from config.config import env_bool, kiosk_config

SECRET_KEY = os.getenv("SECRET_KEY", "please-set-SECRET_KEY")

# Never invent employees in production: an unreachable directory means an empty list.
KIOSK_CONFIG = kiosk_config(fallback_policy="fail_closed")

DEBUG = False
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

AUTO_LOAD_ROSTER = env_bool("AUTO_LOAD_ROSTER", "1")
