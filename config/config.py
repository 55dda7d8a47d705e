import json
import os

# Default directory host: the n8n instance the kiosk webhooks were first deployed on.
DEFAULT_DIRECTORY_BASE_URL = "https://primary-production-191cf.up.railway.app/webhook"

DEFAULT_SEED_EMPLOYEES = [
    {"id": "1", "name": "Annabelle Cazals"},
    {"id": "2", "name": "Bohdan Zavhorodnii"},
    {"id": "3", "name": "Elzbieta Karpinska"},
]


def env_bool(name: str, default: str) -> bool:
    return bool(int(os.getenv(name, default)))


def env_json(name: str, default):
    """Parse a JSON env var (headers, seed roster); fall back to ``default`` when unset."""
    raw = os.getenv(name)
    if not raw:
        return default
    return json.loads(raw)


def kiosk_config(*, fallback_policy: str, message_seconds: str = "3") -> dict:
    """Kiosk settings shared by every environment; each module picks its defaults."""
    return {
        "directory_base_url": os.getenv("DIRECTORY_BASE_URL", DEFAULT_DIRECTORY_BASE_URL),
        # Per-operation overrides, keyed by operation name.
        "directory_urls": {
            "get-employees": os.getenv("DIRECTORY_GET_EMPLOYEES_URL"),
            "clock-in": os.getenv("DIRECTORY_CLOCK_IN_URL"),
            "start-break": os.getenv("DIRECTORY_START_BREAK_URL"),
            "end-break": os.getenv("DIRECTORY_END_BREAK_URL"),
            "clock-out": os.getenv("DIRECTORY_CLOCK_OUT_URL"),
        },
        "directory_timeout": float(os.getenv("DIRECTORY_TIMEOUT_SECONDS", "10")),
        "directory_headers": env_json("DIRECTORY_HEADERS", {}),
        "identification_mode": os.getenv("IDENTIFICATION_MODE", "selection").lower(),
        "roster_fallback_policy": os.getenv("ROSTER_FALLBACK_POLICY", fallback_policy).lower(),
        "seed_employees": env_json("SEED_EMPLOYEES", DEFAULT_SEED_EMPLOYEES),
        "message_seconds": float(os.getenv("MESSAGE_DURATION_SECONDS", message_seconds)),
    }
