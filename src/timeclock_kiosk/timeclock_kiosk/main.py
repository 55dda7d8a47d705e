from __future__ import annotations

import importlib
import logging
import threading
from typing import Optional

from dotenv import load_dotenv
from flask import Flask

from config import get_settings_module

from .container import build_container
from .directory.adapter import RemoteSyncAdapter
from .kiosk.controller import register as register_kiosk
from .session.scheduler import Scheduler

logger = logging.getLogger(__name__)


def create_app(
    test_config: Optional[dict] = None,
    *,
    adapter: Optional[RemoteSyncAdapter] = None,
    scheduler: Optional[Scheduler] = None,
) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    kiosk_config = dict(getattr(settings, "KIOSK_CONFIG"))
    if test_config:
        kiosk_config.update(test_config)

    logging.basicConfig(
        level=getattr(settings, "LOG_LEVEL", "INFO"),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    container = build_container(kiosk_config=kiosk_config, adapter=adapter, scheduler=scheduler)
    logger.info(
        "settings=%s directory=%s mode=%s fallback=%s",
        settings_module,
        kiosk_config.get("directory_base_url"),
        kiosk_config.get("identification_mode"),
        container.roster_service.fallback_policy.value,
    )
    app.extensions["kiosk_container"] = container

    register_kiosk(app, container)

    # The first roster fetch runs in the background so the keypad is usable
    # immediately; PIN lookups against the empty roster fail until it lands.
    if bool(getattr(settings, "AUTO_LOAD_ROSTER", True)):
        threading.Thread(
            target=container.session_controller.refresh_roster,
            name="roster-initial-load",
            daemon=True,
        ).start()

    return app
