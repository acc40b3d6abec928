from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .container import Container, build_container
from .logging_utils import setup_logging

logger = logging.getLogger(__name__)


def bootstrap() -> Container:
    """Load ``.env``, pick the settings module from APP_ENV, configure logging, wire services."""
    load_dotenv(override=False)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)

    setup_logging(
        getattr(settings, "LOG_LEVEL", "INFO"),
        json_output=bool(getattr(settings, "LOG_JSON", False)),
    )

    container = build_container(
        annual_leave_days=int(getattr(settings, "ANNUAL_LEAVE_DAYS", 42)),
        monthly_alert_day=int(getattr(settings, "MONTHLY_ALERT_DAY", 23)),
        page_size=int(getattr(settings, "DEFAULT_PAGE_SIZE", 25)),
    )

    if getattr(settings, "DEBUG", False):
        logger.debug("employee-records ready", extra={"settings": settings_module})

    return container
