from __future__ import annotations

import logging

from ticket_estimator.config import Settings, get_settings, setup_logging
from ticket_estimator.services.estimator import TicketEstimator
from ticket_estimator.services.pricing_api import HttpBaseFareProvider
from ticket_estimator.utils.cache import configure_cache
from ticket_estimator.utils.clock import configure_timezone
from ticket_estimator.utils.http import close_session, configure_http

logger = logging.getLogger(__name__)


def create_estimator(settings: Settings | None = None) -> TicketEstimator:
    settings = settings or get_settings()
    setup_logging(settings.log_level)
    configure_cache(settings.cache_ttl_seconds)
    configure_http(settings.http_timeout_seconds)
    configure_timezone(settings.timezone)

    provider = HttpBaseFareProvider(settings.pricing_api_url, retries=settings.http_retries)
    logger.info("Estimator ready: pricing API %s, tz=%s", settings.pricing_api_url, settings.timezone)
    return TicketEstimator(provider)


async def shutdown() -> None:
    await close_session()
