import logging

from activity_console.core.config import BoredClientConfig
from activity_console.upstream.clients.base import BaseBoredClient
from activity_console.upstream.clients.bored import BoredClient
from activity_console.upstream.clients.mock import MockBoredClient

logger = logging.getLogger(__name__)


def create_bored_client(config: BoredClientConfig) -> BaseBoredClient:
    if config.use_mock:
        logger.info("Using mock Bored client")
        return MockBoredClient()

    logger.info(f"Using Bored API client url={config.base_url} timeout={config.timeout_seconds}s")
    return BoredClient(config.base_url, timeout_seconds=config.timeout_seconds)
