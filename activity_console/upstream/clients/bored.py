import logging

import httpx
from pydantic import ValidationError

from activity_console.core.config import BORED_API_URL
from activity_console.core.errors import UpstreamFetchError
from activity_console.upstream.clients.base import BaseBoredClient
from activity_console.upstream.models import BoredActivity

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {
    "User-Agent": "activity-console/0.1",
    "Accept": "application/json",
}


class BoredClient(BaseBoredClient):
    """HTTP client for the Bored activity-suggestion API.

    Non-success responses and payloads that don't look like an activity come
    back as None. Transport failures raise `UpstreamFetchError`.
    """

    source_name = "bored_api"

    def __init__(
        self,
        base_url: str = BORED_API_URL,
        *,
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.base_url = base_url
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    async def get_activity(
        self,
        participants: int,
        *,
        timeout: float | None = None,
    ) -> BoredActivity | None:
        if participants < 1:
            raise ValueError(f"participants must be at least 1, got {participants}")

        timeout = self.timeout_seconds if timeout is None else timeout
        logger.debug(f"bored-fetch start url={self.base_url} participants={participants} timeout={timeout}")
        async with httpx.AsyncClient(
            timeout=timeout,
            follow_redirects=True,
            headers=DEFAULT_HEADERS,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(self.base_url, params={"participants": participants})
            except httpx.RequestError as exc:
                logger.warning(f"bored-fetch transport error url={self.base_url}: {exc!r}")
                raise UpstreamFetchError(self.base_url, str(exc) or type(exc).__name__) from exc

        logger.debug(f"bored-fetch status={response.status_code} bytes={len(response.content)}")
        return parse_bored_response(response)


def parse_bored_response(response: httpx.Response) -> BoredActivity | None:
    if not response.is_success:
        logger.warning(f"bored-fetch non-success status={response.status_code} url={response.request.url}")
        return None

    try:
        payload = response.json()
    except ValueError as exc:
        logger.warning(f"bored-fetch response is not JSON: {exc}")
        return None

    # Some mirrors of the API answer with a list of matches.
    if isinstance(payload, list):
        if not payload:
            logger.warning("bored-fetch returned an empty list")
            return None
        payload = payload[0]

    if isinstance(payload, dict) and "error" in payload:
        logger.warning(f"bored-fetch upstream error={payload['error']!r}")
        return None

    try:
        return BoredActivity.model_validate(payload)
    except ValidationError as exc:
        logger.warning(f"bored-fetch payload does not match BoredActivity: {exc.error_count()} error(s)")
        logger.debug(f"bored-fetch validation detail: {exc}")
        return None
