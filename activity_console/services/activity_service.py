import logging

from activity_console.schemas.activity import Activity
from activity_console.upstream.clients.base import BaseBoredClient

logger = logging.getLogger(__name__)


async def get_activity(client: BaseBoredClient, participants: int) -> Activity | None:
    """Fetch an activity from `client` and convert it to the service model.

    Returns None when the client has nothing; there is no fallback or retry.
    """
    logger.info(f"Fetching activity for {participants} participant(s) from {client.source_name}")

    upstream_activity = await client.get_activity(participants)
    if upstream_activity is None:
        logger.info(f"No activity returned by {client.source_name}")
        return None

    logger.info(f"Received upstream model:\n{upstream_activity.model_dump_json(indent=2)}")

    activity = Activity.from_upstream(upstream_activity)

    logger.info(f"After conversion to service model:\n{activity.model_dump_json(indent=2)}")
    return activity
