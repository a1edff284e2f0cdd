import logging
import random
import sys
from dataclasses import dataclass
from enum import Enum
from typing import TextIO

from activity_console.core.config import Settings
from activity_console.schemas.activity import Activity
from activity_console.services.activity_service import get_activity
from activity_console.upstream.clients.base import BaseBoredClient
from activity_console.upstream.clients.factory import create_bored_client

logger = logging.getLogger(__name__)

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class RunStatus(str, Enum):
    started = "started"
    fetching_activity = "fetching_activity"
    succeeded = "succeeded"
    failed = "failed"
    stopped = "stopped"


@dataclass(slots=True)
class RunResult:
    participants: int | None
    activity: Activity | None
    status: RunStatus
    exit_code: int


def pick_participants(minimum: int, maximum: int, rng: random.Random | None = None) -> int:
    """Draw a participant count from [minimum, maximum); `maximum` itself is never chosen."""
    rng = rng or random.Random()
    return rng.randrange(minimum, maximum)


def _enter(status: RunStatus) -> RunStatus:
    logger.debug(f"run state -> {status.value}")
    return status


async def run(
    settings: Settings,
    *,
    client: BaseBoredClient | None = None,
    rng: random.Random | None = None,
    out: TextIO | None = None,
) -> RunResult:
    """Pick a participant count, fetch one activity and print it.

    The outcome is returned instead of being stored anywhere; `exit_code` is 0
    only when an activity was printed.
    """
    out = out or sys.stdout
    client = client or create_bored_client(settings.bored_client)

    status = _enter(RunStatus.started)
    participants: int | None = None
    activity: Activity | None = None
    exit_code = EXIT_FAILURE

    try:
        params = settings.activity_params
        logger.info(f"Configured minimum number of participants: {params.min_number_of_participants}")
        logger.info(f"Configured maximum number of participants: {params.max_number_of_participants}")

        participants = pick_participants(
            params.min_number_of_participants,
            params.max_number_of_participants,
            rng=rng,
        )
        print(f"Retrieving activity suggestion for {participants} participant(s)...", file=out)

        status = _enter(RunStatus.fetching_activity)
        activity = await get_activity(client, participants)

        if activity is None:
            message = f"Unable to retrieve activity for {participants} participant(s)."
            logger.error(message)
            print(f"Error: {message}", file=out)
            status = _enter(RunStatus.failed)
        else:
            print("Suggested activity:", file=out)
            print(activity.model_dump_json(indent=2), file=out)
            status = _enter(RunStatus.succeeded)
            exit_code = EXIT_SUCCESS
    except Exception:
        logger.exception("Unhandled exception while retrieving activity.")
        status = _enter(RunStatus.failed)
    finally:
        _enter(RunStatus.stopped)

    return RunResult(participants=participants, activity=activity, status=status, exit_code=exit_code)
