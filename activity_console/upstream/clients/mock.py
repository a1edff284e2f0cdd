from decimal import Decimal

from activity_console.upstream.clients.base import BaseBoredClient
from activity_console.upstream.models import BoredActivity

MOCK_ACTIVITY_TYPE = "Mock"


class MockBoredClient(BaseBoredClient):
    source_name = "mock"

    async def get_activity(self, participants: int) -> BoredActivity | None:
        return build_mock_activity(participants)


def build_mock_activity(participants: int) -> BoredActivity:
    if participants <= 0:
        participants = 1

    noun = "people" if participants > 1 else "person"
    return BoredActivity(
        activity=f"Mock activity for {participants} {noun}",
        type=MOCK_ACTIVITY_TYPE,
        participants=participants,
        price=Decimal("0.00"),
        link="",
        key="0",
        accessibility=Decimal("0.00"),
    )
