from abc import ABC, abstractmethod

from activity_console.upstream.models import BoredActivity


class BaseBoredClient(ABC):
    source_name: str

    @abstractmethod
    async def get_activity(self, participants: int) -> BoredActivity | None:
        """Fetch an activity suggestion for `participants` people, or None if unavailable."""
