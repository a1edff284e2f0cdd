from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

from activity_console.upstream.models import BoredActivity

# Printed as plain numbers rather than pydantic's default decimal strings.
JsonDecimal = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class Activity(BaseModel):
    activity: str
    type: str
    participants: int
    price: JsonDecimal
    link: str
    key: str
    accessibility: JsonDecimal

    model_config = {"from_attributes": True, "frozen": True}

    @classmethod
    def from_upstream(cls, upstream: BoredActivity) -> "Activity":
        return cls.model_validate(upstream)
