from decimal import Decimal

from pydantic import BaseModel, ConfigDict


class BoredActivity(BaseModel):
    """Activity suggestion as returned by the Bored API."""

    activity: str
    type: str
    participants: int
    price: Decimal
    link: str = ""
    key: str
    accessibility: Decimal

    model_config = ConfigDict(frozen=True, extra="ignore")
