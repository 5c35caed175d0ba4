import calendar
from datetime import datetime

from pydantic import BaseModel, Field


class MonthlyEarnings(BaseModel):
    """Sum of transaction amounts for one calendar month."""

    year: int
    month: int = Field(ge=1, le=12)
    total: float


def months_before(moment: datetime, months: int) -> datetime:
    """
    Same wall-clock time ``months`` calendar months earlier. The day is clamped
    to the length of the target month (31 March minus one month is 28/29 Feb).
    """
    month_index = moment.year * 12 + (moment.month - 1) - months
    year, month = divmod(month_index, 12)
    month += 1
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)
