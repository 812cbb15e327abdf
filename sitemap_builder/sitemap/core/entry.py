from dataclasses import dataclass
from datetime import date, datetime, time, timezone
from decimal import Decimal
from enum import Enum
from numbers import Real
from typing import Optional, Union

from sitemap_builder.exceptions import InvalidArgument

Timestamp = Union[datetime, date]


class ChangeFrequency(str, Enum):
    ALWAYS = "always"
    HOURLY = "hourly"
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"
    YEARLY = "yearly"
    NEVER = "never"


@dataclass(frozen=True)
class UrlEntry:
    location: str
    last_modified: Optional[datetime] = None
    change_frequency: Optional[str] = None
    priority: Optional[float] = None

    @property
    def lastmod(self) -> Optional[str]:
        if self.last_modified is None:
            return None
        return self.last_modified.isoformat(timespec="seconds")

    @property
    def formatted_priority(self) -> Optional[str]:
        if self.priority is None:
            return None
        return f"{self.priority:.2f}"

    def to_dict(self) -> dict:
        out = {"loc": self.location}
        if self.lastmod is not None:
            out["lastmod"] = self.lastmod
        if self.change_frequency is not None:
            out["changefreq"] = self.change_frequency
        if self.formatted_priority is not None:
            out["priority"] = self.formatted_priority
        return out


def normalize_timestamp(value: Optional[Timestamp]) -> Optional[datetime]:
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value
    if isinstance(value, date):
        return datetime.combine(value, time.min, tzinfo=timezone.utc)
    raise InvalidArgument(f"Last modified must be a date or datetime. Received \"{value!r}\"")


def validate_change_frequency(value: Optional[Union[str, ChangeFrequency]]) -> Optional[str]:
    if value is None:
        return None
    try:
        return ChangeFrequency(value).value
    except ValueError:
        raise InvalidArgument(f"Invalid change frequency value \"{value}\"") from None


def validate_priority(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
        raise InvalidArgument(f"Priority must be a decimal between 0 and 1. Received \"{value!r}\"")

    priority = float(value)
    if not 0 <= priority <= 1:
        raise InvalidArgument(f"Priority must be a decimal between 0 and 1. Received \"{priority:0.2f}\"")
    return priority


def make_entry(
        location: str,
        last_modified: Optional[Timestamp] = None,
        change_frequency: Optional[Union[str, ChangeFrequency]] = None,
        priority: Optional[float] = None,
) -> UrlEntry:
    return UrlEntry(
        location=location,
        last_modified=normalize_timestamp(last_modified),
        change_frequency=validate_change_frequency(change_frequency),
        priority=validate_priority(priority),
    )
