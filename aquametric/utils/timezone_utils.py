#!/usr/bin/env python3
"""
Timezone utilities for consistent date handling across pond calculations.
Elapsed rearing days are always measured against "today" in the configured timezone.
"""

import datetime
import pytz
from typing import Optional, Union

from ..config import config

DateLike = Union[str, datetime.date, datetime.datetime]


def get_system_timezone() -> pytz.BaseTzInfo:
    """Get the configured system timezone."""
    return pytz.timezone(config.DEFAULT_TIMEZONE)

def now_in_timezone(timezone: Optional[str] = None) -> datetime.datetime:
    """Get current time in specified timezone."""
    tz = pytz.timezone(timezone) if timezone else get_system_timezone()
    return datetime.datetime.now(tz)

def today_in_timezone(timezone: Optional[str] = None) -> datetime.date:
    """Get today's calendar date in specified timezone."""
    return now_in_timezone(timezone).date()

def parse_date_string(date_str: str, timezone: Optional[str] = None) -> datetime.datetime:
    """Parse date string and localize to specified timezone."""
    # Handle ISO format with Z suffix
    if date_str.endswith('Z'):
        date_str = date_str[:-1] + '+00:00'
    
    dt = datetime.datetime.fromisoformat(date_str)
    
    if dt.tzinfo is None:
        source_tz = pytz.timezone(timezone) if timezone else get_system_timezone()
        dt = source_tz.localize(dt)
    
    return dt

def to_date(value: DateLike) -> datetime.date:
    """Coerce an ISO string, date or datetime into a calendar date."""
    if isinstance(value, datetime.datetime):
        return value.date()
    if isinstance(value, datetime.date):
        return value
    return parse_date_string(value).date()

def days_between(start: DateLike, end: DateLike) -> int:
    """Whole calendar days from start to end (negative when end precedes start)."""
    return (to_date(end) - to_date(start)).days
