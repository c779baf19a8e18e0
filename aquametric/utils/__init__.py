#!/usr/bin/env python3
"""
AquaMetric utilities package.
"""

from .timezone_utils import (
    get_system_timezone,
    now_in_timezone,
    today_in_timezone,
    parse_date_string,
    to_date,
    days_between
)

__all__ = [
    'get_system_timezone',
    'now_in_timezone',
    'today_in_timezone',
    'parse_date_string',
    'to_date',
    'days_between'
]
