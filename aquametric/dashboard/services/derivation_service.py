# Pond Aggregate Derivation
#
# Derives the scalar variables (N0, Nt, W0, Wt, D, F, t, L0, Lt) that the metric
# calculators consume from the raw per-pond collections, plus the growth series
# and feed summaries shown on the report pages.
#
# Nothing here is cached: every call recomputes from the collections it is given.

import datetime
import logging
import math
from typing import Dict, Iterable, List, Optional, Tuple, Union

import pandas as pd

from ..calculators import BaseCalculator, calculate_tkp
from ..models import FeedLog, Mortality, Pond, PondVariables, Sampling
from ...utils.timezone_utils import days_between, to_date, today_in_timezone

logger = logging.getLogger(__name__)

PERIODS = ('Pagi', 'Siang', 'Sore', 'Malam')


def period_of_day(hour: int) -> str:
    """Map an hour (0-23) to the feeding period label"""
    if hour < 10:
        return 'Pagi'
    if hour < 15:
        return 'Siang'
    if hour < 19:
        return 'Sore'
    return 'Malam'


def period_from_time(time_str: Optional[str]) -> str:
    """Feeding period for an HH:mm string; legacy period names pass through, junk maps to Pagi"""
    if not time_str:
        return 'Pagi'
    if time_str in PERIODS:
        return time_str
    if ':' not in time_str:
        return 'Pagi'
    try:
        hour = int(time_str.split(':')[0])
    except ValueError:
        return 'Pagi'
    return period_of_day(hour)


def latest_sampling(samplings: Iterable[Sampling]) -> Optional[Sampling]:
    """Sampling with the highest day; on equal days the later-inserted one wins"""
    latest = None
    for sampling in samplings:
        if latest is None or sampling.day >= latest.day:
            latest = sampling
    return latest


def elapsed_days(start_date: Union[str, datetime.date],
                 today: Optional[datetime.date] = None) -> int:
    """
    Whole days since the pond start date, floored at 1 when no time has elapsed.

    The floor only replaces 0 (to keep SGR/RGR defined on the stocking day);
    a start date in the future gives a negative value that is passed through.
    """
    if today is None:
        today = today_in_timezone()
    return days_between(start_date, today) or 1


def sampling_day(pond: Pond, sampling_date: Union[str, datetime.date]) -> int:
    """Day number of a sampling relative to pond start; negative when it precedes the start"""
    return days_between(pond.start_date, sampling_date)


def derive_pond_variables(pond: Pond,
                          feed_logs: Iterable[FeedLog],
                          samplings: Iterable[Sampling],
                          mortalities: Iterable[Mortality],
                          today: Optional[datetime.date] = None) -> PondVariables:
    """
    Derive the metric input variables for one pond.

    Collections may contain records of other ponds; they are filtered by pond id.

    Args:
        pond: Pond configuration (N0, initial biomass, start date, initial length)
        feed_logs: Feed logs (F = Σ feed_given)
        samplings: Samplings (latest one gives the current average weight/length)
        mortalities: Mortality records (Σ dead_count and Σ dead_weight)
        today: Reference date for elapsed days, defaults to today in the configured timezone

    Returns:
        PondVariables for the pond
    """
    pond_feed_logs = [log for log in feed_logs if log.pond_id == pond.id]
    pond_samplings = [s for s in samplings if s.pond_id == pond.id]
    pond_mortalities = [m for m in mortalities if m.pond_id == pond.id]

    n0 = pond.initial_stock
    w0_total = pond.initial_total_weight
    f = calculate_tkp(log.feed_given for log in pond_feed_logs)

    dead_count = sum(m.dead_count for m in pond_mortalities)
    dead_weight = float(sum(m.dead_weight for m in pond_mortalities))
    # Not clamped: more deaths than stock shows up as a negative Nt
    nt = n0 - dead_count

    w0_ind = BaseCalculator.safe_divide(w0_total, n0, default=math.nan)

    latest = latest_sampling(pond_samplings)
    current_avg_weight = latest.average_weight if latest else w0_ind
    wt_total = current_avg_weight * nt

    l0 = pond.initial_average_length or 0
    if latest and latest.has_lengths:
        lt = latest.average_length
    else:
        lt = l0

    t = elapsed_days(pond.start_date, today)

    if dead_count > n0:
        logger.warning(f"⚠️ Pond {pond.id}: cumulative dead count {dead_count} exceeds initial stock {n0}")

    logger.debug(f"📊 Pond {pond.id}: N0={n0}, Nt={nt}, F={f}, D={dead_weight}, t={t}, "
                 f"sampled={'yes' if latest else 'no'}")

    return PondVariables(
        n0=n0,
        nt=nt,
        w0_total=w0_total,
        wt_total=wt_total,
        w0_ind=w0_ind,
        wt_ind=current_avg_weight,
        d=dead_weight,
        f=f,
        t=t,
        l0=l0,
        lt=lt,
        has_sampling=latest is not None
    )


def growth_series(pond: Pond, samplings: Iterable[Sampling]) -> List[Tuple[str, float]]:
    """Average individual weight over time: the stocking weight as 'Hari 0', then each sampling by day"""
    pond_samplings = sorted((s for s in samplings if s.pond_id == pond.id), key=lambda s: s.day)
    initial_weight = BaseCalculator.safe_divide(pond.initial_total_weight, pond.initial_stock,
                                                default=math.nan)
    series = [('Hari 0', initial_weight)]
    series.extend((f'Hari {s.day}', s.average_weight) for s in pond_samplings)
    return series


def length_series(pond: Pond, samplings: Iterable[Sampling]) -> List[Tuple[str, float]]:
    """Average length over time for samplings that recorded lengths"""
    pond_samplings = sorted((s for s in samplings if s.pond_id == pond.id and s.has_lengths),
                            key=lambda s: s.day)
    series = [('Hari 0', pond.initial_average_length or 0)]
    series.extend((f'Hari {s.day}', s.average_length) for s in pond_samplings)
    return series


def _feed_frame(feed_logs: Iterable[FeedLog]) -> pd.DataFrame:
    return pd.DataFrame(
        [{'date': log.date, 'time': log.time, 'feed_type': log.feed_type,
          'feed_given': log.feed_given} for log in feed_logs],
        columns=['date', 'time', 'feed_type', 'feed_given']
    )


def weekly_feed_summary(pond: Pond, feed_logs: Iterable[FeedLog]) -> List[Tuple[int, float]]:
    """
    Feed given per rearing week, ascending by week number.

    Week = floor(|days between log date and start date| / 7) + 1, so logs dated
    before the start fold back into the early weeks.
    """
    df = _feed_frame(log for log in feed_logs if log.pond_id == pond.id)
    if df.empty:
        return []

    start = pd.Timestamp(to_date(pond.start_date))
    diff_days = (pd.to_datetime(df['date']) - start).dt.days.abs()
    df['week'] = diff_days // 7 + 1

    weekly = df.groupby('week')['feed_given'].sum().sort_index()
    return [(int(week), float(total)) for week, total in weekly.items()]


def daily_feed_summary(feed_logs: Iterable[FeedLog]) -> List[Dict]:
    """
    Per-date feed totals, newest date first.

    Each entry has the date, total grams, number of feedings, distinct feed types
    and distinct feeding periods.
    """
    df = _feed_frame(feed_logs)
    if df.empty:
        return []

    df['period'] = df['time'].map(period_from_time)
    summary = []
    for date, group in df.groupby('date', sort=False):
        summary.append({
            'date': date,
            'total': float(group['feed_given'].sum()),
            'count': int(len(group)),
            'types': sorted(group['feed_type'].unique().tolist()),
            'periods': [p for p in PERIODS if p in set(group['period'])]
        })
    summary.sort(key=lambda entry: entry['date'], reverse=True)
    return summary
