# Pond Store
#
# Holds the per-pond collections as an explicit AppState value. Mutations are
# reducer-style functions that return a new AppState; PondStore wraps the current
# state and offers the read methods the metric services are injected with.
# Snapshots use the camelCase JSON layout of the browser app ("aquametric-state").

import json
import logging
import secrets
import time
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Tuple, Union

from ..exceptions import DuplicateSamplingError, PondNotFoundError
from ..models import (
    CalculationModule, FeedLog, Mortality, Pond, Sampling, WaterQuality
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppState:
    """Immutable snapshot of every collection"""
    ponds: Tuple[Pond, ...] = ()
    samplings: Tuple[Sampling, ...] = ()
    feed_logs: Tuple[FeedLog, ...] = ()
    mortalities: Tuple[Mortality, ...] = ()
    water_quality: Tuple[WaterQuality, ...] = ()


def generate_id(prefix: str) -> str:
    """Record id in the browser app's style: <prefix>-<epoch ms>-<random suffix>"""
    return f"{prefix}-{int(time.time() * 1000)}-{secrets.token_hex(5)[:9]}"


def _update_by_id(records: Tuple[Any, ...], record_id: str, updates: Dict[str, Any]) -> Tuple[Any, ...]:
    return tuple(replace(r, **updates) if r.id == record_id else r for r in records)


def _delete_by_id(records: Tuple[Any, ...], record_id: str) -> Tuple[Any, ...]:
    return tuple(r for r in records if r.id != record_id)


# === REDUCERS ===

def add_pond(state: AppState, pond: Pond) -> AppState:
    return replace(state, ponds=state.ponds + (pond,))


def update_pond(state: AppState, pond_id: str, **updates) -> AppState:
    return replace(state, ponds=_update_by_id(state.ponds, pond_id, updates))


def add_sampling(state: AppState, sampling: Sampling) -> AppState:
    """Append a sampling; a pond can only have one sampling per calendar date"""
    for existing in state.samplings:
        if existing.pond_id == sampling.pond_id and existing.date == sampling.date:
            raise DuplicateSamplingError(sampling.pond_id, sampling.date)
    return replace(state, samplings=state.samplings + (sampling,))


def update_sampling(state: AppState, sampling_id: str, **updates) -> AppState:
    return replace(state, samplings=_update_by_id(state.samplings, sampling_id, updates))


def delete_sampling(state: AppState, sampling_id: str) -> AppState:
    return replace(state, samplings=_delete_by_id(state.samplings, sampling_id))


def add_feed_log(state: AppState, log: FeedLog) -> AppState:
    return replace(state, feed_logs=state.feed_logs + (log,))


def update_feed_log(state: AppState, log_id: str, **updates) -> AppState:
    return replace(state, feed_logs=_update_by_id(state.feed_logs, log_id, updates))


def delete_feed_log(state: AppState, log_id: str) -> AppState:
    return replace(state, feed_logs=_delete_by_id(state.feed_logs, log_id))


def add_mortality(state: AppState, mortality: Mortality) -> AppState:
    return replace(state, mortalities=state.mortalities + (mortality,))


def add_water_quality(state: AppState, reading: WaterQuality) -> AppState:
    return replace(state, water_quality=state.water_quality + (reading,))


def update_water_quality(state: AppState, reading_id: str, **updates) -> AppState:
    return replace(state, water_quality=_update_by_id(state.water_quality, reading_id, updates))


def delete_water_quality(state: AppState, reading_id: str) -> AppState:
    return replace(state, water_quality=_delete_by_id(state.water_quality, reading_id))


# === SNAPSHOT LOADING ===

def _require(record: Dict[str, Any], key: str, kind: str) -> Any:
    if key not in record:
        raise ValueError(f"{kind} record is missing required field '{key}'")
    return record[key]


def pond_from_dict(record: Dict[str, Any]) -> Pond:
    return Pond(
        id=_require(record, 'id', 'Pond'),
        name=record.get('name', ''),
        species=record.get('species', 'Other'),
        initial_stock=int(_require(record, 'initialStock', 'Pond')),
        initial_total_weight=float(_require(record, 'initialTotalWeight', 'Pond')),
        start_date=_require(record, 'startDate', 'Pond'),
        duration_days=int(record.get('durationDays', 0) or 0),
        initial_average_length=record.get('initialAverageLength'),
        selected_modules=[CalculationModule(m) for m in record.get('selectedModules', [])]
    )


def sampling_from_dict(record: Dict[str, Any]) -> Sampling:
    return Sampling(
        id=record.get('id') or generate_id('sampling'),
        pond_id=_require(record, 'pondId', 'Sampling'),
        day=int(_require(record, 'day', 'Sampling')),
        date=record.get('date', ''),
        sampled_count=int(record.get('sampledCount', 0) or 0),
        sample_weights=[float(w) for w in _require(record, 'sampleWeights', 'Sampling')],
        sample_lengths=[float(x) for x in record['sampleLengths']] if record.get('sampleLengths') is not None else None,
        notes=record.get('notes')
    )


def feed_log_from_dict(record: Dict[str, Any]) -> FeedLog:
    return FeedLog(
        id=record.get('id') or generate_id('feed'),
        pond_id=_require(record, 'pondId', 'FeedLog'),
        date=_require(record, 'date', 'FeedLog'),
        time=record.get('time', ''),
        feed_type=record.get('feedType', ''),
        feed_given=float(_require(record, 'feedGiven', 'FeedLog')),
        feed_leftover=record.get('feedLeftover')
    )


def mortality_from_dict(record: Dict[str, Any]) -> Mortality:
    return Mortality(
        pond_id=_require(record, 'pondId', 'Mortality'),
        date=record.get('date', ''),
        dead_count=int(_require(record, 'deadCount', 'Mortality')),
        dead_weight=float(record.get('deadWeight', 0) or 0)
    )


def water_quality_from_dict(record: Dict[str, Any]) -> WaterQuality:
    return WaterQuality(
        id=record.get('id') or generate_id('wq'),
        pond_id=_require(record, 'pondId', 'WaterQuality'),
        timestamp=_require(record, 'timestamp', 'WaterQuality'),
        ph=float(record.get('pH', 0) or 0),
        temperature=float(record.get('temperature', 0) or 0),
        dissolved_oxygen=float(record.get('dissolvedOxygen', 0) or 0),
        salinity=record.get('salinity'),
        notes=record.get('notes')
    )


def state_from_dict(data: Dict[str, Any]) -> AppState:
    """
    Build an AppState from a snapshot dict.

    Legacy samplings, feed logs and water-quality readings saved without an id
    are assigned one on load.
    """
    missing_ids = sum(
        1 for key in ('samplings', 'feedLogs', 'waterQuality')
        for record in data.get(key) or [] if not record.get('id')
    )
    if missing_ids:
        logger.info(f"🔧 Assigning ids to {missing_ids} legacy records")

    return AppState(
        ponds=tuple(pond_from_dict(r) for r in data.get('ponds') or []),
        samplings=tuple(sampling_from_dict(r) for r in data.get('samplings') or []),
        feed_logs=tuple(feed_log_from_dict(r) for r in data.get('feedLogs') or []),
        mortalities=tuple(mortality_from_dict(r) for r in data.get('mortalities') or []),
        water_quality=tuple(water_quality_from_dict(r) for r in data.get('waterQuality') or [])
    )


def load_state(path: Union[str, Path]) -> AppState:
    """Load a JSON snapshot; a missing file gives an empty state"""
    path = Path(path)
    if not path.exists():
        logger.info(f"📂 No state file at {path}, starting empty")
        return AppState()

    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    state = state_from_dict(data)
    logger.info(f"✅ Loaded {len(state.ponds)} ponds from {path}")
    return state


class PondStore:
    """Read access to the current AppState, keyed by pond id"""

    def __init__(self, state: Optional[AppState] = None):
        self.state = state or AppState()

    def apply(self, reducer: Callable[..., AppState], *args, **kwargs) -> AppState:
        """Replace the current state with reducer(state, *args, **kwargs)"""
        self.state = reducer(self.state, *args, **kwargs)
        return self.state

    def list_ponds(self) -> List[Pond]:
        return list(self.state.ponds)

    def get_pond(self, pond_id: str) -> Pond:
        for pond in self.state.ponds:
            if pond.id == pond_id:
                return pond
        raise PondNotFoundError(pond_id)

    def feed_logs_for(self, pond_id: str) -> List[FeedLog]:
        return [log for log in self.state.feed_logs if log.pond_id == pond_id]

    def samplings_for(self, pond_id: str) -> List[Sampling]:
        return [s for s in self.state.samplings if s.pond_id == pond_id]

    def mortalities_for(self, pond_id: str) -> List[Mortality]:
        return [m for m in self.state.mortalities if m.pond_id == pond_id]

    def water_quality_for(self, pond_id: str) -> List[WaterQuality]:
        """Readings for a pond, oldest first"""
        readings = [w for w in self.state.water_quality if w.pond_id == pond_id]
        return sorted(readings, key=lambda w: w.timestamp)
