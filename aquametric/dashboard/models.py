"""
Pond Data Models

Entities recorded per pond (ponds, feed logs, samplings, mortalities, water quality)
and the derived scalar variable set consumed by the metric calculators.

Entities are owned by the pond store; calculators and services only read them.
"""

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional


class CalculationModule(str, Enum):
    """Metric modules a pond can enable and the formula display builder understands"""
    SR = 'SR'
    FCR = 'FCR'
    SGR = 'SGR'
    RGR = 'RGR'
    EPP = 'EPP'
    TKP = 'TKP'
    ABSOLUTE_WEIGHT = 'AbsoluteWeight'
    ABSOLUTE_LENGTH = 'AbsoluteLength'


def mean(values: List[float]) -> float:
    """Arithmetic mean; an empty list yields nan instead of raising."""
    if not values:
        return math.nan
    return sum(values) / len(values)


@dataclass
class Pond:
    """
    Pond configuration.

    initial_total_weight is the initial biomass in grams (average weight × initial_stock),
    not the average individual weight.
    """
    id: str
    name: str
    species: str
    initial_stock: int
    initial_total_weight: float
    start_date: str
    duration_days: int = 0
    initial_average_length: Optional[float] = None
    selected_modules: List[CalculationModule] = field(default_factory=list)

    @classmethod
    def from_average_weight(cls, id: str, name: str, species: str, initial_stock: int,
                            average_weight: float, start_date: str, **kwargs) -> 'Pond':
        """Build a pond from the average individual weight entered at stocking time"""
        return cls(
            id=id,
            name=name,
            species=species,
            initial_stock=initial_stock,
            initial_total_weight=average_weight * initial_stock,
            start_date=start_date,
            **kwargs
        )


@dataclass
class FeedLog:
    id: str
    pond_id: str
    date: str
    time: str  # HH:mm
    feed_type: str
    feed_given: float  # grams
    feed_leftover: Optional[float] = None


@dataclass
class Sampling:
    """Periodic measurement of a subset of the pond population"""
    id: str
    pond_id: str
    day: int
    date: str
    sampled_count: int
    sample_weights: List[float]  # grams
    sample_lengths: Optional[List[float]] = None  # cm
    notes: Optional[str] = None

    @property
    def average_weight(self) -> float:
        return mean(self.sample_weights)

    @property
    def has_lengths(self) -> bool:
        return bool(self.sample_lengths)

    @property
    def average_length(self) -> float:
        return mean(self.sample_lengths or [])


@dataclass
class Mortality:
    pond_id: str
    date: str
    dead_count: int
    dead_weight: float  # grams, total weight of the dead individuals


@dataclass
class WaterQuality:
    id: str
    pond_id: str
    timestamp: str
    ph: float
    temperature: float  # Celsius
    dissolved_oxygen: float  # mg/L
    salinity: Optional[float] = None  # ppt
    notes: Optional[str] = None


@dataclass
class PondVariables:
    """
    Derived scalar variables for a single pond.

    Total-biomass values (w0_total, wt_total, d, f) feed FCR and EPP; individual
    average weights (w0_ind, wt_ind) feed SGR, RGR and absolute weight gain.
    Recomputed on every read, never persisted.
    """
    n0: int
    nt: int
    w0_total: float
    wt_total: float
    w0_ind: float
    wt_ind: float
    d: float
    f: float
    t: int
    l0: float
    lt: float
    has_sampling: bool = False

    def to_dict(self) -> dict:
        return {
            'N0': self.n0,
            'Nt': self.nt,
            'W0': self.w0_total,
            'Wt': self.wt_total,
            'W0_ind': self.w0_ind,
            'Wt_ind': self.wt_ind,
            'D': self.d,
            'F': self.f,
            't': self.t,
            'L0': self.l0,
            'Lt': self.lt,
        }
