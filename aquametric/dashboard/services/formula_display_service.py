# Formula Display Service
#
# Builds the "formula → substitution → result" explanation shown beside every
# metric. Each metric has its own variable bag type carrying exactly the values
# its formula needs; the number format used in the substitution text is chosen
# explicitly with FormatMode.

import logging
import math
from dataclasses import dataclass, asdict, fields
from decimal import Decimal, ROUND_HALF_UP
from enum import Enum
from typing import Any, Callable, Dict, List, Optional, Union

from ..calculators import (
    calculate_sr, calculate_fcr, calculate_sgr, calculate_rgr, calculate_epp,
    calculate_absolute_weight, calculate_absolute_length
)
from ..exceptions import UnknownMetricError
from ..models import CalculationModule, PondVariables
from ...config import config

logger = logging.getLogger(__name__)

Number = Union[int, float]


class FormatMode(str, Enum):
    """Number format for substituted values: grouped total biomass or fixed 2-decimal individual"""
    TOTAL = 'total'
    INDIVIDUAL = 'individual'


# === VARIABLE BAGS ===
# Field names are lower-case versions of the formula symbols (F, W0, Wt, D, N0, Nt, t, L0, Lt)

@dataclass
class SRVariables:
    n0: Number
    nt: Number
    module = CalculationModule.SR


@dataclass
class FCRVariables:
    f: Number
    w0: Number
    wt: Number
    d: Number
    module = CalculationModule.FCR


@dataclass
class SGRVariables:
    w0: Number
    wt: Number
    t: Number
    module = CalculationModule.SGR


@dataclass
class RGRVariables:
    w0: Number
    wt: Number
    t: Number
    module = CalculationModule.RGR


@dataclass
class EPPVariables:
    w0: Number
    wt: Number
    d: Number
    f: Number
    module = CalculationModule.EPP


@dataclass
class TKPVariables:
    f: Number
    module = CalculationModule.TKP


@dataclass
class AbsoluteWeightVariables:
    w0: Number
    wt: Number
    module = CalculationModule.ABSOLUTE_WEIGHT


@dataclass
class AbsoluteLengthVariables:
    l0: Number
    lt: Number
    module = CalculationModule.ABSOLUTE_LENGTH


MetricVariables = Union[SRVariables, FCRVariables, SGRVariables, RGRVariables, EPPVariables,
                        TKPVariables, AbsoluteWeightVariables, AbsoluteLengthVariables]

VARIABLE_TYPES = {
    CalculationModule.SR: SRVariables,
    CalculationModule.FCR: FCRVariables,
    CalculationModule.SGR: SGRVariables,
    CalculationModule.RGR: RGRVariables,
    CalculationModule.EPP: EPPVariables,
    CalculationModule.TKP: TKPVariables,
    CalculationModule.ABSOLUTE_WEIGHT: AbsoluteWeightVariables,
    CalculationModule.ABSOLUTE_LENGTH: AbsoluteLengthVariables,
}

# Symbol used in request payloads for each variable bag field
SYMBOLS = {'f': 'F', 'w0': 'W0', 'wt': 'Wt', 'd': 'D', 'n0': 'N0', 'nt': 'Nt',
           't': 't', 'l0': 'L0', 'lt': 'Lt'}


@dataclass
class FormulaDisplay:
    """Formula explanation for one metric, ready for line or fraction rendering"""
    name: str
    formula: str
    calculation: str
    is_fraction: bool
    result: str
    unit: str
    numerator_formula: Optional[str] = None
    denominator_formula: Optional[str] = None
    numerator_calc: Optional[str] = None
    denominator_calc: Optional[str] = None
    suffix: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


# === NUMBER FORMATTING ===

def format_total(value: Number) -> str:
    """
    Total-biomass format: thousands grouping, at most 2 decimals, trailing zeros dropped.

    With the default separators 33750 → "33.750" and 1234.5 → "1.234,5".
    Zero (and nan) render as "0".
    """
    if not value or math.isnan(value):
        return '0'
    if math.isinf(value):
        return '-∞' if value < 0 else '∞'

    quantized = Decimal(str(value)).quantize(Decimal('0.01'), rounding=ROUND_HALF_UP)
    if quantized == 0:
        return '0'
    sign = '-' if quantized < 0 else ''
    integer_part, _, fraction = f"{abs(quantized):f}".partition('.')
    fraction = fraction.rstrip('0')

    grouped = f"{int(integer_part):,}".replace(',', config.NUMBER_GROUP_SEPARATOR)
    if fraction:
        return f"{sign}{grouped}{config.NUMBER_DECIMAL_SEPARATOR}{fraction}"
    return f"{sign}{grouped}"


def _fixed(value: float, decimal_places: int) -> str:
    """Fixed decimals with ties rounded away from zero, on the exact binary value"""
    if not math.isfinite(value):
        return f"{value:.{decimal_places}f}"
    exponent = Decimal(1).scaleb(-decimal_places)
    return f"{Decimal(value).quantize(exponent, rounding=ROUND_HALF_UP):f}"


def format_individual(value: Number) -> str:
    """Individual format: fixed 2 decimals (30 → "30.00"); zero and nan render as "0.00"."""
    if not value or math.isnan(value):
        return '0.00'
    return _fixed(float(value), 2)


def format_plain(value: Number) -> str:
    """Raw value as typed: integral floats lose their trailing .0"""
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


def format_result(value: float, decimal_places: int) -> str:
    return _fixed(float(value), decimal_places)


def _formatter(mode: FormatMode) -> Callable[[Number], str]:
    return format_total if mode == FormatMode.TOTAL else format_individual


# === BUILDERS ===

def _build_tkp(v: TKPVariables, mode: FormatMode) -> FormulaDisplay:
    return FormulaDisplay(
        name='Total Konsumsi Pakan (TKP)',
        formula='TKP = Σ Pakan yang diberikan',
        calculation=f"TKP = {format_total(v.f)}",
        is_fraction=False,
        result=format_result(float(v.f), 2),
        unit='gram'
    )


def _build_sr(v: SRVariables, mode: FormatMode) -> FormulaDisplay:
    nt, n0 = format_plain(v.nt), format_plain(v.n0)
    return FormulaDisplay(
        name='Survival Rate (SR)',
        formula='SR = (Nt / N0) × 100%',
        calculation=f"SR = ({nt} / {n0}) × 100%",
        is_fraction=True,
        numerator_formula='Nt',
        denominator_formula='N0',
        numerator_calc=nt,
        denominator_calc=n0,
        suffix='× 100%',
        result=format_result(calculate_sr(v.n0, v.nt), 2),
        unit='%'
    )


def _build_fcr(v: FCRVariables, mode: FormatMode) -> FormulaDisplay:
    fmt = _formatter(mode)
    f, wt, d, w0 = fmt(v.f), fmt(v.wt), fmt(v.d), fmt(v.w0)
    return FormulaDisplay(
        name='Feed Conversion Ratio (FCR)',
        formula='FCR = F / ((Wt + D) - W0)',
        calculation=f"FCR = {f} / (({wt} + {d}) - {w0})",
        is_fraction=True,
        numerator_formula='F',
        denominator_formula='(Wt + D) - W0',
        numerator_calc=f,
        denominator_calc=f"({wt} + {d}) - {w0}",
        suffix='',
        result=format_result(calculate_fcr(v.f, v.w0, v.wt, v.d), 3),
        unit=''
    )


def _build_sgr(v: SGRVariables, mode: FormatMode) -> FormulaDisplay:
    wt, w0, t = format_individual(v.wt), format_individual(v.w0), format_plain(v.t)
    return FormulaDisplay(
        name='Specific Growth Rate (SGR)',
        formula='SGR = ((ln Wt - ln W0) / t) × 100%',
        calculation=f"SGR = ((ln {wt} - ln {w0}) / {t}) × 100%",
        is_fraction=True,
        numerator_formula='ln Wt - ln W0',
        denominator_formula='t',
        numerator_calc=f"ln({wt}) - ln({w0})",
        denominator_calc=t,
        suffix='× 100%',
        result=format_result(calculate_sgr(v.w0, v.wt, v.t), 3),
        unit='%/hari'
    )


def _build_rgr(v: RGRVariables, mode: FormatMode) -> FormulaDisplay:
    wt, w0, t = format_individual(v.wt), format_individual(v.w0), format_plain(v.t)
    return FormulaDisplay(
        name='Relative Growth Rate (RGR)',
        formula='RGR = ((Wt - W0) / (W0 × t)) × 100%',
        calculation=f"RGR = (({wt} - {w0}) / ({w0} × {t})) × 100%",
        is_fraction=True,
        numerator_formula='Wt - W0',
        denominator_formula='W0 × t',
        numerator_calc=f"{wt} - {w0}",
        denominator_calc=f"{w0} × {t}",
        suffix='× 100%',
        result=format_result(calculate_rgr(v.w0, v.wt, v.t), 3),
        unit='%/hari'
    )


def _build_epp(v: EPPVariables, mode: FormatMode) -> FormulaDisplay:
    fmt = _formatter(mode)
    wt, d, w0, f = fmt(v.wt), fmt(v.d), fmt(v.w0), fmt(v.f)
    return FormulaDisplay(
        name='Efisiensi Pemanfaatan Pakan (EPP)',
        formula='EPP = (((Wt + D) - W0) / F) × 100%',
        calculation=f"EPP = ((({wt} + {d}) - {w0}) / {f}) × 100%",
        is_fraction=True,
        numerator_formula='(Wt + D) - W0',
        denominator_formula='F',
        numerator_calc=f"({wt} + {d}) - {w0}",
        denominator_calc=f,
        suffix='× 100%',
        result=format_result(calculate_epp(v.w0, v.wt, v.d, v.f), 2),
        unit='%'
    )


def _build_absolute_weight(v: AbsoluteWeightVariables, mode: FormatMode) -> FormulaDisplay:
    return FormulaDisplay(
        name='Bobot Mutlak',
        formula='Bobot Mutlak = Wt - W0',
        calculation=f"Bobot Mutlak = {format_individual(v.wt)} - {format_individual(v.w0)}",
        is_fraction=False,
        result=format_result(calculate_absolute_weight(v.w0, v.wt), 2),
        unit='gram'
    )


def _build_absolute_length(v: AbsoluteLengthVariables, mode: FormatMode) -> FormulaDisplay:
    return FormulaDisplay(
        name='Panjang Mutlak',
        formula='Panjang Mutlak = Lt - L0',
        calculation=f"Panjang Mutlak = {format_plain(v.lt)} - {format_plain(v.l0)}",
        is_fraction=False,
        result=format_result(calculate_absolute_length(v.l0, v.lt), 2),
        unit='cm'
    )


BUILDERS = {
    SRVariables: _build_sr,
    FCRVariables: _build_fcr,
    SGRVariables: _build_sgr,
    RGRVariables: _build_rgr,
    EPPVariables: _build_epp,
    TKPVariables: _build_tkp,
    AbsoluteWeightVariables: _build_absolute_weight,
    AbsoluteLengthVariables: _build_absolute_length,
}


def build_formula_display(variables: MetricVariables,
                          mode: FormatMode = FormatMode.TOTAL) -> FormulaDisplay:
    """
    Build the formula explanation for one metric.

    Args:
        variables: Metric-specific variable bag, e.g. FCRVariables(f, w0, wt, d)
        mode: Substitution number format; only FCR and EPP honour it, SGR/RGR/absolute
              weight always use individual format and TKP always uses total format

    Returns:
        FormulaDisplay with the result rounded to the metric's fixed precision

    Raises:
        UnknownMetricError: variables is not one of the metric variable bags
    """
    builder = BUILDERS.get(type(variables))
    if builder is None:
        raise UnknownMetricError(f"No formula display for {type(variables).__name__}")
    return builder(variables, FormatMode(mode))


def variables_from_values(module: Union[str, CalculationModule],
                          values: Dict[str, Any]) -> MetricVariables:
    """
    Build a variable bag from a metric tag and a symbol-keyed dict, e.g. {'F': 80000, 'W0': ...}.

    Raises:
        UnknownMetricError: unknown metric tag
        ValueError: a required symbol is missing or not numeric
    """
    try:
        module = CalculationModule(module)
    except ValueError:
        raise UnknownMetricError(f"Unknown metric type '{module}'")

    variables_type = VARIABLE_TYPES[module]
    kwargs = {}
    for field_ in fields(variables_type):
        symbol = SYMBOLS[field_.name]
        if symbol not in values:
            raise ValueError(f"Missing value '{symbol}' for {module.value}")
        try:
            kwargs[field_.name] = float(values[symbol])
        except (TypeError, ValueError):
            raise ValueError(f"Value '{symbol}' for {module.value} must be numeric")
    return variables_type(**kwargs)


def build_pond_formulas(variables: PondVariables,
                        mode: FormatMode = FormatMode.TOTAL,
                        modules: Optional[List[CalculationModule]] = None) -> List[FormulaDisplay]:
    """
    Build the formula list for a pond from its derived variables.

    FCR and EPP are fed total biomass, SGR/RGR/absolute weight individual averages.
    Absolute length is only included once a length has been measured (Lt > 0).

    Args:
        variables: Derived pond variables
        mode: Substitution format for FCR and EPP
        modules: Restrict to these modules, None for all
    """
    bags: List[MetricVariables] = [
        TKPVariables(f=variables.f),
        SRVariables(n0=variables.n0, nt=variables.nt),
        FCRVariables(f=variables.f, w0=variables.w0_total, wt=variables.wt_total, d=variables.d),
        SGRVariables(w0=variables.w0_ind, wt=variables.wt_ind, t=variables.t),
        RGRVariables(w0=variables.w0_ind, wt=variables.wt_ind, t=variables.t),
        EPPVariables(w0=variables.w0_total, wt=variables.wt_total, d=variables.d, f=variables.f),
        AbsoluteWeightVariables(w0=variables.w0_ind, wt=variables.wt_ind),
    ]
    if variables.lt > 0:
        bags.append(AbsoluteLengthVariables(l0=variables.l0, lt=variables.lt))

    if modules:
        bags = [bag for bag in bags if bag.module in modules]

    return [build_formula_display(bag, mode) for bag in bags]


MODULE_LABELS = {
    'AbsoluteWeight': 'Bobot Mutlak',
    'AbsoluteLength': 'Panjang Mutlak',
    'SR': 'Survival Rate',
    'FCR': 'Feed Conversion Ratio',
    'SGR': 'Specific Growth Rate',
    'RGR': 'Relative Growth Rate',
    'EPP': 'Efisiensi Pakan',
    'TKP': 'Total Konsumsi Pakan',
    'Catfish': 'Lele',
    'Tilapia': 'Nila',
    'Shrimp': 'Udang',
    'Other': 'Lainnya'
}


def module_label(key: Union[str, CalculationModule]) -> str:
    """Indonesian display label for a metric module or species key, falling back to the key"""
    if isinstance(key, CalculationModule):
        key = key.value
    return MODULE_LABELS.get(key, key)
