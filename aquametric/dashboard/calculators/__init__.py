"""
Pond Metric Calculators Module

This module contains all calculation logic for pond performance metrics, organized into
logical categories. Each calculator is standalone and works on already-derived scalars.

=== CALCULATOR ORGANIZATION ===

📊 BASE_CALCULATORS.PY
- BaseCalculator: Common utilities (safe_divide, safe_percentage, natural_log)

🐟 SURVIVAL_CALCULATORS.PY
- calculate_sr: (Nt / N0) × 100

🍚 FEED_CALCULATORS.PY
- calculate_tkp: Σ feed given
- calculate_fcr: F / ((Wt + D) - W0)       (total biomass)
- calculate_epp: (((Wt + D) - W0) / F) × 100 (total biomass)

📈 GROWTH_CALCULATORS.PY
- calculate_sgr: ((ln Wt - ln W0) / t) × 100 (individual weight)
- calculate_rgr: ((Wt - W0) / (W0 × t)) × 100 (individual weight)
- calculate_absolute_weight: Wt - W0
- calculate_absolute_length: Lt - L0

🥚 REPRODUCTION_CALCULATORS.PY
- fecundity, GSI, fertilization rate, hatching rate, IHS

🎯 INTERPRETATION_CALCULATORS.PY
- interpret_sr / interpret_fcr: qualitative tiers

=== ZERO GUARDS ===

SR → 0 if N0 = 0; FCR → 0 if (Wt + D) - W0 = 0; SGR/RGR → 0 if W0 = 0 or t = 0;
EPP → 0 if F = 0. These are deliberate "undefined → 0" fallbacks. Non-finite
values from ln of a non-positive weight are propagated.

=== USAGE ===

from aquametric.dashboard.calculators import calculate_fcr, interpret_fcr

fcr = calculate_fcr(F, W0_total, Wt_total, D)
status = interpret_fcr(fcr).status
"""

# Import all calculator classes for easy access
from .base_calculators import BaseCalculator
from .survival_calculators import SurvivalCalculators
from .feed_calculators import FeedCalculators
from .growth_calculators import GrowthCalculators
from .reproduction_calculators import ReproductionCalculators, REPRODUCTION_INDICES
from .interpretation_calculators import Interpretation, InterpretationCalculators

# Plain-function API, one function per metric
calculate_sr = SurvivalCalculators.calculate_sr
calculate_fcr = FeedCalculators.calculate_fcr
calculate_epp = FeedCalculators.calculate_epp
calculate_tkp = FeedCalculators.calculate_tkp
calculate_sgr = GrowthCalculators.calculate_sgr
calculate_rgr = GrowthCalculators.calculate_rgr
calculate_absolute_weight = GrowthCalculators.calculate_absolute_weight
calculate_absolute_length = GrowthCalculators.calculate_absolute_length
interpret_sr = InterpretationCalculators.interpret_sr
interpret_fcr = InterpretationCalculators.interpret_fcr

__all__ = [
    'BaseCalculator',
    'SurvivalCalculators',
    'FeedCalculators',
    'GrowthCalculators',
    'ReproductionCalculators',
    'REPRODUCTION_INDICES',
    'Interpretation',
    'InterpretationCalculators',
    'calculate_sr',
    'calculate_fcr',
    'calculate_epp',
    'calculate_tkp',
    'calculate_sgr',
    'calculate_rgr',
    'calculate_absolute_weight',
    'calculate_absolute_length',
    'interpret_sr',
    'interpret_fcr'
]
