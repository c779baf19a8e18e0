"""
Growth Calculators

This module handles growth metrics on average individual values:
- Specific growth rate (SGR), exponential %/day
- Relative growth rate (RGR), linear %/day
- Absolute weight gain
- Absolute length gain
"""

from .base_calculators import BaseCalculator, Number
import logging

logger = logging.getLogger(__name__)


class GrowthCalculators(BaseCalculator):
    """Growth calculation functions for pond metrics"""
    
    @staticmethod
    def calculate_sgr(w0: Number, wt: Number, t: Number) -> float:
        """
        Calculate specific growth rate SGR = ((ln Wt - ln W0) / t) × 100.
        
        Only W0 = 0 and t = 0 are guarded. A zero or negative Wt (or a negative W0)
        yields -inf/nan, which is returned unchanged.
        
        Args:
            w0: Initial average individual weight (grams)
            wt: Current average individual weight (grams)
            t: Elapsed days
            
        Returns:
            float: Growth in percent per day
        """
        if w0 == 0 or t == 0:
            return 0.0
        log_gain = GrowthCalculators.natural_log(wt) - GrowthCalculators.natural_log(w0)
        return (log_gain / t) * 100
    
    @staticmethod
    def calculate_rgr(w0: Number, wt: Number, t: Number) -> float:
        """
        Calculate relative growth rate RGR = ((Wt - W0) / (W0 × t)) × 100.
        
        Returns:
            float: Growth in percent per day, 0 when W0 or t is 0
        """
        if w0 == 0 or t == 0:
            return 0.0
        return ((wt - w0) / (w0 * t)) * 100
    
    @staticmethod
    def calculate_absolute_weight(w0: Number, wt: Number) -> float:
        """Absolute individual weight gain Wt - W0 (grams)"""
        return GrowthCalculators.safe_subtract(wt, w0)
    
    @staticmethod
    def calculate_absolute_length(l0: Number, lt: Number) -> float:
        """Absolute length gain Lt - L0 (cm)"""
        return GrowthCalculators.safe_subtract(lt, l0)
