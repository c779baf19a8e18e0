"""
Survival Calculators

This module handles population survival:
- Survival rate (SR)
"""

from .base_calculators import BaseCalculator, Number
import logging

logger = logging.getLogger(__name__)


class SurvivalCalculators(BaseCalculator):
    """Survival calculation functions for pond metrics"""
    
    @staticmethod
    def calculate_sr(n0: Number, nt: Number) -> float:
        """
        Calculate survival rate SR = (Nt / N0) × 100.
        
        Nt is not clamped: over-counted mortality gives a negative Nt and
        therefore a negative SR, which is passed through as-is.
        
        Args:
            n0: Initial stock (N0)
            nt: Live stock now (Nt)
            
        Returns:
            float: Survival rate in percent, 0 when N0 is 0
        """
        return SurvivalCalculators.safe_percentage(
            numerator=nt,
            denominator=n0,
            default=0.0
        )
