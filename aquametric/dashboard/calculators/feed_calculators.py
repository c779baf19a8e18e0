"""
Feed Calculators

This module handles feed-based metrics, all on total biomass values:
- Total feed consumption (TKP)
- Feed conversion ratio (FCR)
- Feed utilisation efficiency (EPP)

D (weight of dead fish) is added back to the final biomass so that feed eaten
by fish that later died still counts as converted biomass.
"""

from typing import Iterable
from .base_calculators import BaseCalculator, Number
import logging

logger = logging.getLogger(__name__)


class FeedCalculators(BaseCalculator):
    """Feed calculation functions for pond metrics"""
    
    @staticmethod
    def calculate_tkp(feed_amounts: Iterable[Number]) -> float:
        """
        Calculate total feed consumption TKP = Σ feed given.
        
        Args:
            feed_amounts: Feed amounts in grams, in any order
            
        Returns:
            float: Total grams fed, 0 for no logs
        """
        return float(sum(feed_amounts))
    
    @staticmethod
    def calculate_fcr(f: Number, w0: Number, wt: Number, d: Number) -> float:
        """
        Calculate feed conversion ratio FCR = F / ((Wt + D) - W0).
        
        Args:
            f: Total feed given (grams)
            w0: Initial total biomass (grams)
            wt: Current total biomass (grams)
            d: Total weight of dead fish (grams)
            
        Returns:
            float: Dimensionless ratio, 0 when the biomass gain is exactly 0
        """
        denominator = (wt + d) - w0
        return FeedCalculators.safe_divide(
            numerator=f,
            denominator=denominator,
            default=0.0
        )
    
    @staticmethod
    def calculate_epp(w0: Number, wt: Number, d: Number, f: Number) -> float:
        """
        Calculate feed efficiency EPP = (((Wt + D) - W0) / F) × 100.
        
        Returns:
            float: Biomass gained per feed given in percent, 0 when F is 0
        """
        return FeedCalculators.safe_percentage(
            numerator=(wt + d) - w0,
            denominator=f,
            default=0.0
        )
