"""
Base Calculator Utilities

This module provides the foundation for all pond metric calculations:
- BaseCalculator: zero-guarded arithmetic shared by every formula

Degenerate inputs (zero denominators) fall back to a default value instead of
raising. Results are NOT rounded here; rounding is a presentation concern handled
by the formula display builder.
"""

import math
from typing import Optional, Union
import logging

logger = logging.getLogger(__name__)

Number = Union[int, float]


class BaseCalculator:
    """
    Base class providing common calculation utilities.
    
    All calculator classes inherit from this to access shared
    mathematical operations and error handling.
    """
    
    @staticmethod
    def safe_divide(numerator: Number, denominator: Number,
                    default: float = 0.0, decimal_places: Optional[int] = None) -> float:
        """
        Perform safe division with default value for zero denominator.
        
        Args:
            numerator: The number to divide
            denominator: The number to divide by
            default: Value to return if denominator is 0
            decimal_places: Optional rounding, None keeps full precision
            
        Returns:
            Division result, or default if denominator is 0
        """
        try:
            if denominator == 0:
                return default
            result = float(numerator) / float(denominator)
            if decimal_places is not None:
                return round(result, decimal_places)
            return result
        except (TypeError, ValueError) as e:
            logger.warning(f"safe_divide error: {e}, returning default {default}")
            return default
    
    @staticmethod
    def safe_percentage(numerator: Number, denominator: Number,
                        default: float = 0.0, decimal_places: Optional[int] = None) -> float:
        """
        Calculate (numerator / denominator) × 100 with safe division.
        
        Args:
            numerator: The number to convert to percentage of denominator
            denominator: The total amount
            default: Value to return if denominator is 0
            decimal_places: Optional rounding, None keeps full precision
            
        Returns:
            Percentage, or default if denominator is 0
        """
        try:
            if denominator == 0:
                return default
            result = (float(numerator) / float(denominator)) * 100
            if decimal_places is not None:
                return round(result, decimal_places)
            return result
        except (TypeError, ValueError) as e:
            logger.warning(f"safe_percentage error: {e}, returning default {default}")
            return default
    
    @staticmethod
    def safe_subtract(minuend: Number, subtrahend: Number) -> float:
        """
        Safely subtract two values.
        
        Returns:
            minuend - subtrahend, or 0.0 if either value is not numeric
        """
        try:
            return float(minuend) - float(subtrahend)
        except (TypeError, ValueError) as e:
            logger.warning(f"safe_subtract error: {e}, returning 0.0")
            return 0.0
    
    @staticmethod
    def natural_log(value: Number) -> float:
        """
        Natural logarithm with IEEE semantics instead of exceptions.
        
        ln(0) is -inf and ln of a negative number is nan, so a bad weight
        surfaces as a non-finite metric rather than a crash.
        """
        value = float(value)
        if value > 0:
            return math.log(value)
        if value == 0:
            return -math.inf
        return math.nan
