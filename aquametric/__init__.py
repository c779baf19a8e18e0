"""
AquaMetric - aquaculture pond monitoring metrics.
"""

__version__ = '0.1.0'
