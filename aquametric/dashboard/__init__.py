# Dashboard Module
# 
# Pond performance metrics: calculators for SR, FCR, SGR, RGR, EPP, TKP and growth,
# the derivation of their inputs from recorded pond data, and the formula
# explanations shown beside each metric.

from .api.pond_routes import pond_bp
from .services.dashboard_service import PondDashboardService
from .services.pond_store import PondStore

__all__ = [
    'pond_bp',
    'PondDashboardService',
    'PondStore'
]
