# Dashboard Services Module
# 
# Contains derivation, formula display and pond store services

from .dashboard_service import PondDashboardService, compute_pond_metrics
from .derivation_service import derive_pond_variables
from .formula_display_service import FormatMode, FormulaDisplay, build_formula_display
from .pond_store import AppState, PondStore, load_state

__all__ = [
    'PondDashboardService',
    'compute_pond_metrics',
    'derive_pond_variables',
    'FormatMode',
    'FormulaDisplay',
    'build_formula_display',
    'AppState',
    'PondStore',
    'load_state'
]
