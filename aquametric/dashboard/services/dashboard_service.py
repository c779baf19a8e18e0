# Pond Dashboard Service
#
# Ties the store, derivation, calculators and formula display builder together
# into the payloads served by the pond API.

import datetime
import logging
from typing import Any, Dict, List, Optional

from ..calculators import (
    calculate_sr, calculate_fcr, calculate_sgr, calculate_rgr, calculate_epp,
    calculate_absolute_weight, calculate_absolute_length,
    interpret_sr, interpret_fcr
)
from ..models import Pond, PondVariables
from .derivation_service import (
    derive_pond_variables, growth_series, length_series,
    weekly_feed_summary, daily_feed_summary
)
from .formula_display_service import FormatMode, build_pond_formulas, module_label
from .pond_store import PondStore

logger = logging.getLogger(__name__)


def compute_pond_metrics(variables: PondVariables) -> Dict[str, float]:
    """
    Apply every metric formula to a pond's derived variables.

    FCR/EPP take total biomass, SGR/RGR/absolute weight take individual averages.
    """
    return {
        'tkp': variables.f,
        'fcr': calculate_fcr(variables.f, variables.w0_total, variables.wt_total, variables.d),
        'sgr': calculate_sgr(variables.w0_ind, variables.wt_ind, variables.t),
        'rgr': calculate_rgr(variables.w0_ind, variables.wt_ind, variables.t),
        'epp': calculate_epp(variables.w0_total, variables.wt_total, variables.d, variables.f),
        'sr': calculate_sr(variables.n0, variables.nt),
        'current_stock': variables.nt,
        'absolute_weight': calculate_absolute_weight(variables.w0_ind, variables.wt_ind),
        'absolute_length': calculate_absolute_length(variables.l0, variables.lt),
    }


class PondDashboardService:
    """Service for per-pond metrics, formula explanations and reports"""

    def __init__(self, store: PondStore):
        self.store = store

    def _pond_summary(self, pond: Pond) -> Dict[str, Any]:
        return {
            'id': pond.id,
            'name': pond.name,
            'species': pond.species,
            'species_label': module_label(pond.species),
            'initial_stock': pond.initial_stock,
            'initial_total_weight': pond.initial_total_weight,
            'start_date': pond.start_date,
            'duration_days': pond.duration_days,
            'selected_modules': [m.value for m in pond.selected_modules],
        }

    def list_ponds(self) -> List[Dict[str, Any]]:
        return [self._pond_summary(pond) for pond in self.store.list_ponds()]

    def get_pond_variables(self, pond_id: str, today: Optional[datetime.date] = None) -> PondVariables:
        """Derive the current variables for a pond from the live collections"""
        pond = self.store.get_pond(pond_id)
        return derive_pond_variables(
            pond,
            self.store.feed_logs_for(pond_id),
            self.store.samplings_for(pond_id),
            self.store.mortalities_for(pond_id),
            today=today
        )

    def get_pond_metrics(self, pond_id: str, today: Optional[datetime.date] = None,
                         mode: FormatMode = FormatMode.TOTAL) -> Dict[str, Any]:
        """
        Get dashboard metrics for a pond

        Returns:
            Dict with pond summary, derived variables, metric values, SR/FCR
            interpretations and the formula explanations of the pond's selected modules
        """
        logger.info(f"📊 Computing metrics for pond {pond_id}")
        pond = self.store.get_pond(pond_id)
        variables = self.get_pond_variables(pond_id, today=today)
        metrics = compute_pond_metrics(variables)

        return {
            'pond': self._pond_summary(pond),
            'variables': variables.to_dict(),
            'metrics': metrics,
            'interpretations': {
                'sr': interpret_sr(metrics['sr']).to_dict(),
                'fcr': interpret_fcr(metrics['fcr']).to_dict(),
            },
            'formulas': [
                display.to_dict()
                for display in build_pond_formulas(variables, mode, pond.selected_modules or None)
            ],
        }

    def get_pond_formulas(self, pond_id: str, mode: FormatMode = FormatMode.TOTAL,
                          today: Optional[datetime.date] = None) -> List[Dict[str, Any]]:
        """All formula explanations for a pond, regardless of its selected modules"""
        variables = self.get_pond_variables(pond_id, today=today)
        return [display.to_dict() for display in build_pond_formulas(variables, mode)]

    def get_pond_report(self, pond_id: str, today: Optional[datetime.date] = None) -> Dict[str, Any]:
        """
        Get the full report for a pond: metrics, growth series and feed summaries
        """
        logger.info(f"📝 Building report for pond {pond_id}")
        pond = self.store.get_pond(pond_id)
        report = self.get_pond_metrics(pond_id, today=today)
        report['formulas'] = self.get_pond_formulas(pond_id, today=today)

        samplings = self.store.samplings_for(pond_id)
        feed_logs = self.store.feed_logs_for(pond_id)
        report['growth_series'] = [
            {'label': label, 'average_weight': value} for label, value in growth_series(pond, samplings)
        ]
        report['length_series'] = [
            {'label': label, 'average_length': value} for label, value in length_series(pond, samplings)
        ]
        report['weekly_feed'] = [
            {'week': week, 'total': total} for week, total in weekly_feed_summary(pond, feed_logs)
        ]
        report['daily_feed'] = daily_feed_summary(feed_logs)
        report['feeding_count'] = len(feed_logs)
        return report
