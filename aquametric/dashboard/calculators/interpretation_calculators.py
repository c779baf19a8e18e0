"""
Interpretation Calculators

Classify SR and FCR values into qualitative tiers shown next to the metric.
Thresholds are evaluated top-down and the first match wins.
"""

from dataclasses import dataclass, asdict
from typing import Dict


@dataclass(frozen=True)
class Interpretation:
    """Qualitative status label, stable tier identifier and a colour hint for the UI"""
    status: str
    tier: str
    color: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


SR_EXCELLENT = Interpretation('Sangat Baik', 'excellent', 'green')
SR_GOOD = Interpretation('Baik', 'good', 'blue')
SR_FAIR = Interpretation('Cukup', 'fair', 'yellow')
SR_POOR = Interpretation('Kurang', 'poor', 'red')

FCR_EXCELLENT = Interpretation('Sangat Baik', 'excellent', 'green')
FCR_STANDARD = Interpretation('Standar', 'standard', 'yellow')
FCR_HIGH = Interpretation('Tinggi (Cek Pakan)', 'high', 'orange')


class InterpretationCalculators:
    """Interpretation rules for survival rate and feed conversion ratio"""

    @staticmethod
    def interpret_sr(sr: float) -> Interpretation:
        """
        Classify survival rate (percent).

        >= 90 Sangat Baik, >= 80 Baik, >= 70 Cukup, otherwise Kurang.
        """
        if sr >= 90:
            return SR_EXCELLENT
        if sr >= 80:
            return SR_GOOD
        if sr >= 70:
            return SR_FAIR
        return SR_POOR

    @staticmethod
    def interpret_fcr(fcr: float) -> Interpretation:
        """
        Classify feed conversion ratio.

        < 1.3 Sangat Baik, <= 1.5 Standar, otherwise Tinggi (Cek Pakan).
        """
        if fcr < 1.3:
            return FCR_EXCELLENT
        if fcr <= 1.5:
            return FCR_STANDARD
        return FCR_HIGH
