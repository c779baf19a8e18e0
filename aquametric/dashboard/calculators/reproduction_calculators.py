"""
Reproduction Calculators

Broodstock and hatchery indices used by the standalone scientific calculator:
- Fecundity (gravimetric method)
- Gonadosomatic index (GSI)
- Fertilization rate (FR)
- Hatching rate (HR)
- Hepatosomatic index (IHS)
"""

from .base_calculators import BaseCalculator, Number
import logging

logger = logging.getLogger(__name__)


class ReproductionCalculators(BaseCalculator):
    """Reproduction and physiology index functions"""

    @staticmethod
    def calculate_fecundity(gonad_weight: Number, sample_gonad_weight: Number,
                            sample_egg_count: Number) -> float:
        """
        Estimate total eggs in the ovary F = (Bg / Bs) × Fs.

        Args:
            gonad_weight: Weight of the whole gonad, Bg (grams)
            sample_gonad_weight: Weight of the gonad sample, Bs (grams)
            sample_egg_count: Eggs counted in the sample, Fs

        Returns:
            float: Estimated egg count, 0 when Bs is 0
        """
        ratio = ReproductionCalculators.safe_divide(gonad_weight, sample_gonad_weight)
        return ratio * sample_egg_count

    @staticmethod
    def calculate_gsi(gonad_weight: Number, body_weight: Number) -> float:
        """Gonadosomatic index GSI = (Bg / Bt) × 100"""
        return ReproductionCalculators.safe_percentage(gonad_weight, body_weight)

    @staticmethod
    def calculate_fertilization_rate(fertilized_eggs: Number, total_eggs: Number) -> float:
        """Fertilization rate FR = (fertilized / total) × 100"""
        return ReproductionCalculators.safe_percentage(fertilized_eggs, total_eggs)

    @staticmethod
    def calculate_hatching_rate(hatched_eggs: Number, fertilized_eggs: Number) -> float:
        """Hatching rate HR = (hatched / fertilized) × 100"""
        return ReproductionCalculators.safe_percentage(hatched_eggs, fertilized_eggs)

    @staticmethod
    def calculate_hsi(liver_weight: Number, body_weight: Number) -> float:
        """Hepatosomatic index IHS = (liver weight / body weight) × 100"""
        return ReproductionCalculators.safe_percentage(liver_weight, body_weight)


# Index tag → (calculator, payload symbols in argument order, unit)
REPRODUCTION_INDICES = {
    'Fekunditas': (ReproductionCalculators.calculate_fecundity, ('Bg', 'Bs', 'Fs'), 'butir'),
    'GSI': (ReproductionCalculators.calculate_gsi, ('Bg', 'Bt'), '%'),
    'FR': (ReproductionCalculators.calculate_fertilization_rate, ('N_terbuahi', 'N_total'), '%'),
    'HR': (ReproductionCalculators.calculate_hatching_rate, ('N_menetas', 'N_terbuahi'), '%'),
    'IHS': (ReproductionCalculators.calculate_hsi, ('Bh', 'Bt'), '%'),
}
