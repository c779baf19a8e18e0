#!/usr/bin/env python3
"""
Test Suite for the pond metric calculators

Test Categories:
1. Metric formulas and their zero guards
2. Non-finite propagation for bad weights
3. SR / FCR interpretation tiers
4. Reproduction indices
"""

import math
import unittest

from aquametric.dashboard.calculators import (
    BaseCalculator,
    ReproductionCalculators,
    calculate_sr,
    calculate_fcr,
    calculate_sgr,
    calculate_rgr,
    calculate_epp,
    calculate_tkp,
    calculate_absolute_weight,
    calculate_absolute_length,
    interpret_sr,
    interpret_fcr,
)


class TestSurvivalRate(unittest.TestCase):
    """Survival rate SR = Nt / N0 × 100"""

    def test_basic_ratio(self):
        self.assertAlmostEqual(calculate_sr(1000, 950), 95.0)
        self.assertAlmostEqual(calculate_sr(200, 50), 25.0)

    def test_no_survivors(self):
        self.assertEqual(calculate_sr(1000, 0), 0)

    def test_zero_initial_stock_returns_zero(self):
        self.assertEqual(calculate_sr(0, 0), 0)
        self.assertEqual(calculate_sr(0, 500), 0)
        self.assertEqual(calculate_sr(0, -10), 0)

    def test_negative_stock_is_not_clamped(self):
        """Mortality over-count gives a negative SR instead of hiding the inconsistency"""
        self.assertAlmostEqual(calculate_sr(1000, -200), -20.0)


class TestFeedMetrics(unittest.TestCase):
    """TKP, FCR and EPP"""

    def test_tkp(self):
        self.assertEqual(calculate_tkp([]), 0)
        self.assertEqual(calculate_tkp([100, 150, 250]), 500)
        self.assertAlmostEqual(calculate_tkp(x for x in [0.5, 0.25]), 0.75)

    def test_fcr_uses_dead_weight(self):
        fcr = calculate_fcr(80000, 30000, 42750, 2000)
        self.assertAlmostEqual(fcr, 80000 / 14750)
        self.assertAlmostEqual(fcr, 5.424, places=3)

    def test_fcr_zero_gain_returns_zero(self):
        self.assertEqual(calculate_fcr(5000, 1000, 1000, 0), 0)
        self.assertEqual(calculate_fcr(5000, 1000, 800, 200), 0)
        self.assertEqual(calculate_fcr(0, 0, 0, 0), 0)

    def test_fcr_negative_gain_passes_through(self):
        self.assertAlmostEqual(calculate_fcr(100, 1000, 900, 0), -1.0)

    def test_epp(self):
        self.assertAlmostEqual(calculate_epp(30000, 42750, 2000, 80000), 18.4375)

    def test_epp_zero_feed_returns_zero(self):
        self.assertEqual(calculate_epp(30000, 42750, 2000, 0), 0)


class TestGrowthMetrics(unittest.TestCase):
    """SGR, RGR and absolute gains"""

    def test_sgr(self):
        expected = ((math.log(45) - math.log(30)) / 30) * 100
        self.assertAlmostEqual(calculate_sgr(30, 45, 30), expected)

    def test_sgr_zero_guards(self):
        self.assertEqual(calculate_sgr(0, 45, 30), 0)
        self.assertEqual(calculate_sgr(30, 45, 0), 0)

    def test_sgr_no_growth(self):
        for t in (1, 7, 30, 365):
            self.assertEqual(calculate_sgr(12.5, 12.5, t), 0)

    def test_sgr_non_positive_weight_is_not_masked(self):
        self.assertEqual(calculate_sgr(10, 0, 5), -math.inf)
        self.assertTrue(math.isnan(calculate_sgr(10, -1, 5)))
        self.assertTrue(math.isnan(calculate_sgr(-10, 5, 5)))

    def test_rgr(self):
        self.assertEqual(calculate_rgr(10, 20, 1), 100.0)
        self.assertAlmostEqual(calculate_rgr(30, 45, 30), (15 / 900) * 100)

    def test_rgr_zero_guards(self):
        self.assertEqual(calculate_rgr(0, 20, 1), 0)
        self.assertEqual(calculate_rgr(10, 20, 0), 0)

    def test_absolute_gains(self):
        self.assertEqual(calculate_absolute_weight(10, 25), 15)
        self.assertEqual(calculate_absolute_length(5, 8), 3)
        self.assertEqual(calculate_absolute_weight(25, 10), -15)


class TestBaseCalculator(unittest.TestCase):

    def test_safe_divide_default(self):
        self.assertEqual(BaseCalculator.safe_divide(10, 0), 0.0)
        self.assertEqual(BaseCalculator.safe_divide(10, 0, default=-1), -1)
        self.assertTrue(math.isnan(BaseCalculator.safe_divide(10, 0, default=math.nan)))

    def test_safe_divide_rounding_is_optional(self):
        self.assertAlmostEqual(BaseCalculator.safe_divide(1, 3), 1 / 3)
        self.assertEqual(BaseCalculator.safe_divide(1, 3, decimal_places=2), 0.33)

    def test_safe_divide_non_numeric(self):
        self.assertEqual(BaseCalculator.safe_divide('abc', 2), 0.0)

    def test_natural_log(self):
        self.assertAlmostEqual(BaseCalculator.natural_log(math.e), 1.0)
        self.assertEqual(BaseCalculator.natural_log(0), -math.inf)
        self.assertTrue(math.isnan(BaseCalculator.natural_log(-3)))


class TestInterpretation(unittest.TestCase):
    """Top-down tier evaluation, first match wins"""

    def test_sr_tiers(self):
        self.assertEqual(interpret_sr(95).status, 'Sangat Baik')
        self.assertEqual(interpret_sr(90).status, 'Sangat Baik')
        self.assertEqual(interpret_sr(89.999).status, 'Baik')
        self.assertEqual(interpret_sr(80).status, 'Baik')
        self.assertEqual(interpret_sr(75).status, 'Cukup')
        self.assertEqual(interpret_sr(70).status, 'Cukup')
        self.assertEqual(interpret_sr(69.999).status, 'Kurang')
        self.assertEqual(interpret_sr(-20).status, 'Kurang')

    def test_sr_tier_identity(self):
        self.assertEqual(interpret_sr(95).tier, 'excellent')
        self.assertEqual(interpret_sr(85).tier, 'good')
        self.assertEqual(interpret_sr(72).tier, 'fair')
        self.assertEqual(interpret_sr(10).tier, 'poor')

    def test_fcr_tiers(self):
        self.assertEqual(interpret_fcr(1.29).status, 'Sangat Baik')
        self.assertEqual(interpret_fcr(1.3).status, 'Standar')
        self.assertEqual(interpret_fcr(1.5).status, 'Standar')
        self.assertEqual(interpret_fcr(1.51).status, 'Tinggi (Cek Pakan)')
        self.assertEqual(interpret_fcr(1.51).tier, 'high')

    def test_fcr_zero_fallback_reads_as_excellent(self):
        self.assertEqual(interpret_fcr(0).tier, 'excellent')

    def test_nan_falls_to_last_tier(self):
        self.assertEqual(interpret_sr(math.nan).tier, 'poor')
        self.assertEqual(interpret_fcr(math.nan).tier, 'high')

    def test_to_dict(self):
        self.assertEqual(interpret_fcr(1.4).to_dict(),
                         {'status': 'Standar', 'tier': 'standard', 'color': 'yellow'})


class TestReproductionCalculators(unittest.TestCase):

    def test_fecundity(self):
        self.assertAlmostEqual(ReproductionCalculators.calculate_fecundity(50, 2, 400), 10000)
        self.assertEqual(ReproductionCalculators.calculate_fecundity(50, 0, 400), 0)

    def test_percentage_indices(self):
        self.assertAlmostEqual(ReproductionCalculators.calculate_gsi(15, 300), 5.0)
        self.assertAlmostEqual(ReproductionCalculators.calculate_fertilization_rate(900, 1000), 90.0)
        self.assertAlmostEqual(ReproductionCalculators.calculate_hatching_rate(720, 900), 80.0)
        self.assertAlmostEqual(ReproductionCalculators.calculate_hsi(3, 300), 1.0)

    def test_percentage_indices_zero_guard(self):
        self.assertEqual(ReproductionCalculators.calculate_gsi(15, 0), 0)
        self.assertEqual(ReproductionCalculators.calculate_fertilization_rate(900, 0), 0)
        self.assertEqual(ReproductionCalculators.calculate_hatching_rate(720, 0), 0)
        self.assertEqual(ReproductionCalculators.calculate_hsi(3, 0), 0)


if __name__ == '__main__':
    unittest.main()
