#!/usr/bin/env python3
"""
Test Suite for pond aggregate derivation

Covers the scalar variables derived from raw collections, the latest-sampling
policy, elapsed-day floor, data-integrity edge cases and the feed summaries.
"""

import datetime
import math
import unittest

from aquametric.dashboard.calculators import calculate_fcr, calculate_sr, calculate_sgr, calculate_rgr
from aquametric.dashboard.models import FeedLog, Mortality, Pond, Sampling
from aquametric.dashboard.services.derivation_service import (
    daily_feed_summary,
    derive_pond_variables,
    elapsed_days,
    growth_series,
    latest_sampling,
    length_series,
    period_from_time,
    period_of_day,
    sampling_day,
    weekly_feed_summary,
)

START = '2025-01-01'
TODAY = datetime.date(2025, 1, 31)


def make_pond(**overrides):
    values = dict(id='p1', name='Kolam 1', species='Tilapia', initial_stock=1000,
                  initial_total_weight=30000.0, start_date=START, duration_days=90,
                  initial_average_length=5.0)
    values.update(overrides)
    return Pond(**values)


def make_sampling(sampling_id, day, weights, lengths=None, pond_id='p1'):
    date = (datetime.date(2025, 1, 1) + datetime.timedelta(days=day)).isoformat()
    return Sampling(id=sampling_id, pond_id=pond_id, day=day, date=date,
                    sampled_count=len(weights), sample_weights=weights, sample_lengths=lengths)


def make_feed(log_id, date, amount, time='07:00', feed_type='Pelet', pond_id='p1'):
    return FeedLog(id=log_id, pond_id=pond_id, date=date, time=time,
                   feed_type=feed_type, feed_given=amount)


class TestDerivePondVariables(unittest.TestCase):
    """End-to-end scenario and derivation policies"""

    def setUp(self):
        self.pond = make_pond()
        self.feed_logs = [
            make_feed('f1', '2025-01-02', 30000),
            make_feed('f2', '2025-01-10', 25000),
            make_feed('f3', '2025-01-20', 25000),
            make_feed('other', '2025-01-20', 99999, pond_id='p2'),
        ]
        self.samplings = [
            make_sampling('s1', 10, [36, 38, 40]),
            make_sampling('s2', 28, [44, 45, 46], lengths=[9.0, 10.0, 11.0]),
            make_sampling('other', 40, [500], pond_id='p2'),
        ]
        self.mortalities = [
            Mortality(pond_id='p1', date='2025-01-15', dead_count=50, dead_weight=2000),
            Mortality(pond_id='p2', date='2025-01-15', dead_count=999, dead_weight=99999),
        ]

    def derive(self, **kwargs):
        return derive_pond_variables(self.pond, self.feed_logs, self.samplings, self.mortalities,
                                     today=kwargs.get('today', TODAY))

    def test_end_to_end_scenario(self):
        v = self.derive()
        self.assertEqual(v.n0, 1000)
        self.assertEqual(v.nt, 950)
        self.assertEqual(v.w0_total, 30000)
        self.assertAlmostEqual(v.w0_ind, 30.0)
        self.assertAlmostEqual(v.wt_ind, 45.0)
        self.assertAlmostEqual(v.wt_total, 42750.0)
        self.assertEqual(v.d, 2000)
        self.assertEqual(v.f, 80000)
        self.assertEqual(v.t, 30)
        self.assertTrue(v.has_sampling)

        self.assertAlmostEqual(calculate_fcr(v.f, v.w0_total, v.wt_total, v.d), 80000 / 14750)
        self.assertAlmostEqual(calculate_sr(v.n0, v.nt), 95.0)
        self.assertAlmostEqual(calculate_sgr(v.w0_ind, v.wt_ind, v.t),
                               ((math.log(45) - math.log(30)) / 30) * 100)
        self.assertAlmostEqual(calculate_rgr(v.w0_ind, v.wt_ind, v.t), (15 / (30 * 30)) * 100)

    def test_lengths_from_latest_sampling(self):
        v = self.derive()
        self.assertEqual(v.l0, 5.0)
        self.assertAlmostEqual(v.lt, 10.0)

    def test_no_sampling_falls_back_to_initial_average(self):
        v = derive_pond_variables(self.pond, [], [], [], today=TODAY)
        self.assertFalse(v.has_sampling)
        self.assertAlmostEqual(v.wt_ind, 30.0)
        self.assertAlmostEqual(v.wt_total, 30000.0)
        self.assertEqual(v.f, 0)
        self.assertEqual(v.d, 0)
        self.assertEqual(v.lt, 5.0)

    def test_length_falls_back_without_lengths(self):
        samplings = [make_sampling('s1', 10, [40])]
        v = derive_pond_variables(self.pond, [], samplings, [], today=TODAY)
        self.assertEqual(v.lt, 5.0)

        pond = make_pond(initial_average_length=None)
        v = derive_pond_variables(pond, [], samplings, [], today=TODAY)
        self.assertEqual(v.l0, 0)
        self.assertEqual(v.lt, 0)

    def test_empty_length_list_falls_back(self):
        samplings = [make_sampling('s1', 10, [40], lengths=[])]
        v = derive_pond_variables(self.pond, [], samplings, [], today=TODAY)
        self.assertEqual(v.lt, 5.0)

    def test_latest_sampling_is_max_day_not_insertion_order(self):
        samplings = [make_sampling('late', 20, [50]), make_sampling('early', 5, [35])]
        v = derive_pond_variables(self.pond, [], samplings, [], today=TODAY)
        self.assertAlmostEqual(v.wt_ind, 50.0)

    def test_latest_sampling_tie_last_inserted_wins(self):
        first = make_sampling('first', 20, [50])
        second = make_sampling('second', 20, [60])
        self.assertIs(latest_sampling([first, second]), second)
        self.assertIsNone(latest_sampling([]))

    def test_empty_sample_weights_do_not_crash(self):
        samplings = [make_sampling('s1', 10, [])]
        v = derive_pond_variables(self.pond, [], samplings, [], today=TODAY)
        self.assertTrue(math.isnan(v.wt_ind))
        self.assertTrue(math.isnan(v.wt_total))

    def test_mortality_over_stock_is_not_clamped(self):
        mortalities = [Mortality(pond_id='p1', date='2025-01-05', dead_count=1200, dead_weight=36000)]
        with self.assertLogs('aquametric.dashboard.services.derivation_service', level='WARNING'):
            v = derive_pond_variables(self.pond, [], [], mortalities, today=TODAY)
        self.assertEqual(v.nt, -200)
        self.assertAlmostEqual(calculate_sr(v.n0, v.nt), -20.0)
        self.assertAlmostEqual(v.wt_total, 30.0 * -200)

    def test_zero_initial_stock_gives_nan_individual_weight(self):
        pond = make_pond(initial_stock=0)
        v = derive_pond_variables(pond, [], [], [], today=TODAY)
        self.assertTrue(math.isnan(v.w0_ind))
        self.assertEqual(calculate_sr(v.n0, v.nt), 0)

    def test_pond_from_average_weight_stores_biomass(self):
        pond = Pond.from_average_weight(id='p3', name='Kolam 3', species='Catfish',
                                        initial_stock=1000, average_weight=30,
                                        start_date=START, initial_average_length=5.0)
        self.assertEqual(pond.initial_total_weight, 30000)
        v = derive_pond_variables(pond, [], [], [], today=TODAY)
        self.assertAlmostEqual(v.w0_ind, 30.0)

    def test_to_dict_uses_formula_symbols(self):
        data = self.derive().to_dict()
        self.assertEqual(set(data), {'N0', 'Nt', 'W0', 'Wt', 'W0_ind', 'Wt_ind', 'D', 'F', 't', 'L0', 'Lt'})
        self.assertEqual(data['Nt'], 950)


class TestElapsedDays(unittest.TestCase):

    def test_whole_days(self):
        self.assertEqual(elapsed_days('2025-01-01', datetime.date(2025, 1, 31)), 30)

    def test_same_day_floors_to_one(self):
        self.assertEqual(elapsed_days('2025-01-01', datetime.date(2025, 1, 1)), 1)

    def test_future_start_is_negative(self):
        self.assertEqual(elapsed_days('2025-01-10', datetime.date(2025, 1, 5)), -5)

    def test_defaults_to_today(self):
        self.assertGreater(elapsed_days('2000-01-01'), 0)

    def test_sampling_day_may_be_negative(self):
        pond = make_pond()
        self.assertEqual(sampling_day(pond, '2025-01-15'), 14)
        self.assertEqual(sampling_day(pond, '2024-12-30'), -2)


class TestSeries(unittest.TestCase):

    def test_growth_series_starts_with_stocking_weight(self):
        pond = make_pond()
        samplings = [make_sampling('b', 20, [50, 52]), make_sampling('a', 10, [40])]
        self.assertEqual(growth_series(pond, samplings),
                         [('Hari 0', 30.0), ('Hari 10', 40.0), ('Hari 20', 51.0)])

    def test_length_series_skips_samplings_without_lengths(self):
        pond = make_pond()
        samplings = [make_sampling('a', 10, [40]), make_sampling('b', 20, [50], lengths=[8.0, 9.0])]
        self.assertEqual(length_series(pond, samplings), [('Hari 0', 5.0), ('Hari 20', 8.5)])


class TestFeedSummaries(unittest.TestCase):

    def test_period_of_day(self):
        self.assertEqual(period_of_day(6), 'Pagi')
        self.assertEqual(period_of_day(10), 'Siang')
        self.assertEqual(period_of_day(15), 'Sore')
        self.assertEqual(period_of_day(19), 'Malam')

    def test_period_from_time(self):
        self.assertEqual(period_from_time('16:30'), 'Sore')
        self.assertEqual(period_from_time('Malam'), 'Malam')
        self.assertEqual(period_from_time(''), 'Pagi')
        self.assertEqual(period_from_time('pagi hari'), 'Pagi')
        self.assertEqual(period_from_time('xx:00'), 'Pagi')

    def test_weekly_feed_summary(self):
        pond = make_pond()
        logs = [
            make_feed('a', '2025-01-01', 100),
            make_feed('b', '2025-01-07', 200),
            make_feed('c', '2025-01-08', 300),
            make_feed('d', '2024-12-25', 50),
            make_feed('e', '2025-01-08', 999, pond_id='p2'),
        ]
        self.assertEqual(weekly_feed_summary(pond, logs), [(1, 300.0), (2, 350.0)])

    def test_weekly_feed_summary_empty(self):
        self.assertEqual(weekly_feed_summary(make_pond(), []), [])

    def test_daily_feed_summary(self):
        logs = [
            make_feed('a', '2025-01-01', 100, time='Malam', feed_type='Pelet A'),
            make_feed('b', '2025-01-02', 150, time='07:30', feed_type='Pelet B'),
            make_feed('c', '2025-01-02', 250, time='16:00', feed_type='Pelet A'),
        ]
        summary = daily_feed_summary(logs)
        self.assertEqual([entry['date'] for entry in summary], ['2025-01-02', '2025-01-01'])
        self.assertEqual(summary[0], {
            'date': '2025-01-02',
            'total': 400.0,
            'count': 2,
            'types': ['Pelet A', 'Pelet B'],
            'periods': ['Pagi', 'Sore'],
        })
        self.assertEqual(summary[1]['periods'], ['Malam'])

    def test_daily_feed_summary_empty(self):
        self.assertEqual(daily_feed_summary([]), [])


if __name__ == '__main__':
    unittest.main()
