# -*- coding: utf-8 -*-

from __future__ import annotations

import unittest
from datetime import datetime, timedelta, timezone

from alibeby.records.models import FeedingEvent, FeedingType, GrowthRecord
from alibeby.stats.aggregation import average_per_day, daily_feeding_stats, growth_evolution, type_distribution
from alibeby.stats.models import GrowthField

DAY = datetime(2024, 6, 3, 7, 0, tzinfo=timezone.utc)


def _feeding(event_id: str, feeding_type: FeedingType, at: datetime, amount_ml: float | None = None) -> FeedingEvent:
    return FeedingEvent(id=event_id, type=feeding_type, amount_ml=amount_ml, occurred_at=at)


class TestDailyFeedingStats(unittest.TestCase):
    def test_three_formula_feedings_same_day(self) -> None:
        events = [
            _feeding("1", FeedingType.formula, DAY, 60),
            _feeding("2", FeedingType.formula, DAY + timedelta(hours=4), 90),
            _feeding("3", FeedingType.formula, DAY + timedelta(hours=9), 120),
        ]
        stats = daily_feeding_stats(events)
        self.assertEqual(len(stats), 1)
        self.assertEqual(stats[0].date, "2024-06-03")
        self.assertEqual(stats[0].count, 3)
        self.assertEqual(stats[0].total_formula_ml, 270)
        self.assertEqual(average_per_day(270, 1), 270)

    def test_counts_every_type_but_sums_only_formula(self) -> None:
        events = [
            _feeding("a", FeedingType.breast_milk, DAY + timedelta(days=1)),
            _feeding("b", FeedingType.solid_food, DAY + timedelta(days=1, hours=2), 200),
            _feeding("c", FeedingType.formula, DAY + timedelta(days=1, hours=5), 100),
            _feeding("d", FeedingType.breast_milk, DAY),
        ]
        stats = daily_feeding_stats(events)
        self.assertEqual([s.date for s in stats], ["2024-06-03", "2024-06-04"])
        self.assertEqual([s.count for s in stats], [1, 3])
        self.assertEqual([s.total_formula_ml for s in stats], [0.0, 100.0])

    def test_day_follows_timestamp_offset(self) -> None:
        local = timezone(timedelta(hours=-3))
        late_evening = datetime(2024, 6, 3, 23, 30, tzinfo=local)  # 02:30 UTC on the 4th
        stats = daily_feeding_stats([_feeding("x", FeedingType.breast_milk, late_evening)])
        self.assertEqual(stats[0].date, "2024-06-03")

        stats_utc = daily_feeding_stats([_feeding("x", FeedingType.breast_milk, late_evening)], tz=timezone.utc)
        self.assertEqual(stats_utc[0].date, "2024-06-04")

    def test_empty(self) -> None:
        self.assertEqual(daily_feeding_stats([]), [])


class TestTypeDistribution(unittest.TestCase):
    def test_counts_and_formula_total(self) -> None:
        events = [
            _feeding("1", FeedingType.breast_milk, DAY),
            _feeding("2", FeedingType.breast_milk, DAY + timedelta(hours=3)),
            _feeding("3", FeedingType.formula, DAY + timedelta(hours=6), 100),
        ]
        dist = type_distribution(events)
        self.assertEqual(
            dist.counts,
            {FeedingType.breast_milk: 2, FeedingType.formula: 1, FeedingType.solid_food: 0},
        )
        self.assertEqual(dist.total_formula_ml, 100)

        items = dist.chart_items()
        self.assertEqual(len(items), 2)
        self.assertEqual([i.label for i in items], ["Leite Materno", "Fórmula"])
        self.assertEqual([i.value for i in items], [2, 1])

    def test_empty_has_all_types_at_zero(self) -> None:
        dist = type_distribution([])
        self.assertEqual(set(dist.counts), set(FeedingType))
        self.assertTrue(all(v == 0 for v in dist.counts.values()))
        self.assertEqual(dist.chart_items(), [])


class TestGrowthEvolution(unittest.TestCase):
    def setUp(self) -> None:
        self.records = [
            GrowthRecord(id="2", name="Ana", age_months=4, weight_kg=6.1, recorded_at=DAY + timedelta(days=30)),
            GrowthRecord(id="1", name="Ana", age_months=3, weight_kg=5.2, height_cm=58, recorded_at=DAY),
            GrowthRecord(
                id="3", name="Ana", age_months=5, weight_kg=6.8, height_cm=64.5, recorded_at=DAY + timedelta(days=60)
            ),
        ]

    def test_weight_series_ascending(self) -> None:
        series = growth_evolution(self.records, GrowthField.weight)
        self.assertEqual([p.value for p in series], [5.2, 6.1, 6.8])
        self.assertEqual(series[0].date, DAY)

    def test_height_series_skips_missing(self) -> None:
        series = growth_evolution(self.records, "height")
        self.assertEqual([p.value for p in series], [58.0, 64.5])


class TestAveragePerDay(unittest.TestCase):
    def test_no_days_is_none(self) -> None:
        self.assertIsNone(average_per_day(0, 0))
        self.assertIsNone(average_per_day(150, 0))

    def test_rounds_to_nearest(self) -> None:
        self.assertEqual(average_per_day(100, 3), 33)
        self.assertEqual(average_per_day(5, 2), 3)
        self.assertEqual(average_per_day(200, 3), 67)


if __name__ == "__main__":
    unittest.main()
