from __future__ import annotations

import unittest
from datetime import datetime, timezone

from stripe_fake.domain.services.billing_period import advance_by_interval, compute_billing_period


def _ts(*args) -> int:
    return int(datetime(*args, tzinfo=timezone.utc).timestamp())


class ComputeBillingPeriodTests(unittest.TestCase):
    def test_monthly_period(self):
        period = compute_billing_period(start=_ts(2024, 3, 15, 12, 0), interval="month")

        self.assertEqual(period.start, _ts(2024, 3, 15, 12, 0))
        self.assertEqual(period.end, _ts(2024, 4, 15, 12, 0))

    def test_month_end_is_clamped(self):
        leap = compute_billing_period(start=_ts(2024, 1, 31), interval="month")
        common = compute_billing_period(start=_ts(2023, 1, 31), interval="month")

        self.assertEqual(leap.end, _ts(2024, 2, 29))
        self.assertEqual(common.end, _ts(2023, 2, 28))

    def test_month_count_crosses_year(self):
        period = compute_billing_period(start=_ts(2023, 11, 30), interval="month", interval_count=3)

        self.assertEqual(period.end, _ts(2024, 2, 29))

    def test_yearly_period_from_leap_day(self):
        period = compute_billing_period(start=_ts(2024, 2, 29), interval="year")

        self.assertEqual(period.end, _ts(2025, 2, 28))

    def test_day_and_week_periods(self):
        start = _ts(2024, 5, 1)

        self.assertEqual(compute_billing_period(start=start, interval="day", interval_count=3).end, _ts(2024, 5, 4))
        self.assertEqual(compute_billing_period(start=start, interval="week").end, _ts(2024, 5, 8))

    def test_end_is_always_after_start(self):
        for interval in ("day", "week", "month", "year"):
            period = compute_billing_period(start=_ts(2024, 12, 31, 23, 59), interval=interval)
            self.assertGreater(period.end, period.start)

    def test_as_fields(self):
        period = compute_billing_period(start=_ts(2024, 5, 1), interval="day")

        self.assertEqual(
            period.as_fields(),
            {"current_period_start": _ts(2024, 5, 1), "current_period_end": _ts(2024, 5, 2)},
        )

    def test_rejects_unknown_interval(self):
        with self.assertRaises(ValueError):
            compute_billing_period(start=_ts(2024, 5, 1), interval="fortnight")

    def test_rejects_non_positive_count(self):
        with self.assertRaises(ValueError):
            advance_by_interval(datetime(2024, 5, 1, tzinfo=timezone.utc), interval="month", interval_count=0)


if __name__ == "__main__":
    unittest.main()
