from __future__ import annotations

import calendar
from datetime import datetime, timedelta, timezone

from stripe_fake.domain.entities.billing_period import BillingPeriod


def _add_months(moment: datetime, months: int) -> datetime:
    month_index = moment.month - 1 + months
    year = moment.year + month_index // 12
    month = month_index % 12 + 1
    # 31/jan + 1 mes = ultimo dia de fevereiro
    day = min(moment.day, calendar.monthrange(year, month)[1])
    return moment.replace(year=year, month=month, day=day)


def advance_by_interval(moment: datetime, *, interval: str, interval_count: int = 1) -> datetime:
    if interval_count <= 0:
        raise ValueError("interval_count must be a positive integer.")
    if interval == "day":
        return moment + timedelta(days=interval_count)
    if interval == "week":
        return moment + timedelta(weeks=interval_count)
    if interval == "month":
        return _add_months(moment, interval_count)
    if interval == "year":
        return _add_months(moment, 12 * interval_count)
    raise ValueError(f"Unsupported billing interval: {interval}")


def compute_billing_period(*, start: int, interval: str, interval_count: int = 1) -> BillingPeriod:
    start_at = datetime.fromtimestamp(int(start), tz=timezone.utc)
    end_at = advance_by_interval(start_at, interval=interval, interval_count=interval_count)
    end = int(end_at.timestamp())
    if end <= start:
        raise ValueError("Billing period end must be after its start.")
    return BillingPeriod(start=int(start), end=end)
