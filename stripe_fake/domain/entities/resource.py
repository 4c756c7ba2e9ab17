from __future__ import annotations

from typing import Literal


ResourceType = Literal[
    "customer",
    "product",
    "plan",
    "subscription",
    "subscription_item",
]

RESOURCE_ID_PREFIXES: dict[str, str] = {
    "customer": "cus",
    "product": "prod",
    "plan": "plan",
    "subscription": "sub",
    "subscription_item": "si",
}

PlanInterval = Literal["day", "week", "month", "year"]

PLAN_INTERVALS: tuple[str, ...] = ("day", "week", "month", "year")
