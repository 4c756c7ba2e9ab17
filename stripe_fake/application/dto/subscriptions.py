from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class SubscriptionItemEntry:
    plan: str | None = None
    quantity: int | None = None
    id: str | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class CreateSubscriptionInput:
    customer: str | None
    items: list[SubscriptionItemEntry] | None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class UpdateSubscriptionInput:
    subscription_id: str
    items: list[SubscriptionItemEntry] = field(default_factory=list)
    metadata: dict[str, str] | None = None
    cancel_at_period_end: bool | None = None


@dataclass(frozen=True)
class ListSubscriptionsInput:
    customer: str | None = None
    limit: int | None = None
    starting_after: str | None = None
