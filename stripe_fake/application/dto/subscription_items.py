from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateSubscriptionItemInput:
    subscription: str | None
    plan: str | None
    quantity: int | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class UpdateSubscriptionItemInput:
    item_id: str
    plan: str | None = None
    quantity: int | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class ListSubscriptionItemsInput:
    subscription: str | None
    limit: int | None = None
    starting_after: str | None = None
