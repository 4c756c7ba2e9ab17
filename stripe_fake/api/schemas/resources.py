from __future__ import annotations

from typing import Generic, Literal, TypeVar

from pydantic import BaseModel, Field


T = TypeVar("T")


class ListObject(BaseModel, Generic[T]):
    object: Literal["list"] = "list"
    data: list[T] = Field(default_factory=list)
    has_more: bool = False
    url: str

    @property
    def count(self) -> int:
        return len(self.data)

    def __len__(self) -> int:
        return len(self.data)


class Customer(BaseModel):
    id: str
    object: Literal["customer"] = "customer"
    email: str | None = None
    description: str | None = None
    metadata: dict[str, str] = Field(default_factory=dict)
    created: int


class Product(BaseModel):
    id: str
    object: Literal["product"] = "product"
    name: str
    active: bool = True
    metadata: dict[str, str] = Field(default_factory=dict)
    created: int


class Plan(BaseModel):
    id: str
    object: Literal["plan"] = "plan"
    product: str
    amount: int
    currency: str
    interval: Literal["day", "week", "month", "year"]
    interval_count: int = 1
    nickname: str | None = None
    active: bool = True
    metadata: dict[str, str] = Field(default_factory=dict)
    created: int


class SubscriptionItem(BaseModel):
    id: str
    object: Literal["subscription_item"] = "subscription_item"
    plan: Plan
    quantity: int = 1
    subscription: str
    current_period_start: int
    current_period_end: int
    metadata: dict[str, str] = Field(default_factory=dict)
    created: int


class Subscription(BaseModel):
    id: str
    object: Literal["subscription"] = "subscription"
    customer: str
    status: str
    items: ListObject[SubscriptionItem]
    current_period_start: int
    current_period_end: int
    start_date: int
    billing_cycle_anchor: int
    cancel_at_period_end: bool = False
    metadata: dict[str, str] = Field(default_factory=dict)
    created: int
