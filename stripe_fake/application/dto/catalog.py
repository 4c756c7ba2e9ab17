from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateCustomerInput:
    email: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class UpdateCustomerInput:
    customer_id: str
    email: str | None = None
    description: str | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class CreateProductInput:
    name: str | None
    id: str | None = None
    active: bool = True
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class UpdateProductInput:
    product_id: str
    name: str | None = None
    active: bool | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class CreatePlanInput:
    amount: int | None
    currency: str | None
    interval: str | None
    product: str | None
    id: str | None = None
    interval_count: int = 1
    nickname: str | None = None
    active: bool = True
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class UpdatePlanInput:
    plan_id: str
    nickname: str | None = None
    active: bool | None = None
    metadata: dict[str, str] | None = None


@dataclass(frozen=True)
class ListInput:
    limit: int | None = None
    starting_after: str | None = None
    product: str | None = None
