from __future__ import annotations

from typing import Any

from stripe_fake.application.dto.catalog import CreatePlanInput, CreateProductInput
from stripe_fake.application.dto.subscription_items import (
    CreateSubscriptionItemInput,
    ListSubscriptionItemsInput,
    UpdateSubscriptionItemInput,
)
from stripe_fake.application.dto.subscriptions import (
    CreateSubscriptionInput,
    SubscriptionItemEntry,
    UpdateSubscriptionInput,
)
from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.domain.entities.resource import PLAN_INTERVALS, ResourceType
from stripe_fake.domain.exceptions import (
    InvalidRequestError,
    invalid_param_error,
    missing_param_error,
    no_such_resource_error,
)


class RequestValidator:
    """Confere params obrigatorios e referencias antes de qualquer escrita no store.

    Cada checagem levanta um unico InvalidRequestError para o primeiro problema:
    primeiro params ausentes, em ordem fixa, depois referencias. Nunca escreve no
    store; as buscas devolvem os registros referenciados para evitar nova leitura.
    """

    def __init__(self, *, store: ResourceStorePort):
        self._store = store

    # -- subscription items --

    def subscription_item_create(self, command: CreateSubscriptionItemInput) -> tuple[dict, dict]:
        _require("subscription", command.subscription)
        _require("plan", command.plan)
        subscription = self.existing("subscription", command.subscription)
        plan = self.existing("plan", command.plan)
        return subscription, plan

    def subscription_item_update(self, command: UpdateSubscriptionItemInput) -> dict:
        item = self.existing("subscription_item", command.item_id)
        if command.plan is not None:
            self.existing("plan", command.plan)
        return item

    def subscription_item_list(self, command: ListSubscriptionItemsInput) -> None:
        _require("subscription", command.subscription)

    # -- subscriptions --

    def subscription_create(self, command: CreateSubscriptionInput) -> list[dict]:
        _require("customer", command.customer)
        if not command.items:
            raise missing_param_error("items")
        for index, entry in enumerate(command.items):
            _require(f"items[{index}][plan]", entry.plan)

        self.existing("customer", command.customer)
        return [self.existing("plan", entry.plan) for entry in command.items]

    def subscription_update(self, command: UpdateSubscriptionInput) -> dict:
        subscription = self.existing("subscription", command.subscription_id)
        for index, entry in enumerate(command.items):
            if entry.id is None:
                _require(f"items[{index}][plan]", entry.plan)
        for entry in command.items:
            self._check_item_entry(subscription, entry)
        return subscription

    def _check_item_entry(self, subscription: dict, entry: SubscriptionItemEntry) -> None:
        if entry.id is not None and entry.id not in subscription.get("items", []):
            raise no_such_resource_error("subscription_item", entry.id)
        if entry.plan is not None:
            self.existing("plan", entry.plan)

    # -- catalog --

    def product_create(self, command: CreateProductInput) -> None:
        _require("name", command.name)
        if command.id is not None and self._store.get(resource_type="product", resource_id=command.id):
            raise InvalidRequestError(
                "Product already exists.",
                "id",
                code="resource_already_exists",
            )

    def plan_create(self, command: CreatePlanInput) -> None:
        _require("amount", command.amount)
        _require("currency", command.currency)
        _require("interval", command.interval)
        _require("product", command.product)
        if command.interval not in PLAN_INTERVALS:
            raise invalid_param_error("interval", "must be one of day, month, week, or year")
        if not is_positive_int(command.interval_count):
            raise invalid_param_error("interval_count", "must be a positive integer")
        if command.id is not None and self._store.get(resource_type="plan", resource_id=command.id):
            raise InvalidRequestError(
                "Plan already exists.",
                "id",
                code="resource_already_exists",
            )
        self.existing("product", command.product)

    # -- shared --

    def existing(self, resource_type: ResourceType, resource_id: str, *, param: str | None = None) -> dict:
        record = self._store.get(resource_type=resource_type, resource_id=resource_id)
        if record is None:
            raise no_such_resource_error(resource_type, resource_id, param=param)
        return record


def _require(param: str, value: Any) -> None:
    if value is None:
        raise missing_param_error(param)


def is_positive_int(value: Any) -> bool:
    # bool e subclasse de int
    return isinstance(value, int) and not isinstance(value, bool) and value > 0
