from __future__ import annotations

import logging
from typing import Any

from stripe_fake.application.dto.listing import ListPage
from stripe_fake.application.dto.subscription_items import (
    CreateSubscriptionItemInput,
    ListSubscriptionItemsInput,
    UpdateSubscriptionItemInput,
)
from stripe_fake.application.ports.clock_port import ClockPort
from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.application.services.period_propagator import PeriodPropagator
from stripe_fake.application.services.request_validator import RequestValidator
from stripe_fake.domain.services.metadata import merge_metadata

from .listing import paginate


logger = logging.getLogger(__name__)


def build_item_record(
    *,
    subscription_id: str,
    plan_id: str,
    quantity: int | None,
    metadata: dict[str, str] | None,
    created: int,
) -> dict[str, Any]:
    # periodo fica vazio ate o propagator copiar o da assinatura
    return {
        "object": "subscription_item",
        "subscription": subscription_id,
        "plan": plan_id,
        "quantity": 1 if quantity is None else int(quantity),
        "metadata": merge_metadata(None, metadata),
        "current_period_start": None,
        "current_period_end": None,
        "created": created,
    }


class CreateSubscriptionItemUseCase:
    def __init__(
        self,
        *,
        store: ResourceStorePort,
        validator: RequestValidator,
        period_propagator: PeriodPropagator,
        clock: ClockPort,
    ):
        self._store = store
        self._validator = validator
        self._period_propagator = period_propagator
        self._clock = clock

    def execute(self, command: CreateSubscriptionItemInput) -> dict[str, Any]:
        subscription, plan = self._validator.subscription_item_create(command)

        item = self._store.create(
            resource_type="subscription_item",
            attrs=build_item_record(
                subscription_id=subscription["id"],
                plan_id=plan["id"],
                quantity=command.quantity,
                metadata=command.metadata,
                created=self._clock.now(),
            ),
        )
        self._store.update(
            resource_type="subscription",
            resource_id=subscription["id"],
            attrs={"items": [*subscription.get("items", []), item["id"]]},
        )
        self._period_propagator.propagate(subscription_id=subscription["id"])

        logger.info(
            "subscription_items: created id=%s subscription=%s plan=%s quantity=%s",
            item["id"],
            subscription["id"],
            plan["id"],
            item["quantity"],
        )
        return self._store.get(resource_type="subscription_item", resource_id=item["id"])


class UpdateSubscriptionItemUseCase:
    def __init__(self, *, store: ResourceStorePort, validator: RequestValidator):
        self._store = store
        self._validator = validator

    def execute(self, command: UpdateSubscriptionItemInput) -> dict[str, Any]:
        item = self._validator.subscription_item_update(command)

        changes: dict[str, Any] = {}
        if command.plan is not None:
            changes["plan"] = command.plan
        if command.quantity is not None:
            changes["quantity"] = int(command.quantity)
        if command.metadata is not None:
            changes["metadata"] = merge_metadata(item.get("metadata"), command.metadata)

        updated = self._store.update(
            resource_type="subscription_item",
            resource_id=item["id"],
            attrs=changes,
        )
        logger.info("subscription_items: updated id=%s fields=%s", item["id"], sorted(changes))
        return updated


class RetrieveSubscriptionItemUseCase:
    def __init__(self, *, validator: RequestValidator):
        self._validator = validator

    def execute(self, *, item_id: str) -> dict[str, Any]:
        return self._validator.existing("subscription_item", item_id)


class ListSubscriptionItemsUseCase:
    def __init__(self, *, store: ResourceStorePort, validator: RequestValidator):
        self._store = store
        self._validator = validator

    def execute(self, command: ListSubscriptionItemsInput) -> ListPage:
        self._validator.subscription_item_list(command)
        records = self._store.list(
            resource_type="subscription_item",
            filters={"subscription": command.subscription},
        )
        logger.debug(
            "subscription_items: list subscription=%s rows=%s",
            command.subscription,
            len(records),
        )
        return paginate(
            records,
            resource_type="subscription_item",
            url="/v1/subscription_items",
            limit=command.limit,
            starting_after=command.starting_after,
        )
