from __future__ import annotations

import logging
from typing import Any

from stripe_fake.application.dto.listing import ListPage
from stripe_fake.application.dto.subscriptions import (
    CreateSubscriptionInput,
    ListSubscriptionsInput,
    SubscriptionItemEntry,
    UpdateSubscriptionInput,
)
from stripe_fake.application.ports.clock_port import ClockPort
from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.application.services.period_propagator import PeriodPropagator
from stripe_fake.application.services.request_validator import RequestValidator
from stripe_fake.domain.services.billing_period import compute_billing_period
from stripe_fake.domain.services.metadata import merge_metadata

from .listing import paginate
from .subscription_items import build_item_record


logger = logging.getLogger(__name__)


class CreateSubscriptionUseCase:
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

    def execute(self, command: CreateSubscriptionInput) -> dict[str, Any]:
        plans = self._validator.subscription_create(command)

        now = self._clock.now()
        # o primeiro item define o ciclo de cobranca
        anchor_plan = plans[0]
        period = compute_billing_period(
            start=now,
            interval=anchor_plan["interval"],
            interval_count=anchor_plan.get("interval_count", 1),
        )
        subscription = self._store.create(
            resource_type="subscription",
            attrs={
                "object": "subscription",
                "customer": command.customer,
                "status": "active",
                "items": [],
                "start_date": now,
                "billing_cycle_anchor": now,
                "cancel_at_period_end": False,
                "metadata": merge_metadata(None, command.metadata),
                "created": now,
                **period.as_fields(),
            },
        )

        item_ids = [
            self._store.create(
                resource_type="subscription_item",
                attrs=build_item_record(
                    subscription_id=subscription["id"],
                    plan_id=entry.plan,
                    quantity=entry.quantity,
                    metadata=entry.metadata,
                    created=now,
                ),
            )["id"]
            for entry in command.items
        ]
        self._store.update(
            resource_type="subscription",
            resource_id=subscription["id"],
            attrs={"items": item_ids},
        )
        self._period_propagator.propagate(subscription_id=subscription["id"])

        logger.info(
            "subscriptions: created id=%s customer=%s items=%s period=%s..%s",
            subscription["id"],
            command.customer,
            len(item_ids),
            period.start,
            period.end,
        )
        return self._store.get(resource_type="subscription", resource_id=subscription["id"])


class UpdateSubscriptionUseCase:
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

    def execute(self, command: UpdateSubscriptionInput) -> dict[str, Any]:
        subscription = self._validator.subscription_update(command)

        item_ids = list(subscription.get("items", []))
        for entry in command.items:
            if entry.id is None:
                item_ids.append(self._attach_item(subscription["id"], entry))
            else:
                self._update_item(entry)

        changes: dict[str, Any] = {"items": item_ids}
        if command.metadata is not None:
            changes["metadata"] = merge_metadata(subscription.get("metadata"), command.metadata)
        if command.cancel_at_period_end is not None:
            changes["cancel_at_period_end"] = bool(command.cancel_at_period_end)

        self._store.update(
            resource_type="subscription",
            resource_id=subscription["id"],
            attrs=changes,
        )
        self._period_propagator.propagate(subscription_id=subscription["id"])

        logger.info(
            "subscriptions: updated id=%s fields=%s item_changes=%s",
            subscription["id"],
            sorted(changes),
            len(command.items),
        )
        return self._store.get(resource_type="subscription", resource_id=subscription["id"])

    def _attach_item(self, subscription_id: str, entry: SubscriptionItemEntry) -> str:
        item = self._store.create(
            resource_type="subscription_item",
            attrs=build_item_record(
                subscription_id=subscription_id,
                plan_id=entry.plan,
                quantity=entry.quantity,
                metadata=entry.metadata,
                created=self._clock.now(),
            ),
        )
        return item["id"]

    def _update_item(self, entry: SubscriptionItemEntry) -> None:
        item = self._store.get(resource_type="subscription_item", resource_id=entry.id)
        changes: dict[str, Any] = {}
        if entry.plan is not None:
            changes["plan"] = entry.plan
        if entry.quantity is not None:
            changes["quantity"] = int(entry.quantity)
        if entry.metadata is not None:
            changes["metadata"] = merge_metadata(item.get("metadata"), entry.metadata)
        if changes:
            self._store.update(
                resource_type="subscription_item",
                resource_id=entry.id,
                attrs=changes,
            )


class RetrieveSubscriptionUseCase:
    def __init__(self, *, validator: RequestValidator):
        self._validator = validator

    def execute(self, *, subscription_id: str) -> dict[str, Any]:
        return self._validator.existing("subscription", subscription_id)


class ListSubscriptionsUseCase:
    def __init__(self, *, store: ResourceStorePort):
        self._store = store

    def execute(self, command: ListSubscriptionsInput) -> ListPage:
        filters = {"customer": command.customer} if command.customer is not None else None
        records = self._store.list(resource_type="subscription", filters=filters)
        return paginate(
            records,
            resource_type="subscription",
            url="/v1/subscriptions",
            limit=command.limit,
            starting_after=command.starting_after,
        )
