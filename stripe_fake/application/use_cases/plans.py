from __future__ import annotations

import logging
from typing import Any

from stripe_fake.application.dto.catalog import CreatePlanInput, ListInput, UpdatePlanInput
from stripe_fake.application.dto.listing import ListPage
from stripe_fake.application.ports.clock_port import ClockPort
from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.application.services.request_validator import RequestValidator
from stripe_fake.domain.services.metadata import merge_metadata

from .listing import paginate


logger = logging.getLogger(__name__)


class CreatePlanUseCase:
    def __init__(self, *, store: ResourceStorePort, validator: RequestValidator, clock: ClockPort):
        self._store = store
        self._validator = validator
        self._clock = clock

    def execute(self, command: CreatePlanInput) -> dict[str, Any]:
        self._validator.plan_create(command)
        plan = self._store.create(
            resource_type="plan",
            attrs={
                "id": command.id,
                "object": "plan",
                "product": command.product,
                "amount": int(command.amount),
                "currency": command.currency.lower(),
                "interval": command.interval,
                "interval_count": int(command.interval_count),
                "nickname": command.nickname,
                "active": bool(command.active),
                "metadata": merge_metadata(None, command.metadata),
                "created": self._clock.now(),
            },
        )
        logger.info(
            "plans: created id=%s product=%s interval=%s/%s",
            plan["id"],
            plan["product"],
            plan["interval_count"],
            plan["interval"],
        )
        return plan


class UpdatePlanUseCase:
    def __init__(self, *, store: ResourceStorePort, validator: RequestValidator):
        self._store = store
        self._validator = validator

    def execute(self, command: UpdatePlanInput) -> dict[str, Any]:
        plan = self._validator.existing("plan", command.plan_id)
        changes: dict[str, Any] = {}
        if command.nickname is not None:
            changes["nickname"] = command.nickname
        if command.active is not None:
            changes["active"] = bool(command.active)
        if command.metadata is not None:
            changes["metadata"] = merge_metadata(plan.get("metadata"), command.metadata)
        return self._store.update(resource_type="plan", resource_id=plan["id"], attrs=changes)


class RetrievePlanUseCase:
    def __init__(self, *, validator: RequestValidator):
        self._validator = validator

    def execute(self, *, plan_id: str) -> dict[str, Any]:
        return self._validator.existing("plan", plan_id)


class ListPlansUseCase:
    def __init__(self, *, store: ResourceStorePort):
        self._store = store

    def execute(self, command: ListInput) -> ListPage:
        filters = {"product": command.product} if command.product is not None else None
        return paginate(
            self._store.list(resource_type="plan", filters=filters),
            resource_type="plan",
            url="/v1/plans",
            limit=command.limit,
            starting_after=command.starting_after,
        )
