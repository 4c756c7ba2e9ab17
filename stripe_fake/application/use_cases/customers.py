from __future__ import annotations

import logging
from typing import Any

from stripe_fake.application.dto.catalog import CreateCustomerInput, ListInput, UpdateCustomerInput
from stripe_fake.application.dto.listing import ListPage
from stripe_fake.application.ports.clock_port import ClockPort
from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.application.services.request_validator import RequestValidator
from stripe_fake.domain.services.metadata import merge_metadata

from .listing import paginate


logger = logging.getLogger(__name__)


class CreateCustomerUseCase:
    def __init__(self, *, store: ResourceStorePort, clock: ClockPort):
        self._store = store
        self._clock = clock

    def execute(self, command: CreateCustomerInput) -> dict[str, Any]:
        customer = self._store.create(
            resource_type="customer",
            attrs={
                "object": "customer",
                "email": command.email,
                "description": command.description,
                "metadata": merge_metadata(None, command.metadata),
                "created": self._clock.now(),
            },
        )
        logger.info("customers: created id=%s", customer["id"])
        return customer


class UpdateCustomerUseCase:
    def __init__(self, *, store: ResourceStorePort, validator: RequestValidator):
        self._store = store
        self._validator = validator

    def execute(self, command: UpdateCustomerInput) -> dict[str, Any]:
        customer = self._validator.existing("customer", command.customer_id)
        changes: dict[str, Any] = {}
        if command.email is not None:
            changes["email"] = command.email
        if command.description is not None:
            changes["description"] = command.description
        if command.metadata is not None:
            changes["metadata"] = merge_metadata(customer.get("metadata"), command.metadata)
        return self._store.update(resource_type="customer", resource_id=customer["id"], attrs=changes)


class RetrieveCustomerUseCase:
    def __init__(self, *, validator: RequestValidator):
        self._validator = validator

    def execute(self, *, customer_id: str) -> dict[str, Any]:
        return self._validator.existing("customer", customer_id)


class ListCustomersUseCase:
    def __init__(self, *, store: ResourceStorePort):
        self._store = store

    def execute(self, command: ListInput) -> ListPage:
        return paginate(
            self._store.list(resource_type="customer"),
            resource_type="customer",
            url="/v1/customers",
            limit=command.limit,
            starting_after=command.starting_after,
        )
