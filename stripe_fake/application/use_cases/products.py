from __future__ import annotations

import logging
from typing import Any

from stripe_fake.application.dto.catalog import CreateProductInput, ListInput, UpdateProductInput
from stripe_fake.application.dto.listing import ListPage
from stripe_fake.application.ports.clock_port import ClockPort
from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.application.services.request_validator import RequestValidator
from stripe_fake.domain.services.metadata import merge_metadata

from .listing import paginate


logger = logging.getLogger(__name__)


class CreateProductUseCase:
    def __init__(self, *, store: ResourceStorePort, validator: RequestValidator, clock: ClockPort):
        self._store = store
        self._validator = validator
        self._clock = clock

    def execute(self, command: CreateProductInput) -> dict[str, Any]:
        self._validator.product_create(command)
        product = self._store.create(
            resource_type="product",
            attrs={
                "id": command.id,
                "object": "product",
                "name": command.name,
                "active": bool(command.active),
                "metadata": merge_metadata(None, command.metadata),
                "created": self._clock.now(),
            },
        )
        logger.info("products: created id=%s", product["id"])
        return product


class UpdateProductUseCase:
    def __init__(self, *, store: ResourceStorePort, validator: RequestValidator):
        self._store = store
        self._validator = validator

    def execute(self, command: UpdateProductInput) -> dict[str, Any]:
        product = self._validator.existing("product", command.product_id)
        changes: dict[str, Any] = {}
        if command.name is not None:
            changes["name"] = command.name
        if command.active is not None:
            changes["active"] = bool(command.active)
        if command.metadata is not None:
            changes["metadata"] = merge_metadata(product.get("metadata"), command.metadata)
        return self._store.update(resource_type="product", resource_id=product["id"], attrs=changes)


class RetrieveProductUseCase:
    def __init__(self, *, validator: RequestValidator):
        self._validator = validator

    def execute(self, *, product_id: str) -> dict[str, Any]:
        return self._validator.existing("product", product_id)


class ListProductsUseCase:
    def __init__(self, *, store: ResourceStorePort):
        self._store = store

    def execute(self, command: ListInput) -> ListPage:
        return paginate(
            self._store.list(resource_type="product"),
            resource_type="product",
            url="/v1/products",
            limit=command.limit,
            starting_after=command.starting_after,
        )
