from __future__ import annotations

import copy
import itertools
import logging
from collections.abc import Iterator, Mapping
from typing import Any

from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.domain.entities.resource import RESOURCE_ID_PREFIXES, ResourceType


logger = logging.getLogger(__name__)


class InMemoryResourceStore(ResourceStorePort):
    """Tabelas em memoria por tipo de recurso.

    Cada entrada e um dict campo -> valor. Leituras devolvem copias, entao
    nenhum chamador segura referencia para dentro das tabelas. As sequencias de
    id sobrevivem a ``reset()``, ou seja, um id nunca e reutilizado.
    """

    def __init__(self, *, id_prefix: str = "test_"):
        self._id_prefix = id_prefix
        self._tables: dict[str, dict[str, dict[str, Any]]] = {
            resource_type: {} for resource_type in RESOURCE_ID_PREFIXES
        }
        self._sequences: dict[str, Iterator[int]] = {
            resource_type: itertools.count(1) for resource_type in RESOURCE_ID_PREFIXES
        }

    def new_id(self, *, resource_type: ResourceType) -> str:
        table = self._table(resource_type)
        prefix = f"{self._id_prefix}{RESOURCE_ID_PREFIXES[resource_type]}_"
        while True:
            candidate = f"{prefix}{next(self._sequences[resource_type]):08d}"
            # ids explicitos (ex.: planos) podem ocupar o mesmo namespace
            if candidate not in table:
                return candidate

    def create(self, *, resource_type: ResourceType, attrs: Mapping[str, Any]) -> dict[str, Any]:
        table = self._table(resource_type)
        record = copy.deepcopy(dict(attrs))
        resource_id = record.get("id") or self.new_id(resource_type=resource_type)
        if resource_id in table:
            raise KeyError(f"{resource_type} {resource_id} already stored.")
        record["id"] = resource_id
        table[resource_id] = record
        logger.debug("memory_store: create type=%s id=%s", resource_type, resource_id)
        return copy.deepcopy(record)

    def get(self, *, resource_type: ResourceType, resource_id: str) -> dict[str, Any] | None:
        record = self._table(resource_type).get(resource_id)
        if record is None:
            return None
        return copy.deepcopy(record)

    def update(
        self,
        *,
        resource_type: ResourceType,
        resource_id: str,
        attrs: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        record = self._table(resource_type).get(resource_id)
        if record is None:
            return None
        changes = copy.deepcopy(dict(attrs))
        changes.pop("id", None)
        record.update(changes)
        logger.debug(
            "memory_store: update type=%s id=%s fields=%s",
            resource_type,
            resource_id,
            sorted(changes),
        )
        return copy.deepcopy(record)

    def list(
        self,
        *,
        resource_type: ResourceType,
        filters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        filters = filters or {}
        return [
            copy.deepcopy(record)
            for record in self._table(resource_type).values()
            if all(record.get(field) == value for field, value in filters.items())
        ]

    def reset(self) -> None:
        for table in self._tables.values():
            table.clear()
        logger.info("memory_store: reset")

    def _table(self, resource_type: str) -> dict[str, dict[str, Any]]:
        try:
            return self._tables[resource_type]
        except KeyError as exc:
            raise ValueError(f"Unknown resource type: {resource_type}") from exc
