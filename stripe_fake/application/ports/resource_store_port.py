from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Protocol

from stripe_fake.domain.entities.resource import ResourceType


class ResourceStorePort(Protocol):
    def create(self, *, resource_type: ResourceType, attrs: Mapping[str, Any]) -> dict[str, Any]:
        ...

    def get(self, *, resource_type: ResourceType, resource_id: str) -> dict[str, Any] | None:
        ...

    def update(
        self,
        *,
        resource_type: ResourceType,
        resource_id: str,
        attrs: Mapping[str, Any],
    ) -> dict[str, Any] | None:
        ...

    def list(
        self,
        *,
        resource_type: ResourceType,
        filters: Mapping[str, Any] | None = None,
    ) -> list[dict[str, Any]]:
        ...

    def reset(self) -> None:
        ...
