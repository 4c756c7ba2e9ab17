from __future__ import annotations

from collections.abc import Callable
from typing import Any, TypeVar

from stripe_fake.api.schemas.resources import (
    Customer,
    ListObject,
    Plan,
    Product,
    Subscription,
    SubscriptionItem,
)
from stripe_fake.application.dto.listing import ListPage
from stripe_fake.application.ports.resource_store_port import ResourceStorePort


T = TypeVar("T")


class ResourceMapper:
    """Monta os snapshots publicos a partir das referencias guardadas no store.

    A expansao (plano completo dentro do item, itens dentro da assinatura) e
    feita aqui, na leitura; o store so guarda ids.
    """

    def __init__(self, *, store: ResourceStorePort):
        self._store = store

    def customer(self, record: dict[str, Any]) -> Customer:
        return Customer.model_validate(record)

    def product(self, record: dict[str, Any]) -> Product:
        return Product.model_validate(record)

    def plan(self, record: dict[str, Any]) -> Plan:
        return Plan.model_validate(record)

    def subscription_item(self, record: dict[str, Any]) -> SubscriptionItem:
        plan = self._store.get(resource_type="plan", resource_id=record["plan"])
        return SubscriptionItem.model_validate({**record, "plan": self.plan(plan)})

    def subscription(self, record: dict[str, Any]) -> Subscription:
        items = [
            self._store.get(resource_type="subscription_item", resource_id=item_id)
            for item_id in record.get("items", [])
        ]
        items_list = ListObject[SubscriptionItem](
            data=[self.subscription_item(item) for item in items],
            has_more=False,
            url=f"/v1/subscription_items?subscription={record['id']}",
        )
        return Subscription.model_validate({**record, "items": items_list})

    def list_page(self, page: ListPage, map_record: Callable[[dict[str, Any]], T]) -> ListObject[T]:
        return ListObject(
            data=[map_record(record) for record in page.records],
            has_more=page.has_more,
            url=page.url,
        )
