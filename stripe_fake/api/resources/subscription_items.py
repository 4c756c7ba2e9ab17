from __future__ import annotations

from typing import Any

from stripe_fake.api.mappers import ResourceMapper
from stripe_fake.api.schemas.resources import ListObject, SubscriptionItem
from stripe_fake.application.dto.subscription_items import (
    CreateSubscriptionItemInput,
    ListSubscriptionItemsInput,
    UpdateSubscriptionItemInput,
)
from stripe_fake.application.use_cases.subscription_items import (
    CreateSubscriptionItemUseCase,
    ListSubscriptionItemsUseCase,
    RetrieveSubscriptionItemUseCase,
    UpdateSubscriptionItemUseCase,
)

from .params import known_params


class SubscriptionItemResource:
    def __init__(
        self,
        *,
        create_use_case: CreateSubscriptionItemUseCase,
        update_use_case: UpdateSubscriptionItemUseCase,
        retrieve_use_case: RetrieveSubscriptionItemUseCase,
        list_use_case: ListSubscriptionItemsUseCase,
        mapper: ResourceMapper,
    ):
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._retrieve_use_case = retrieve_use_case
        self._list_use_case = list_use_case
        self._mapper = mapper

    def create(self, **params: Any) -> SubscriptionItem:
        params = known_params(
            params,
            ("subscription", "plan", "quantity", "metadata"),
            operation="subscription_items.create",
        )
        record = self._create_use_case.execute(
            CreateSubscriptionItemInput(
                subscription=params.get("subscription"),
                plan=params.get("plan"),
                quantity=params.get("quantity"),
                metadata=params.get("metadata"),
            )
        )
        return self._mapper.subscription_item(record)

    def update(self, id: str, **params: Any) -> SubscriptionItem:
        # subscription e o periodo nao sao mutaveis por aqui
        params = known_params(
            params,
            ("plan", "quantity", "metadata"),
            operation="subscription_items.update",
        )
        record = self._update_use_case.execute(
            UpdateSubscriptionItemInput(
                item_id=id,
                plan=params.get("plan"),
                quantity=params.get("quantity"),
                metadata=params.get("metadata"),
            )
        )
        return self._mapper.subscription_item(record)

    modify = update

    def retrieve(self, id: str) -> SubscriptionItem:
        record = self._retrieve_use_case.execute(item_id=id)
        return self._mapper.subscription_item(record)

    def list(self, **params: Any) -> ListObject[SubscriptionItem]:
        params = known_params(
            params,
            ("subscription", "limit", "starting_after"),
            operation="subscription_items.list",
        )
        page = self._list_use_case.execute(
            ListSubscriptionItemsInput(
                subscription=params.get("subscription"),
                limit=params.get("limit"),
                starting_after=params.get("starting_after"),
            )
        )
        return self._mapper.list_page(page, self._mapper.subscription_item)
