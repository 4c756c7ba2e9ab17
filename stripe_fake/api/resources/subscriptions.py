from __future__ import annotations

from typing import Any

from stripe_fake.api.mappers import ResourceMapper
from stripe_fake.api.schemas.resources import ListObject, Subscription
from stripe_fake.application.dto.subscriptions import (
    CreateSubscriptionInput,
    ListSubscriptionsInput,
    UpdateSubscriptionInput,
)
from stripe_fake.application.use_cases.subscriptions import (
    CreateSubscriptionUseCase,
    ListSubscriptionsUseCase,
    RetrieveSubscriptionUseCase,
    UpdateSubscriptionUseCase,
)

from .params import item_entries, known_params


class SubscriptionResource:
    def __init__(
        self,
        *,
        create_use_case: CreateSubscriptionUseCase,
        update_use_case: UpdateSubscriptionUseCase,
        retrieve_use_case: RetrieveSubscriptionUseCase,
        list_use_case: ListSubscriptionsUseCase,
        mapper: ResourceMapper,
    ):
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._retrieve_use_case = retrieve_use_case
        self._list_use_case = list_use_case
        self._mapper = mapper

    def create(self, **params: Any) -> Subscription:
        params = known_params(params, ("customer", "items", "metadata"), operation="subscriptions.create")
        record = self._create_use_case.execute(
            CreateSubscriptionInput(
                customer=params.get("customer"),
                items=item_entries(params.get("items")),
                metadata=params.get("metadata"),
            )
        )
        return self._mapper.subscription(record)

    def update(self, id: str, **params: Any) -> Subscription:
        params = known_params(
            params,
            ("items", "metadata", "cancel_at_period_end"),
            operation="subscriptions.update",
        )
        record = self._update_use_case.execute(
            UpdateSubscriptionInput(
                subscription_id=id,
                items=item_entries(params.get("items")) or [],
                metadata=params.get("metadata"),
                cancel_at_period_end=params.get("cancel_at_period_end"),
            )
        )
        return self._mapper.subscription(record)

    modify = update

    def retrieve(self, id: str) -> Subscription:
        record = self._retrieve_use_case.execute(subscription_id=id)
        return self._mapper.subscription(record)

    def list(self, **params: Any) -> ListObject[Subscription]:
        params = known_params(params, ("customer", "limit", "starting_after"), operation="subscriptions.list")
        page = self._list_use_case.execute(
            ListSubscriptionsInput(
                customer=params.get("customer"),
                limit=params.get("limit"),
                starting_after=params.get("starting_after"),
            )
        )
        return self._mapper.list_page(page, self._mapper.subscription)
