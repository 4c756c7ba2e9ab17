from __future__ import annotations

import pytest

from stripe_fake.application.dto.catalog import CreatePlanInput
from stripe_fake.application.dto.subscription_items import (
    CreateSubscriptionItemInput,
    ListSubscriptionItemsInput,
    UpdateSubscriptionItemInput,
)
from stripe_fake.application.dto.subscriptions import CreateSubscriptionInput, SubscriptionItemEntry
from stripe_fake.application.services.request_validator import RequestValidator
from stripe_fake.domain.exceptions import InvalidRequestError
from stripe_fake.infrastructure.store.memory_store import InMemoryResourceStore


@pytest.fixture
def seeded_store() -> InMemoryResourceStore:
    store = InMemoryResourceStore()
    store.create(resource_type="customer", attrs={"id": "cus_1"})
    store.create(resource_type="product", attrs={"id": "prod_1", "name": "Silver"})
    store.create(resource_type="plan", attrs={"id": "silver_plan", "product": "prod_1", "interval": "month"})
    store.create(resource_type="subscription", attrs={"id": "sub_1", "items": ["si_1"]})
    store.create(resource_type="subscription_item", attrs={"id": "si_1", "subscription": "sub_1"})
    return store


@pytest.mark.parametrize(
    ("subscription", "plan", "param"),
    [
        (None, None, "subscription"),
        (None, "silver_plan", "subscription"),
        ("sub_1", None, "plan"),
        ("sub_ghost", None, "plan"),
        ("sub_ghost", "plan_ghost", "subscription"),
        ("sub_1", "plan_ghost", "plan"),
    ],
)
def test_subscription_item_create_precedence(seeded_store, subscription, plan, param):
    validator = RequestValidator(store=seeded_store)

    with pytest.raises(InvalidRequestError) as exc_info:
        validator.subscription_item_create(CreateSubscriptionItemInput(subscription=subscription, plan=plan))

    assert exc_info.value.param == param


def test_subscription_item_create_returns_references(seeded_store):
    validator = RequestValidator(store=seeded_store)

    subscription, plan = validator.subscription_item_create(
        CreateSubscriptionItemInput(subscription="sub_1", plan="silver_plan")
    )

    assert subscription["id"] == "sub_1"
    assert plan["id"] == "silver_plan"


def test_validation_never_writes(seeded_store):
    validator = RequestValidator(store=seeded_store)
    snapshot = {
        resource_type: seeded_store.list(resource_type=resource_type)
        for resource_type in ("customer", "product", "plan", "subscription", "subscription_item")
    }

    for call in (
        lambda: validator.subscription_item_create(CreateSubscriptionItemInput(subscription="sub_1", plan="x")),
        lambda: validator.subscription_item_update(UpdateSubscriptionItemInput(item_id="nope", quantity=3)),
        lambda: validator.subscription_item_list(ListSubscriptionItemsInput(subscription=None)),
        lambda: validator.subscription_create(
            CreateSubscriptionInput(customer="cus_1", items=[SubscriptionItemEntry(plan="x")])
        ),
    ):
        with pytest.raises(InvalidRequestError):
            call()

    for resource_type, rows in snapshot.items():
        assert seeded_store.list(resource_type=resource_type) == rows


def test_subscription_item_update_not_found_message(seeded_store):
    validator = RequestValidator(store=seeded_store)

    with pytest.raises(InvalidRequestError) as exc_info:
        validator.subscription_item_update(UpdateSubscriptionItemInput(item_id="some_id"))

    assert exc_info.value.param == "subscription_item"
    assert exc_info.value.message == "No such subscription_item: some_id"
    assert exc_info.value.code == "resource_missing"


def test_subscription_item_list_requires_subscription(seeded_store):
    validator = RequestValidator(store=seeded_store)

    with pytest.raises(InvalidRequestError) as exc_info:
        validator.subscription_item_list(ListSubscriptionItemsInput(subscription=None))

    assert exc_info.value.param == "subscription"
    assert exc_info.value.code == "parameter_missing"


def test_subscription_create_checks_customer_before_plans(seeded_store):
    validator = RequestValidator(store=seeded_store)

    with pytest.raises(InvalidRequestError) as exc_info:
        validator.subscription_create(
            CreateSubscriptionInput(customer="cus_ghost", items=[SubscriptionItemEntry(plan="plan_ghost")])
        )

    assert exc_info.value.param == "customer"


def test_plan_create_interval_checked_before_product(seeded_store):
    validator = RequestValidator(store=seeded_store)

    with pytest.raises(InvalidRequestError) as exc_info:
        validator.plan_create(
            CreatePlanInput(amount=1, currency="usd", interval="hourly", product="prod_ghost")
        )

    assert exc_info.value.param == "interval"
