from __future__ import annotations

import pytest

from stripe_fake.domain.exceptions import InvalidRequestError


def test_customer_lifecycle(fake):
    customer = fake.Customer.create(email="alice@example.com", source="tok_visa")

    assert customer.id.startswith("test_cus_")
    assert customer.email == "alice@example.com"

    updated = fake.Customer.update(customer.id, description="VIP", metadata={"plan": "silver"})

    assert updated.description == "VIP"
    assert updated.email == "alice@example.com"
    assert fake.Customer.retrieve(customer.id) == updated
    assert fake.Customer.list().count == 1


def test_unknown_customer(fake):
    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Customer.update("cus_ghost", email="x@example.com")

    assert exc_info.value.param == "customer"
    assert exc_info.value.message == "No such customer: cus_ghost"


def test_product_requires_name(fake):
    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Product.create()

    assert exc_info.value.param == "name"
    assert exc_info.value.message == "Missing required param: name."


def test_product_with_explicit_id(fake):
    product = fake.Product.create(id="prod_silver", name="Silver")

    assert product.id == "prod_silver"
    assert fake.Product.retrieve("prod_silver").name == "Silver"

    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Product.create(id="prod_silver", name="Silver again")

    assert exc_info.value.param == "id"


def test_product_update_and_list(fake, product):
    updated = fake.Product.update(product.id, active=False)

    assert updated.active is False
    assert [listed.id for listed in fake.Product.list().data] == [product.id]


def test_plan_created_by_helper_has_defaults(plan, product):
    assert plan.id == "silver_plan"
    assert plan.product == product.id
    assert plan.amount == 1337
    assert plan.currency == "usd"
    assert plan.interval == "month"
    assert plan.interval_count == 1


def test_helper_creates_product_when_missing(fake, helper):
    plan = helper.create_plan(id="orphan_plan")

    assert fake.Product.retrieve(plan.product).name == "Default Product"


@pytest.mark.parametrize(
    ("missing", "expected_param"),
    [
        ("amount", "amount"),
        ("currency", "currency"),
        ("interval", "interval"),
        ("product", "product"),
    ],
)
def test_plan_required_params(fake, product, missing, expected_param):
    params = {"amount": 100, "currency": "usd", "interval": "month", "product": product.id}
    params.pop(missing)

    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Plan.create(**params)

    assert exc_info.value.param == expected_param
    assert exc_info.value.message == f"Missing required param: {expected_param}."


def test_plan_invalid_interval(fake, product):
    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Plan.create(amount=100, currency="usd", interval="fortnight", product=product.id)

    assert exc_info.value.param == "interval"
    assert exc_info.value.message == "Invalid interval: must be one of day, month, week, or year"


def test_plan_already_exists(fake, helper, plan):
    with pytest.raises(InvalidRequestError) as exc_info:
        helper.create_plan(id=plan.id, product=plan.product)

    assert exc_info.value.param == "id"
    assert exc_info.value.message == "Plan already exists."


def test_plan_with_unknown_product(fake):
    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Plan.create(amount=100, currency="usd", interval="month", product="prod_ghost")

    assert exc_info.value.param == "product"
    assert exc_info.value.message == "No such product: prod_ghost"


def test_plan_list_filtered_by_product(fake, helper, plan, plan2):
    helper.create_plan(id="elsewhere_plan")

    assert fake.Plan.list().count == 3
    assert [listed.id for listed in fake.Plan.list(product=plan.product).data] == [
        "silver_plan",
        "one_more_1_plan",
    ]


def test_plan_update(fake, plan):
    updated = fake.Plan.update(plan.id, nickname="Silver monthly", metadata={"tier": "2"})

    assert updated.nickname == "Silver monthly"
    assert updated.metadata == {"tier": "2"}
    assert updated.amount == plan.amount


def test_list_starting_after_unknown_id(fake, product):
    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Product.list(starting_after="prod_ghost")

    assert exc_info.value.param == "starting_after"


@pytest.mark.parametrize("interval_count", [0, -1, True, "2"])
def test_plan_rejects_non_positive_interval_count(fake, helper, product, interval_count):
    with pytest.raises(InvalidRequestError) as exc_info:
        helper.create_plan(product=product.id, id="bad_count_plan", interval_count=interval_count)

    assert exc_info.value.param == "interval_count"
    assert exc_info.value.code == "parameter_invalid"
    assert exc_info.value.message == "Invalid interval_count: must be a positive integer"
    with pytest.raises(InvalidRequestError):
        fake.Plan.retrieve("bad_count_plan")


def test_plan_interval_count_defaults_to_one_only_when_omitted(fake, product):
    plan = fake.Plan.create(amount=100, currency="usd", interval="month", product=product.id)

    assert plan.interval_count == 1

    with pytest.raises(InvalidRequestError) as exc_info:
        fake.Plan.create(amount=100, currency="usd", interval="month", product=product.id, interval_count=None)

    assert exc_info.value.param == "interval_count"
