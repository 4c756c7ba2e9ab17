from __future__ import annotations

import pytest

from stripe_fake.api.fake_stripe import FakeStripe
from stripe_fake.api.helpers import StripeTestHelper
from stripe_fake.infrastructure.store.memory_store import InMemoryResourceStore
from stripe_fake.shared.config import Settings


FROZEN_NOW = 1_700_000_000


class FrozenClock:
    def __init__(self, now: int = FROZEN_NOW):
        self.current = now

    def now(self) -> int:
        return self.current


@pytest.fixture
def settings() -> Settings:
    return Settings(
        id_prefix="test_",
        default_currency="usd",
        default_plan_amount=1337,
        default_plan_interval="month",
    )


@pytest.fixture
def clock() -> FrozenClock:
    return FrozenClock()


@pytest.fixture
def store(settings: Settings) -> InMemoryResourceStore:
    return InMemoryResourceStore(id_prefix=settings.id_prefix)


@pytest.fixture
def fake(store: InMemoryResourceStore, clock: FrozenClock) -> FakeStripe:
    fake_stripe = FakeStripe(store=store, clock=clock)
    yield fake_stripe
    fake_stripe.reset()


@pytest.fixture
def helper(fake: FakeStripe, settings: Settings) -> StripeTestHelper:
    return StripeTestHelper(fake=fake, settings=settings)


@pytest.fixture
def product(helper: StripeTestHelper):
    return helper.create_product(name="Silver Product")


@pytest.fixture
def plan(helper: StripeTestHelper, product):
    return helper.create_plan(product=product.id, id="silver_plan")


@pytest.fixture
def plan2(helper: StripeTestHelper, product):
    return helper.create_plan(amount=100, id="one_more_1_plan", product=product.id)


@pytest.fixture
def customer(fake: FakeStripe):
    return fake.Customer.create(source="tok_visa")


@pytest.fixture
def subscription(fake: FakeStripe, customer, plan):
    return fake.Subscription.create(customer=customer.id, items=[{"plan": plan.id}])
