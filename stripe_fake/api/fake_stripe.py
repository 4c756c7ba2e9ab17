from __future__ import annotations

import logging

from stripe_fake.api.mappers import ResourceMapper
from stripe_fake.api.resources.catalog import CustomerResource, PlanResource, ProductResource
from stripe_fake.api.resources.subscription_items import SubscriptionItemResource
from stripe_fake.api.resources.subscriptions import SubscriptionResource
from stripe_fake.application.ports.clock_port import ClockPort
from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.application.services.period_propagator import PeriodPropagator
from stripe_fake.application.services.request_validator import RequestValidator
from stripe_fake.application.use_cases import customers, plans, products, subscription_items, subscriptions
from stripe_fake.infrastructure.clock import SystemClock
from stripe_fake.infrastructure.store.memory_store import InMemoryResourceStore
from stripe_fake.shared.config import Settings, get_settings


logger = logging.getLogger(__name__)


class FakeStripe:
    """Fachada com o mesmo formato do modulo ``stripe``.

    ``fake.SubscriptionItem.create(...)`` espelha ``stripe.SubscriptionItem.create(...)``,
    entao codigo cliente pode receber o fake no lugar do SDK. O store e
    injetado explicitamente; ``reset()`` limpa o estado entre testes.
    """

    def __init__(self, *, store: ResourceStorePort, clock: ClockPort | None = None):
        self._store = store
        clock = clock or SystemClock()
        validator = RequestValidator(store=store)
        period_propagator = PeriodPropagator(store=store)
        mapper = ResourceMapper(store=store)

        self.Customer = CustomerResource(
            create_use_case=customers.CreateCustomerUseCase(store=store, clock=clock),
            update_use_case=customers.UpdateCustomerUseCase(store=store, validator=validator),
            retrieve_use_case=customers.RetrieveCustomerUseCase(validator=validator),
            list_use_case=customers.ListCustomersUseCase(store=store),
            mapper=mapper,
        )
        self.Product = ProductResource(
            create_use_case=products.CreateProductUseCase(store=store, validator=validator, clock=clock),
            update_use_case=products.UpdateProductUseCase(store=store, validator=validator),
            retrieve_use_case=products.RetrieveProductUseCase(validator=validator),
            list_use_case=products.ListProductsUseCase(store=store),
            mapper=mapper,
        )
        self.Plan = PlanResource(
            create_use_case=plans.CreatePlanUseCase(store=store, validator=validator, clock=clock),
            update_use_case=plans.UpdatePlanUseCase(store=store, validator=validator),
            retrieve_use_case=plans.RetrievePlanUseCase(validator=validator),
            list_use_case=plans.ListPlansUseCase(store=store),
            mapper=mapper,
        )
        self.Subscription = SubscriptionResource(
            create_use_case=subscriptions.CreateSubscriptionUseCase(
                store=store,
                validator=validator,
                period_propagator=period_propagator,
                clock=clock,
            ),
            update_use_case=subscriptions.UpdateSubscriptionUseCase(
                store=store,
                validator=validator,
                period_propagator=period_propagator,
                clock=clock,
            ),
            retrieve_use_case=subscriptions.RetrieveSubscriptionUseCase(validator=validator),
            list_use_case=subscriptions.ListSubscriptionsUseCase(store=store),
            mapper=mapper,
        )
        self.SubscriptionItem = SubscriptionItemResource(
            create_use_case=subscription_items.CreateSubscriptionItemUseCase(
                store=store,
                validator=validator,
                period_propagator=period_propagator,
                clock=clock,
            ),
            update_use_case=subscription_items.UpdateSubscriptionItemUseCase(store=store, validator=validator),
            retrieve_use_case=subscription_items.RetrieveSubscriptionItemUseCase(validator=validator),
            list_use_case=subscription_items.ListSubscriptionItemsUseCase(store=store, validator=validator),
            mapper=mapper,
        )

    @property
    def store(self) -> ResourceStorePort:
        return self._store

    def reset(self) -> None:
        self._store.reset()


def create_fake_stripe(*, settings: Settings | None = None, clock: ClockPort | None = None) -> FakeStripe:
    settings = settings or get_settings()
    store = InMemoryResourceStore(id_prefix=settings.id_prefix)
    logger.info("fake_stripe: created store id_prefix=%s", settings.id_prefix)
    return FakeStripe(store=store, clock=clock)
