from __future__ import annotations

from typing import Any

from stripe_fake.api.mappers import ResourceMapper
from stripe_fake.api.schemas.resources import Customer, ListObject, Plan, Product
from stripe_fake.application.dto.catalog import (
    CreateCustomerInput,
    CreatePlanInput,
    CreateProductInput,
    ListInput,
    UpdateCustomerInput,
    UpdatePlanInput,
    UpdateProductInput,
)
from stripe_fake.application.use_cases.customers import (
    CreateCustomerUseCase,
    ListCustomersUseCase,
    RetrieveCustomerUseCase,
    UpdateCustomerUseCase,
)
from stripe_fake.application.use_cases.plans import (
    CreatePlanUseCase,
    ListPlansUseCase,
    RetrievePlanUseCase,
    UpdatePlanUseCase,
)
from stripe_fake.application.use_cases.products import (
    CreateProductUseCase,
    ListProductsUseCase,
    RetrieveProductUseCase,
    UpdateProductUseCase,
)

from .params import known_params


_LIST_PARAMS = ("limit", "starting_after")


class CustomerResource:
    def __init__(
        self,
        *,
        create_use_case: CreateCustomerUseCase,
        update_use_case: UpdateCustomerUseCase,
        retrieve_use_case: RetrieveCustomerUseCase,
        list_use_case: ListCustomersUseCase,
        mapper: ResourceMapper,
    ):
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._retrieve_use_case = retrieve_use_case
        self._list_use_case = list_use_case
        self._mapper = mapper

    def create(self, **params: Any) -> Customer:
        # source (token de cartao) e aceito e descartado
        params = known_params(params, ("email", "description", "metadata"), operation="customers.create")
        record = self._create_use_case.execute(CreateCustomerInput(**params))
        return self._mapper.customer(record)

    def update(self, id: str, **params: Any) -> Customer:
        params = known_params(params, ("email", "description", "metadata"), operation="customers.update")
        record = self._update_use_case.execute(UpdateCustomerInput(customer_id=id, **params))
        return self._mapper.customer(record)

    modify = update

    def retrieve(self, id: str) -> Customer:
        return self._mapper.customer(self._retrieve_use_case.execute(customer_id=id))

    def list(self, **params: Any) -> ListObject[Customer]:
        params = known_params(params, _LIST_PARAMS, operation="customers.list")
        page = self._list_use_case.execute(ListInput(**params))
        return self._mapper.list_page(page, self._mapper.customer)


class ProductResource:
    def __init__(
        self,
        *,
        create_use_case: CreateProductUseCase,
        update_use_case: UpdateProductUseCase,
        retrieve_use_case: RetrieveProductUseCase,
        list_use_case: ListProductsUseCase,
        mapper: ResourceMapper,
    ):
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._retrieve_use_case = retrieve_use_case
        self._list_use_case = list_use_case
        self._mapper = mapper

    def create(self, **params: Any) -> Product:
        params = known_params(params, ("id", "name", "active", "metadata"), operation="products.create")
        record = self._create_use_case.execute(
            CreateProductInput(
                name=params.get("name"),
                id=params.get("id"),
                active=params.get("active", True),
                metadata=params.get("metadata"),
            )
        )
        return self._mapper.product(record)

    def update(self, id: str, **params: Any) -> Product:
        params = known_params(params, ("name", "active", "metadata"), operation="products.update")
        record = self._update_use_case.execute(UpdateProductInput(product_id=id, **params))
        return self._mapper.product(record)

    modify = update

    def retrieve(self, id: str) -> Product:
        return self._mapper.product(self._retrieve_use_case.execute(product_id=id))

    def list(self, **params: Any) -> ListObject[Product]:
        params = known_params(params, _LIST_PARAMS, operation="products.list")
        page = self._list_use_case.execute(ListInput(**params))
        return self._mapper.list_page(page, self._mapper.product)


class PlanResource:
    def __init__(
        self,
        *,
        create_use_case: CreatePlanUseCase,
        update_use_case: UpdatePlanUseCase,
        retrieve_use_case: RetrievePlanUseCase,
        list_use_case: ListPlansUseCase,
        mapper: ResourceMapper,
    ):
        self._create_use_case = create_use_case
        self._update_use_case = update_use_case
        self._retrieve_use_case = retrieve_use_case
        self._list_use_case = list_use_case
        self._mapper = mapper

    def create(self, **params: Any) -> Plan:
        params = known_params(
            params,
            (
                "id",
                "amount",
                "currency",
                "interval",
                "interval_count",
                "product",
                "nickname",
                "active",
                "metadata",
            ),
            operation="plans.create",
        )
        record = self._create_use_case.execute(
            CreatePlanInput(
                amount=params.get("amount"),
                currency=params.get("currency"),
                interval=params.get("interval"),
                product=params.get("product"),
                id=params.get("id"),
                interval_count=params.get("interval_count", 1),
                nickname=params.get("nickname"),
                active=params.get("active", True),
                metadata=params.get("metadata"),
            )
        )
        return self._mapper.plan(record)

    def update(self, id: str, **params: Any) -> Plan:
        params = known_params(params, ("nickname", "active", "metadata"), operation="plans.update")
        record = self._update_use_case.execute(UpdatePlanInput(plan_id=id, **params))
        return self._mapper.plan(record)

    modify = update

    def retrieve(self, id: str) -> Plan:
        return self._mapper.plan(self._retrieve_use_case.execute(plan_id=id))

    def list(self, **params: Any) -> ListObject[Plan]:
        params = known_params(params, (*_LIST_PARAMS, "product"), operation="plans.list")
        page = self._list_use_case.execute(ListInput(**params))
        return self._mapper.list_page(page, self._mapper.plan)
