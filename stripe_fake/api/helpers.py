from __future__ import annotations

from typing import Any

from stripe_fake.api.fake_stripe import FakeStripe
from stripe_fake.api.schemas.resources import Plan, Product
from stripe_fake.shared.config import Settings, get_settings


class StripeTestHelper:
    """Cria produtos e planos com defaults razoaveis para testes."""

    def __init__(self, *, fake: FakeStripe, settings: Settings | None = None):
        self._fake = fake
        self._settings = settings or get_settings()

    def create_product(self, **params: Any) -> Product:
        payload: dict[str, Any] = {"name": "Default Product"}
        payload.update(params)
        return self._fake.Product.create(**payload)

    def create_plan(self, **params: Any) -> Plan:
        payload: dict[str, Any] = {
            "amount": self._settings.default_plan_amount,
            "currency": self._settings.default_currency,
            "interval": self._settings.default_plan_interval,
        }
        payload.update(params)
        if "product" not in payload:
            payload["product"] = self.create_product().id
        return self._fake.Plan.create(**payload)
