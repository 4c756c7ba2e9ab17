from __future__ import annotations

import logging

from stripe_fake.application.ports.resource_store_port import ResourceStorePort
from stripe_fake.domain.entities.billing_period import BillingPeriod


logger = logging.getLogger(__name__)


class PeriodPropagator:
    """Copia o periodo corrente da assinatura para cada um dos seus itens.

    Idempotente: rodar de novo depois de qualquer mutacao que mantenha o periodo
    da assinatura deixa todo item igual a ela.
    """

    def __init__(self, *, store: ResourceStorePort):
        self._store = store

    def propagate(self, *, subscription_id: str) -> BillingPeriod:
        subscription = self._store.get(resource_type="subscription", resource_id=subscription_id)
        if subscription is None:
            raise LookupError(f"Subscription {subscription_id} is not stored.")

        period = BillingPeriod(
            start=subscription["current_period_start"],
            end=subscription["current_period_end"],
        )
        item_ids = subscription.get("items", [])
        for item_id in item_ids:
            self._store.update(
                resource_type="subscription_item",
                resource_id=item_id,
                attrs=period.as_fields(),
            )

        logger.debug(
            "period_propagator: subscription=%s items=%s start=%s end=%s",
            subscription_id,
            len(item_ids),
            period.start,
            period.end,
        )
        return period
