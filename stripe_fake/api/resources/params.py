from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from stripe_fake.application.dto.subscriptions import SubscriptionItemEntry
from stripe_fake.domain.exceptions import invalid_param_error


logger = logging.getLogger(__name__)


def known_params(params: Mapping[str, Any], known: Iterable[str], *, operation: str) -> dict[str, Any]:
    known = set(known)
    ignored = sorted(key for key in params if key not in known)
    if ignored:
        logger.debug("%s: ignoring params %s", operation, ignored)
    return {key: value for key, value in params.items() if key in known}


def item_entries(items: Any) -> list[SubscriptionItemEntry] | None:
    if items is None:
        return None
    if isinstance(items, Mapping):
        # forma de formulario: {"0": {...}, "1": {...}}
        try:
            keys = sorted(items, key=int)
        except (TypeError, ValueError):
            raise invalid_param_error("items", "must be a list of item hashes") from None
        items = [items[key] for key in keys]
    elif isinstance(items, (str, bytes)) or not isinstance(items, Iterable):
        raise invalid_param_error("items", "must be a list of item hashes")

    entries = []
    for index, entry in enumerate(items):
        if not isinstance(entry, Mapping):
            raise invalid_param_error(f"items[{index}]", "must be a hash")
        entries.append(
            SubscriptionItemEntry(
                plan=entry.get("plan"),
                quantity=entry.get("quantity"),
                id=entry.get("id"),
                metadata=entry.get("metadata"),
            )
        )
    return entries
