from __future__ import annotations

from typing import Any

from stripe_fake.application.dto.listing import ListPage
from stripe_fake.application.services.request_validator import is_positive_int
from stripe_fake.domain.entities.resource import ResourceType
from stripe_fake.domain.exceptions import invalid_param_error, no_such_resource_error


MAX_PAGE_LIMIT = 100


def paginate(
    records: list[dict[str, Any]],
    *,
    resource_type: ResourceType,
    url: str,
    limit: int | None,
    starting_after: str | None,
) -> ListPage:
    if limit is not None and not (is_positive_int(limit) and limit <= MAX_PAGE_LIMIT):
        raise invalid_param_error("limit", f"must be between 1 and {MAX_PAGE_LIMIT}")

    if starting_after is not None:
        ids = [record["id"] for record in records]
        if starting_after not in ids:
            raise no_such_resource_error(resource_type, starting_after, param="starting_after")
        records = records[ids.index(starting_after) + 1 :]

    if limit is None or limit >= len(records):
        return ListPage(records=records, has_more=False, url=url)
    return ListPage(records=records[:limit], has_more=True, url=url)
