from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ListPage:
    records: list[dict[str, Any]]
    has_more: bool
    url: str
