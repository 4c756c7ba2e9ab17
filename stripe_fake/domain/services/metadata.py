from __future__ import annotations

from collections.abc import Mapping


def merge_metadata(current: Mapping[str, str] | None, updates: Mapping[str, str] | None) -> dict[str, str]:
    merged = dict(current or {})
    if not updates:
        return merged
    for key, value in updates.items():
        # chave vazia remove a entrada, como na API real
        if value is None or value == "":
            merged.pop(key, None)
            continue
        merged[key] = str(value)
    return merged
