"""
Uniqueness Analyzer — 全文件唯一性統計

對 resource-id、content-desc、text 三種值各自計數。
空值不計入，所以空字串永遠不會被當成「唯一」。
"""

from __future__ import annotations

from core.models import ElementInfo, UniquenessMaps


def _increment(table: dict[str, int], key: str | None) -> None:
    if not key:
        return
    table[key] = table.get(key, 0) + 1


def compute_uniqueness(elements: list[ElementInfo]) -> UniquenessMaps:
    """掃過全部元素一次，建立三張計數表"""
    maps = UniquenessMaps()
    for element in elements:
        _increment(maps.resource, element.resource_id)
        _increment(maps.content_desc, element.content_desc)
        _increment(maps.text, element.text_value)
    return maps
