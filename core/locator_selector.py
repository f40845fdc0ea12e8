"""
Locator Selector — 依可靠度挑選定位策略

規則依序判斷，第一個成立的勝出：
    1. resource-id 全文件唯一      → By.ID
    2. content-desc 全文件唯一     → By.ACCESSIBILITY_ID
    3. text 全文件唯一             → By.XPATH (文字條件)
    4. 以上皆非                    → By.XPATH (完整結構路徑)

resource-id 跨版本最穩定，其次是無障礙標籤，再來是畫面文字，
最後才退回結構位置。這個函式沒有錯誤狀態，每個元素一定拿到建議。
"""

from __future__ import annotations

from collections import Counter
from typing import Callable

from core.models import (
    ElementInfo,
    LocatorStrategy,
    LocatorSuggestion,
    TextSource,
    UniquenessMaps,
)
from utils.logger import logger


# ── XPath 字串 ──

def format_xpath_literal(value: str) -> str:
    """
    把任意字串包成合法的 XPath 字串常值。

    XPath 1.0 沒有跳脫字元，所以：
        不含 '        → 'value'
        含 ' 不含 "   → "value"
        兩種都有      → concat('a', "'", 'b')
    """
    if "'" not in value:
        return f"'{value}'"
    if '"' not in value:
        return f'"{value}"'

    parts = value.split("'")
    pieces: list[str] = []
    for i, part in enumerate(parts):
        if part:
            pieces.append(f"'{part}'")
        if i != len(parts) - 1:
            pieces.append("\"'\"")
    return f"concat({', '.join(pieces)})"


def build_text_xpath(tag: str, text: str, source: TextSource | None) -> str:
    """
    以文字條件組 XPath。

    文字來自 text 屬性 → [@text=...]
    來自節點內容     → [normalize-space(.)=...]，忽略 markup 排版造成的空白差異
    """
    literal = format_xpath_literal(text)
    if source == TextSource.ATTRIBUTE:
        return f"//{tag}[@text={literal}]"
    return f"//{tag}[normalize-space(.)={literal}]"


# ── 規則表 ──

Rule = tuple[
    Callable[[ElementInfo, UniquenessMaps], bool],
    Callable[[ElementInfo], LocatorSuggestion],
]

RULES: list[Rule] = [
    (
        lambda el, u: u.is_unique_resource(el.resource_id),
        lambda el: LocatorSuggestion(LocatorStrategy.ID, el.resource_id, "Unique resource-id"),
    ),
    (
        lambda el, u: u.is_unique_content_desc(el.content_desc),
        lambda el: LocatorSuggestion(
            LocatorStrategy.ACCESSIBILITY_ID, el.content_desc, "Unique content-desc"
        ),
    ),
    (
        lambda el, u: u.is_unique_text(el.text_value),
        lambda el: LocatorSuggestion(
            LocatorStrategy.XPATH_TEXT,
            build_text_xpath(el.tag, el.text_value, el.text_source),
            "Unique text value",
        ),
    ),
]


def _fallback(element: ElementInfo) -> LocatorSuggestion:
    return LocatorSuggestion(
        LocatorStrategy.XPATH_PATH,
        element.xpath,
        "No unique attributes; fallback to full XPath",
    )


def determine_locator(element: ElementInfo, uniqueness: UniquenessMaps) -> LocatorSuggestion:
    """依 RULES 順序挑出第一個成立的策略"""
    for predicate, build in RULES:
        if predicate(element, uniqueness):
            return build(element)
    return _fallback(element)


def assign_locators(elements: list[ElementInfo], uniqueness: UniquenessMaps) -> None:
    """
    為每個元素填入 locator。

    uniqueness 必須是「全部」元素統計完的結果：
    第 N 個元素是否唯一，取決於排在它後面的元素。
    """
    for element in elements:
        element.locator = determine_locator(element, uniqueness)

    totals = Counter(el.locator.strategy.value for el in elements)
    logger.info(
        "定位策略統計: "
        + ", ".join(f"{name}={count}" for name, count in sorted(totals.items()))
    )
