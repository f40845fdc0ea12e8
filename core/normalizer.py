"""
屬性正規化

把 tag / 屬性名稱的 namespace 前綴去掉，
並把同一個邏輯欄位的多種寫法 (resource-id / resourceId ...) 收斂成單一值。
"""

from __future__ import annotations

from xml.etree import ElementTree

# 別名優先順序：第一個有內容的值勝出
RESOURCE_ID_ALIASES = ("resource-id", "resourceId")
CONTENT_DESC_ALIASES = ("content-desc", "contentDescription", "description", "name", "label")
CLASS_NAME_ALIASES = ("class", "className")


def strip_namespace(value: str | None) -> str:
    """
    去掉 {uri} 或 prefix: 前綴，只留 local name。

    例如：
        "{http://schemas.android.com/apk/res/android}text" → "text"
        "android:text" → "text"
    """
    if not value:
        return ""
    brace = value.find("}")
    without_brace = value[brace + 1:] if brace >= 0 else value
    colon = without_brace.find(":")
    return without_brace[colon + 1:] if colon >= 0 else without_brace


def normalize_attributes(element: ElementTree.Element) -> dict[str, str]:
    """屬性名稱去 namespace；同名的後者覆蓋前者"""
    attributes: dict[str, str] = {}
    for name, value in element.attrib.items():
        attributes[strip_namespace(name)] = value
    return attributes


def clean_text(value: str | None) -> str | None:
    """去頭尾空白，空字串視為不存在"""
    if value is None:
        return None
    trimmed = value.strip()
    return trimmed or None


def first_non_empty(*values: str | None) -> str | None:
    for value in values:
        if value and value.strip():
            return value.strip()
    return None


def resolve_alias(attributes: dict[str, str], aliases: tuple[str, ...]) -> str | None:
    """依別名順序取第一個非空值，全部沒有就回傳 None"""
    return first_non_empty(*(attributes.get(alias) for alias in aliases))


def own_text(element: ElementTree.Element) -> str:
    """
    節點自身的文字內容

    只串接直屬的文字節點（element.text + 每個子元素的 tail），
    子元素內部的文字不算在內。
    """
    parts = [element.text or ""]
    for child in element:
        parts.append(child.tail or "")
    return "".join(parts)
