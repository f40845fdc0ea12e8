"""
Tree Walker — 前序走訪元素樹

每個元素產生一筆 ElementInfo：
    - index 依前序順序從 1 開始編號
    - xpath 從根節點 //<root-tag> 開始，同層同 tag 超過一個時加上 [n]

例如：
    <hierarchy>
      <Button/>        → //hierarchy/Button[1]
      <Button/>        → //hierarchy/Button[2]
      <TextView/>      → //hierarchy/TextView
    </hierarchy>

文字、註解等非元素節點不編號、不參與路徑，但文字會併入父節點的 node text。
"""

from __future__ import annotations

from collections import Counter
from xml.etree import ElementTree

from config.config import Config
from core.models import ElementInfo, TextSource
from core.normalizer import (
    CLASS_NAME_ALIASES,
    CONTENT_DESC_ALIASES,
    RESOURCE_ID_ALIASES,
    clean_text,
    normalize_attributes,
    own_text,
    resolve_alias,
    strip_namespace,
)
from utils.logger import logger


def tag_name(element: ElementTree.Element) -> str:
    """去 namespace 的 tag，沒有名稱時回傳 Config.FALLBACK_TAG"""
    return strip_namespace(element.tag) or Config.FALLBACK_TAG


def child_elements(element: ElementTree.Element) -> list[ElementTree.Element]:
    """只取元素子節點（排除註解 / processing instruction）"""
    return [child for child in element if isinstance(child.tag, str)]


def child_segments(children: list[ElementTree.Element]) -> list[str]:
    """
    計算每個子元素的路徑片段。

    同 tag 的兄弟超過一個才加 [n]，n 依出現順序從 1 開始。
    """
    tags = [tag_name(child) for child in children]
    totals = Counter(tags)
    seen: Counter[str] = Counter()
    segments: list[str] = []
    for tag in tags:
        seen[tag] += 1
        segments.append(f"{tag}[{seen[tag]}]" if totals[tag] > 1 else tag)
    return segments


def build_element_info(element: ElementTree.Element, index: int, xpath: str) -> ElementInfo:
    """把單一 XML 元素轉成 ElementInfo（尚未決定 locator）"""
    tag = tag_name(element)
    attributes = normalize_attributes(element)

    attribute_text = clean_text(attributes.get("text"))
    node_text = clean_text(own_text(element))
    if attribute_text:
        text_value, text_source = attribute_text, TextSource.ATTRIBUTE
    elif node_text:
        text_value, text_source = node_text, TextSource.NODE
    else:
        text_value, text_source = None, None

    return ElementInfo(
        index=index,
        tag=tag,
        xpath=xpath,
        attributes=attributes,
        resource_id=resolve_alias(attributes, RESOURCE_ID_ALIASES),
        content_desc=resolve_alias(attributes, CONTENT_DESC_ALIASES),
        class_name=resolve_alias(attributes, CLASS_NAME_ALIASES) or tag,
        text_value=text_value,
        text_source=text_source,
    )


def collect_elements(root: ElementTree.Element) -> list[ElementInfo]:
    """
    前序走訪整棵樹。

    以明確的 stack 取代遞迴，很深的 dump 也不會撞到 recursion limit。

    Returns:
        依走訪順序排列的 ElementInfo 列表
    """
    elements: list[ElementInfo] = []
    stack: list[tuple[ElementTree.Element, str]] = [(root, f"//{tag_name(root)}")]

    while stack:
        element, xpath = stack.pop()
        elements.append(build_element_info(element, len(elements) + 1, xpath))

        children = child_elements(element)
        segments = child_segments(children)
        # 反向推入，pop 時才會是由左到右
        for child, segment in reversed(list(zip(children, segments))):
            stack.append((child, f"{xpath}/{segment}"))

    logger.debug(f"走訪完成，共 {len(elements)} 個元素")
    return elements
