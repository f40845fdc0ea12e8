"""
報告產生器
把 AnalysisResult 轉成純文字或 JSON 報告。
"""

from __future__ import annotations

import json

from inspector.analyzer import AnalysisResult

# 語言 → 報告上的顯示名稱
_LANGUAGE_LABELS = {
    "java": "Java",
    "python": "Python",
    "typescript": "TypeScript",
}


def build_report(result: AnalysisResult, languages: list[str] | None = None) -> str:
    """純文字報告，每個元素一段"""
    lines: list[str] = [
        "Smart Locator Helper Report",
        f"Source file: {result.source}",
        f"Total elements analyzed: {result.total}",
        "",
    ]

    for el in result.elements:
        if el.locator is None:
            continue
        lines.append(f"[{el.index}] {el.tag}")
        lines.append(f"  class: {el.class_name or '-'}")
        lines.append(f"  text: {el.display_text}")
        lines.append(f"  resource-id: {el.resource_id or '-'}")
        lines.append(f"  content-desc: {el.content_desc or '-'}")
        lines.append(f"  Recommended: {el.locator.strategy.label}")
        lines.append(f"  Locator value: {el.locator.value}")
        lines.append(f"  Reason: {el.locator.reason}")
        for language, code in result.snippets(el, languages).items():
            lines.append(f"    {_LANGUAGE_LABELS[language]}: {code}")
        lines.append(f"  Full XPath: {el.xpath}")
        lines.append("")

    return "\n".join(lines)


def build_json_report(result: AnalysisResult, languages: list[str] | None = None) -> str:
    """JSON 報告，給其他工具串接用"""
    return json.dumps(result.to_dict(languages), ensure_ascii=False, indent=2)
