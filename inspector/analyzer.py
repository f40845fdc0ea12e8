"""
LocatorAnalyzer — 單一 XML 文件的定位分析流程

載入 → 前序走訪 → 全域唯一性統計 → 逐一決定 locator。
唯一性統計一定要在決定 locator 之前全部完成。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from xml.etree import ElementTree

from core.locator_selector import assign_locators
from core.models import ElementInfo, UniquenessMaps
from core.tree_walker import collect_elements
from core.uniqueness import compute_uniqueness
from core.xml_source import load_document
from generator.snippets import build_code_snippets
from utils.logger import logger


@dataclass
class AnalysisResult:
    """一次分析的完整結果"""
    source: str
    elements: list[ElementInfo] = field(default_factory=list)
    uniqueness: UniquenessMaps = field(default_factory=UniquenessMaps)

    @property
    def total(self) -> int:
        """分析的元素總數"""
        return len(self.elements)

    def snippets(self, element: ElementInfo, languages: list[str] | None = None) -> dict[str, str]:
        """取得單一元素的多語言程式碼"""
        if element.locator is None:
            return {}
        return build_code_snippets(element.locator, languages)

    def to_dict(self, languages: list[str] | None = None) -> dict:
        items = []
        for el in self.elements:
            data = el.to_dict()
            data["snippets"] = self.snippets(el, languages)
            items.append(data)
        return {"source": self.source, "total": self.total, "elements": items}


class LocatorAnalyzer:
    """
    定位分析器

    不需要連線裝置，直接從 page source 檔案計算每個元素的建議 locator。
    """

    def analyze(self, xml_path: str | Path, source: str | None = None) -> AnalysisResult:
        """
        分析 XML 檔案。

        Args:
            xml_path: XML 檔案路徑
            source: 報告上顯示的來源名稱（預設為 xml_path）

        Raises:
            InputError: 檔案無法讀取或解析
        """
        resolved = Path(xml_path).resolve()
        logger.info(f"分析 {resolved}")
        root = load_document(resolved)
        return self.analyze_root(root, source if source is not None else str(xml_path))

    def analyze_root(self, root: ElementTree.Element, source: str = "") -> AnalysisResult:
        """分析已解析的根節點"""
        elements = collect_elements(root)
        uniqueness = compute_uniqueness(elements)
        assign_locators(elements, uniqueness)

        logger.info(f"分析完成: {len(elements)} 個元素")
        return AnalysisResult(source=source, elements=elements, uniqueness=uniqueness)
