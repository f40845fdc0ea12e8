"""
資料結構定義
一次分析過程中的元素、定位建議、唯一性統計。

所有物件都在單次執行中建立，建立後不再變動；
唯一例外是 ElementInfo.locator，在全域唯一性統計完成後才填入一次。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from appium.webdriver.common.appiumby import AppiumBy


class TextSource(Enum):
    """文字來源"""
    ATTRIBUTE = "attribute"   # 明確的 text 屬性
    NODE = "node"             # 節點自身的文字內容


class LocatorStrategy(Enum):
    """定位策略，依可靠度排序"""
    ID = "id"
    ACCESSIBILITY_ID = "accessibility_id"
    XPATH_TEXT = "xpath_text"      # 以文字條件組出的 XPath
    XPATH_PATH = "xpath_path"      # 純結構位置的完整 XPath

    @property
    def by(self) -> str:
        """實際執行時使用的 AppiumBy 策略"""
        return _APPIUM_BY[self]

    @property
    def label(self) -> str:
        """報告上顯示的名稱，如 By.ID"""
        return _LABELS[self]


_APPIUM_BY = {
    LocatorStrategy.ID: AppiumBy.ID,
    LocatorStrategy.ACCESSIBILITY_ID: AppiumBy.ACCESSIBILITY_ID,
    LocatorStrategy.XPATH_TEXT: AppiumBy.XPATH,
    LocatorStrategy.XPATH_PATH: AppiumBy.XPATH,
}

_LABELS = {
    LocatorStrategy.ID: "By.ID",
    LocatorStrategy.ACCESSIBILITY_ID: "By.ACCESSIBILITY_ID",
    LocatorStrategy.XPATH_TEXT: "By.XPATH",
    LocatorStrategy.XPATH_PATH: "By.XPATH",
}


@dataclass(frozen=True)
class LocatorSuggestion:
    """單一元素的定位建議"""
    strategy: LocatorStrategy
    value: str
    reason: str

    @property
    def locator(self) -> tuple[str, str]:
        """(by, value)，可直接丟給 driver.find_element(*locator)"""
        return self.strategy.by, self.value


@dataclass
class ElementInfo:
    """走訪過程中遇到的單一元素"""
    index: int                                  # 前序走訪順序，從 1 開始
    tag: str                                    # 去掉 namespace 的 tag
    xpath: str                                  # 從根節點開始的位置路徑
    attributes: dict[str, str] = field(default_factory=dict)
    resource_id: str | None = None
    content_desc: str | None = None
    class_name: str | None = None
    text_value: str | None = None
    text_source: TextSource | None = None
    locator: LocatorSuggestion | None = None

    @property
    def display_text(self) -> str:
        """報告顯示用文字：原始 text 屬性優先"""
        if "text" in self.attributes:
            return self.attributes["text"]
        return self.text_value if self.text_value is not None else "-"

    def to_dict(self) -> dict:
        data = {
            "index": self.index,
            "tag": self.tag,
            "class": self.class_name,
            "text": self.text_value,
            "text_source": self.text_source.value if self.text_source else None,
            "resource_id": self.resource_id,
            "content_desc": self.content_desc,
            "xpath": self.xpath,
            "attributes": dict(self.attributes),
            "locator": None,
        }
        if self.locator:
            data["locator"] = {
                "strategy": self.locator.strategy.label,
                "by": self.locator.strategy.by,
                "value": self.locator.value,
                "reason": self.locator.reason,
            }
        return data


@dataclass
class UniquenessMaps:
    """三張值 → 出現次數的統計表"""
    resource: dict[str, int] = field(default_factory=dict)
    content_desc: dict[str, int] = field(default_factory=dict)
    text: dict[str, int] = field(default_factory=dict)

    def is_unique_resource(self, value: str | None) -> bool:
        return bool(value) and self.resource.get(value) == 1

    def is_unique_content_desc(self, value: str | None) -> bool:
        return bool(value) and self.content_desc.get(value) == 1

    def is_unique_text(self, value: str | None) -> bool:
        return bool(value) and self.text.get(value) == 1
