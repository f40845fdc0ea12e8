"""
Snippet Synthesizer
把 LocatorSuggestion 轉成各語言的 Appium 呼叫程式碼。

純格式化，沒有任何判斷邏輯；唯一會出錯的地方是字串跳脫，
所以一律先跳脫反斜線、再跳脫字串分隔符號，避免已跳脫的分隔符號被重複處理。
"""

from __future__ import annotations

from appium.webdriver.common.appiumby import AppiumBy

from config.config import SUPPORTED_LANGUAGES
from core.models import LocatorSuggestion

# 各語言的字串分隔符號
_DELIMITERS = {
    "java": '"',
    "python": '"',
    "typescript": '"',
}

# AppiumBy 策略 × 語言 → 程式碼樣板
_TEMPLATES: dict[str, dict[str, str]] = {
    AppiumBy.ID: {
        "java": 'MobileElement element = driver.findElement(AppiumBy.id("{value}"));',
        "python": 'element = driver.find_element(AppiumBy.ID, "{value}")',
        "typescript": 'const element = await driver.findElement(AppiumBy.id("{value}"));',
    },
    AppiumBy.ACCESSIBILITY_ID: {
        "java": 'MobileElement element = driver.findElement(AppiumBy.accessibilityId("{value}"));',
        "python": 'element = driver.find_element(AppiumBy.ACCESSIBILITY_ID, "{value}")',
        "typescript": 'const element = await driver.findElement(AppiumBy.accessibilityId("{value}"));',
    },
    AppiumBy.XPATH: {
        "java": 'MobileElement element = driver.findElement(AppiumBy.xpath("{value}"));',
        "python": 'element = driver.find_element(AppiumBy.XPATH, "{value}")',
        "typescript": 'const element = await driver.findElement(AppiumBy.xpath("{value}"));',
    },
}


def escape_string_literal(value: str, language: str) -> str:
    """依語言規則跳脫字串常值：先 \\ 再分隔符號"""
    delimiter = _DELIMITERS[language]
    return value.replace("\\", "\\\\").replace(delimiter, f"\\{delimiter}")


def build_snippet(locator: LocatorSuggestion, language: str) -> str:
    """產生單一語言的程式碼"""
    template = _TEMPLATES[locator.strategy.by][language]
    # 用 replace 而非 format，value 裡的 { } 不會被當成樣板欄位
    return template.replace("{value}", escape_string_literal(locator.value, language))


def build_code_snippets(
    locator: LocatorSuggestion,
    languages: list[str] | None = None,
) -> dict[str, str]:
    """
    產生多語言程式碼。

    Args:
        locator: 定位建議
        languages: 要產生的語言，None 或空列表代表全部

    Returns:
        {language: code}，依 SUPPORTED_LANGUAGES 順序
    """
    wanted = set(languages) if languages else set(SUPPORTED_LANGUAGES)
    return {
        language: build_snippet(locator, language)
        for language in SUPPORTED_LANGUAGES
        if language in wanted
    }
