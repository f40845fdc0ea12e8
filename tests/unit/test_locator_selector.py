"""
core/locator_selector.py 單元測試

驗證 XPath 字串常值、文字條件 XPath、規則優先順序、退回完整路徑。
"""

import re

import pytest
from appium.webdriver.common.appiumby import AppiumBy

from core.locator_selector import (
    RULES,
    assign_locators,
    build_text_xpath,
    determine_locator,
    format_xpath_literal,
)
from core.models import ElementInfo, LocatorStrategy, TextSource, UniquenessMaps
from core.uniqueness import compute_uniqueness


def _element(index: int = 1, tag: str = "Button", **kwargs) -> ElementInfo:
    return ElementInfo(index=index, tag=tag, xpath=f"//hierarchy/{tag}[{index}]", **kwargs)


def _evaluate_literal(expr: str) -> str:
    """把 format_xpath_literal 的輸出還原成字串（只支援它會產生的語法）"""
    if expr.startswith("concat(") and expr.endswith(")"):
        tokens = re.findall(r"'[^']*'|\"[^\"]*\"", expr[len("concat("):-1])
        return "".join(token[1:-1] for token in tokens)
    assert expr[0] == expr[-1] and expr[0] in "'\""
    return expr[1:-1]


@pytest.mark.unit
class TestFormatXPathLiteral:
    """format_xpath_literal"""

    @pytest.mark.unit
    def test_plain_value_single_quoted(self):
        assert format_xpath_literal("Submit") == "'Submit'"

    @pytest.mark.unit
    def test_single_quote_uses_double_quotes(self):
        """It's → "It's"，不嘗試單引號包裝"""
        assert format_xpath_literal("It's") == '"It\'s"'

    @pytest.mark.unit
    def test_double_quote_only_stays_single_quoted(self):
        assert format_xpath_literal('Say "hi"') == "'Say \"hi\"'"

    @pytest.mark.unit
    def test_both_quotes_use_concat(self):
        value = 'He said "it\'s"'
        assert format_xpath_literal(value) == "concat('He said \"it', \"'\", 's\"')"

    @pytest.mark.unit
    def test_leading_and_trailing_single_quotes(self):
        """空片段不輸出，但引號本身保留"""
        value = "'a\"b'"
        assert format_xpath_literal(value) == "concat(\"'\", 'a\"b', \"'\")"

    @pytest.mark.unit
    def test_adjacent_single_quotes(self):
        value = "x''\"y"
        assert format_xpath_literal(value) == "concat('x', \"'\", \"'\", '\"y')"

    @pytest.mark.unit
    @pytest.mark.parametrize("value", [
        "plain",
        "It's",
        'quote "me"',
        'both \' and "',
        "''\"\"''",
        "",
    ])
    def test_round_trip(self, value):
        """還原後等於原字串"""
        assert _evaluate_literal(format_xpath_literal(value)) == value


@pytest.mark.unit
class TestBuildTextXPath:
    """build_text_xpath"""

    @pytest.mark.unit
    def test_attribute_source(self):
        assert build_text_xpath("Button", "Submit", TextSource.ATTRIBUTE) == "//Button[@text='Submit']"

    @pytest.mark.unit
    def test_node_source_uses_normalize_space(self):
        assert (
            build_text_xpath("Button", "Submit", TextSource.NODE)
            == "//Button[normalize-space(.)='Submit']"
        )

    @pytest.mark.unit
    def test_literal_is_escaped(self):
        assert build_text_xpath("node", "It's", TextSource.ATTRIBUTE) == '//node[@text="It\'s"]'


@pytest.mark.unit
class TestDetermineLocator:
    """規則優先順序"""

    @pytest.mark.unit
    def test_unique_resource_id_wins(self):
        el = _element(resource_id="com.app:id/login", content_desc="Login", text_value="Login",
                      text_source=TextSource.ATTRIBUTE)
        suggestion = determine_locator(el, compute_uniqueness([el]))
        assert suggestion.strategy == LocatorStrategy.ID
        assert suggestion.value == "com.app:id/login"
        assert suggestion.reason == "Unique resource-id"

    @pytest.mark.unit
    def test_duplicate_resource_id_falls_to_content_desc(self):
        a = _element(1, resource_id="dup", content_desc="First")
        b = _element(2, resource_id="dup", content_desc="Second")
        suggestion = determine_locator(a, compute_uniqueness([a, b]))
        assert suggestion.strategy == LocatorStrategy.ACCESSIBILITY_ID
        assert suggestion.value == "First"
        assert suggestion.reason == "Unique content-desc"

    @pytest.mark.unit
    def test_unique_text_builds_xpath(self):
        a = _element(1, text_value="Submit", text_source=TextSource.NODE)
        b = _element(2, text_value="Cancel", text_source=TextSource.ATTRIBUTE)
        maps = compute_uniqueness([a, b])
        assert determine_locator(a, maps).value == "//Button[normalize-space(.)='Submit']"
        suggestion = determine_locator(b, maps)
        assert suggestion.strategy == LocatorStrategy.XPATH_TEXT
        assert suggestion.value == "//Button[@text='Cancel']"
        assert suggestion.reason == "Unique text value"

    @pytest.mark.unit
    def test_fallback_to_full_xpath(self):
        a = _element(1, text_value="Login", text_source=TextSource.ATTRIBUTE)
        b = _element(2, text_value="Login", text_source=TextSource.ATTRIBUTE)
        suggestion = determine_locator(a, compute_uniqueness([a, b]))
        assert suggestion.strategy == LocatorStrategy.XPATH_PATH
        assert suggestion.value == a.xpath
        assert suggestion.reason == "No unique attributes; fallback to full XPath"

    @pytest.mark.unit
    def test_no_identifying_data_is_not_an_error(self):
        el = _element()
        assert determine_locator(el, UniquenessMaps()).strategy == LocatorStrategy.XPATH_PATH

    @pytest.mark.unit
    def test_rules_are_ordered_id_desc_text(self):
        """規則表順序即可靠度排序"""
        el = _element(resource_id="r", content_desc="d", text_value="t", text_source=TextSource.NODE)
        maps = compute_uniqueness([el])
        strategies = [build(el).strategy for _, build in RULES]
        assert strategies == [
            LocatorStrategy.ID,
            LocatorStrategy.ACCESSIBILITY_ID,
            LocatorStrategy.XPATH_TEXT,
        ]
        assert all(predicate(el, maps) for predicate, _ in RULES)

    @pytest.mark.unit
    def test_suggestion_exposes_appium_locator(self):
        el = _element(content_desc="Help")
        suggestion = determine_locator(el, compute_uniqueness([el]))
        assert suggestion.locator == (AppiumBy.ACCESSIBILITY_ID, "Help")


@pytest.mark.unit
class TestAssignLocators:
    """assign_locators"""

    @pytest.mark.unit
    def test_every_element_gets_locator(self):
        elements = [_element(i, text_value="same", text_source=TextSource.NODE) for i in range(1, 4)]
        assign_locators(elements, compute_uniqueness(elements))
        assert all(el.locator is not None for el in elements)
        assert {el.locator.strategy for el in elements} == {LocatorStrategy.XPATH_PATH}

    @pytest.mark.unit
    def test_later_duplicates_affect_earlier_elements(self):
        """第一個元素是否唯一取決於後面的元素"""
        first = _element(1, resource_id="dup")
        later = _element(2, resource_id="dup")
        assign_locators([first, later], compute_uniqueness([first, later]))
        assert first.locator.strategy == LocatorStrategy.XPATH_PATH
