"""
core — 定位推薦核心

統一匯出所有核心元件，方便外部 import。

用法：
    from core import collect_elements, compute_uniqueness, assign_locators
    from core import format_xpath_literal, LocatorStrategy
    from core import LocatorHelperError, XmlParseError
"""

from core.exceptions import (
    ConfigError,
    InputError,
    LocatorHelperError,
    MissingRootError,
    OutputError,
    ReportWriteError,
    SnippetsDirRequiredError,
    SnippetWriteError,
    UnsupportedLanguageError,
    XmlParseError,
    XmlReadError,
)
from core.locator_selector import (
    assign_locators,
    build_text_xpath,
    determine_locator,
    format_xpath_literal,
)
from core.models import (
    ElementInfo,
    LocatorStrategy,
    LocatorSuggestion,
    TextSource,
    UniquenessMaps,
)
from core.normalizer import strip_namespace
from core.tree_walker import collect_elements
from core.uniqueness import compute_uniqueness
from core.xml_source import load_document, parse_document

__all__ = [
    # Pipeline
    "load_document",
    "parse_document",
    "collect_elements",
    "compute_uniqueness",
    "determine_locator",
    "assign_locators",
    # XPath
    "format_xpath_literal",
    "build_text_xpath",
    "strip_namespace",
    # Models
    "ElementInfo",
    "LocatorStrategy",
    "LocatorSuggestion",
    "TextSource",
    "UniquenessMaps",
    # Exceptions
    "LocatorHelperError",
    "InputError",
    "XmlReadError",
    "XmlParseError",
    "MissingRootError",
    "ConfigError",
    "UnsupportedLanguageError",
    "SnippetsDirRequiredError",
    "OutputError",
    "ReportWriteError",
    "SnippetWriteError",
]
