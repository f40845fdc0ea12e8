"""
自訂 Exception 體系

統一的錯誤處理階層，讓每種失敗都有明確的分類與訊息。
CLI 入口只需 catch LocatorHelperError 就能攔截所有預期中的失敗，
也可以精準 catch 子類別 (如 XmlParseError)。

Exception 樹：
    LocatorHelperError
    ├── InputError
    │   ├── XmlReadError
    │   ├── XmlParseError
    │   └── MissingRootError
    ├── ConfigError
    │   ├── UnsupportedLanguageError
    │   └── SnippetsDirRequiredError
    └── OutputError
        ├── ReportWriteError
        └── SnippetWriteError

單一節點找不到唯一屬性「不是」錯誤，一律退回完整 XPath。
"""


class LocatorHelperError(Exception):
    """所有例外的基底，catch 這個就能攔截一切預期中的失敗"""

    def __init__(self, message: str = "", context: dict | None = None):
        self.message = message
        self.context = context or {}
        super().__init__(message)


# ── 輸入相關 ──

class InputError(LocatorHelperError):
    """輸入文件相關錯誤，整次執行中止，不產生任何部分輸出"""


class XmlReadError(InputError):
    """無法讀取 XML 檔案"""

    def __init__(self, path: str = "", original: Exception | None = None):
        self.original = original
        msg = f"Cannot read XML file '{path}'"
        if original:
            msg += f": {original}"
        super().__init__(msg, context={"path": path})


class XmlParseError(InputError):
    """XML 格式錯誤"""

    def __init__(self, detail: str = "", path: str = ""):
        super().__init__(f"XML parse error: {detail}", context={"path": path, "detail": detail})


class MissingRootError(InputError):
    """文件沒有 document element"""

    def __init__(self, path: str = ""):
        super().__init__(
            "Parsed XML does not contain a document element.",
            context={"path": path},
        )


# ── 設定相關 ──

class ConfigError(LocatorHelperError):
    """設定相關錯誤，在開始分析前就會拋出"""


class UnsupportedLanguageError(ConfigError):
    """不支援的 snippet 語言"""

    def __init__(self, language: str = "", supported: tuple[str, ...] = ()):
        msg = f"Unsupported snippets language: {language}"
        if supported:
            msg += f" (supported: {', '.join(supported)})"
        super().__init__(msg, context={"language": language})


class SnippetsDirRequiredError(ConfigError):
    """指定了 snippet 語言卻沒給輸出目錄"""

    def __init__(self):
        super().__init__("Option '--snippets-lang' requires '--snippets-dir'.")


# ── 輸出相關 ──

class OutputError(LocatorHelperError):
    """報告 / snippet 寫檔錯誤"""


class ReportWriteError(OutputError):
    """無法寫出報告"""

    def __init__(self, path: str = "", original: Exception | None = None):
        self.original = original
        msg = f"Failed to write report to '{path}'"
        if original:
            msg += f": {original}"
        super().__init__(msg, context={"path": path})


class SnippetWriteError(OutputError):
    """無法寫出 snippet 檔案"""

    def __init__(self, path: str = "", original: Exception | None = None):
        self.original = original
        msg = "Failed to write language snippets"
        if original:
            msg += f": {original}"
        super().__init__(msg, context={"path": path})
