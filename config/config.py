"""
設定管理模組
統一管理日誌、snippet 語言、輸出編碼等設定。
支援透過環境變數覆蓋預設值，方便 CI/CD 整合。
"""

import os
from pathlib import Path


# 支援的 snippet 語言（順序即輸出順序）
SUPPORTED_LANGUAGES: tuple[str, ...] = ("java", "python", "typescript")


def _env_list(name: str) -> list[str]:
    raw = os.getenv(name, "")
    return [token for token in raw.split(",") if token.strip()]


class Config:
    """全域設定"""

    # 日誌
    LOG_LEVEL = os.getenv("LOG_LEVEL", "WARNING").upper()
    LOG_JSON = os.getenv("LOG_JSON", "").strip() == "1"
    LOG_DIR = Path(os.environ["LOG_DIR"]) if os.getenv("LOG_DIR") else None

    # 輸出
    ENCODING = os.getenv("LOCATOR_ENCODING", "utf-8")

    # 沒有名稱的節點用這個 tag
    FALLBACK_TAG = "node"

    # 預設 snippet 語言（空 = 全部）
    SNIPPET_LANGUAGES = _env_list("SNIPPET_LANGUAGES")

    @classmethod
    def resolve_languages(cls, tokens: list[str] | None = None) -> list[str]:
        """
        解析並驗證 snippet 語言。

        每個 token 可以是逗號分隔的清單，不分大小寫，
        重複的語言只保留第一次出現的位置。

        Args:
            tokens: 使用者輸入的語言 token，None 時改用 SNIPPET_LANGUAGES

        Returns:
            正規化後的語言列表（可能為空，代表全部）

        Raises:
            UnsupportedLanguageError: 出現不支援的語言
        """
        from core.exceptions import UnsupportedLanguageError

        if tokens is None:
            tokens = cls.SNIPPET_LANGUAGES

        resolved: list[str] = []
        for token in tokens:
            for raw in token.split(","):
                normalized = raw.strip().lower()
                if not normalized:
                    continue
                if normalized not in SUPPORTED_LANGUAGES:
                    raise UnsupportedLanguageError(raw.strip(), SUPPORTED_LANGUAGES)
                if normalized not in resolved:
                    resolved.append(normalized)
        return resolved
