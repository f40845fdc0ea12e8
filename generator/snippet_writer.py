"""
Snippet Writer
把每個元素的定位程式碼依語言寫到各自的子目錄。

輸出結構：
    <snippets-dir>/
    ├── java/locators.java
    ├── python/locators.py
    └── typescript/locators.ts
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from config.config import SUPPORTED_LANGUAGES, Config
from core.exceptions import SnippetWriteError
from core.models import ElementInfo
from generator.snippets import build_snippet
from utils.logger import logger


@dataclass(frozen=True)
class SnippetFileSpec:
    """單一語言的輸出檔規格"""
    dirname: str
    filename: str
    header: str
    comment_prefix: str


SNIPPET_FILES: dict[str, SnippetFileSpec] = {
    "java": SnippetFileSpec("java", "locators.java", "// Generated Appium Java snippets", "//"),
    "python": SnippetFileSpec("python", "locators.py", "# Generated Appium Python snippets", "#"),
    "typescript": SnippetFileSpec(
        "typescript", "locators.ts", "// Generated Appium TypeScript snippets", "//"
    ),
}


class SnippetWriter:
    """產生各語言的 locators 檔"""

    def __init__(self, base_dir: str | Path):
        self.base_dir = Path(base_dir).resolve()

    def render(self, elements: list[ElementInfo], language: str) -> str:
        """組出單一語言檔案的內容"""
        spec = SNIPPET_FILES[language]
        lines: list[str] = [spec.header]
        for el in elements:
            if el.locator is None:
                continue
            lines.append(f"{spec.comment_prefix} [{el.index}] {el.tag} ({el.locator.strategy.label})")
            lines.append(build_snippet(el.locator, language))
            lines.append("")
        return "\n".join(lines)

    def write(self, elements: list[ElementInfo], languages: list[str] | None = None) -> list[Path]:
        """
        寫出 snippet 檔。

        Args:
            elements: 已決定 locator 的元素
            languages: 要輸出的語言，None 或空列表代表全部

        Returns:
            寫出的檔案路徑

        Raises:
            SnippetWriteError: 建目錄或寫檔失敗
        """
        targets = [lang for lang in SUPPORTED_LANGUAGES if not languages or lang in languages]
        written: list[Path] = []

        for language in targets:
            spec = SNIPPET_FILES[language]
            target_dir = self.base_dir / spec.dirname
            file_path = target_dir / spec.filename
            try:
                target_dir.mkdir(parents=True, exist_ok=True)
                file_path.write_text(self.render(elements, language), encoding=Config.ENCODING)
            except OSError as e:
                raise SnippetWriteError(str(file_path), e) from e
            logger.info(f"寫出 {language} snippets: {file_path}")
            written.append(file_path)

        return written
