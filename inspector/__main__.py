"""
Smart Locator CLI 入口

用法:
    # 分析 page source，報告印到 stdout
    python -m inspector page.xml

    # 報告寫到檔案
    python -m inspector page.xml -o report.txt

    # 同時輸出各語言 snippets
    python -m inspector page.xml --snippets-dir ./snippets

    # 只輸出部分語言（可重複、可逗號分隔）
    python -m inspector page.xml --snippets-dir ./snippets --snippets-lang java,python

    # JSON 格式報告
    python -m inspector page.xml --format json
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from config.config import SUPPORTED_LANGUAGES, Config
from core.exceptions import LocatorHelperError, ReportWriteError, SnippetsDirRequiredError
from generator.snippet_writer import SnippetWriter
from inspector.analyzer import LocatorAnalyzer
from inspector.report import build_json_report, build_report
from utils.logger import logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smart-locator",
        description="Appium Smart Locator Helper — 為 page source 中每個元素推薦最穩定的 locator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "xml_path",
        help="UIAutomator / Appium page source XML 檔案",
    )
    parser.add_argument(
        "--output", "-o",
        help="報告輸出檔案（預設印到 stdout）",
    )
    parser.add_argument(
        "--snippets-dir",
        help="各語言 snippet 檔的輸出目錄",
    )
    parser.add_argument(
        "--snippets-lang",
        action="append",
        help=f"只輸出指定語言，可重複或逗號分隔 ({', '.join(SUPPORTED_LANGUAGES)})",
    )
    parser.add_argument(
        "--format",
        choices=["text", "json"],
        default="text",
        help="報告格式 (預設 text)",
    )
    return parser


def run(args: argparse.Namespace) -> None:
    """
    執行一次完整分析。

    設定錯誤在讀檔前就拋出；任何失敗都不會留下部分輸出。

    Raises:
        LocatorHelperError: 任何預期中的失敗
    """
    if args.snippets_lang:
        languages = Config.resolve_languages(args.snippets_lang)
        if languages and not args.snippets_dir:
            raise SnippetsDirRequiredError()
    else:
        languages = Config.resolve_languages()

    result = LocatorAnalyzer().analyze(args.xml_path)

    if args.format == "json":
        report = build_json_report(result)
    else:
        report = build_report(result)

    if args.output:
        try:
            Path(args.output).write_text(report, encoding=Config.ENCODING)
        except OSError as e:
            raise ReportWriteError(args.output, e) from e
        logger.info(f"報告已寫到 {args.output}")
    else:
        print(report)

    if args.snippets_dir:
        SnippetWriter(args.snippets_dir).write(result.elements, languages)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        run(args)
    except LocatorHelperError as e:
        logger.debug(f"執行失敗: {e.context}", exc_info=True)
        print(e.message, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
