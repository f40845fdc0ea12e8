"""
XML 文件載入

讀取 UIAutomator / Appium page source 並解析成 ElementTree 根節點。
任何讀取 / 解析失敗都轉成 InputError 子類別，由 CLI 統一回報。
"""

from __future__ import annotations

from pathlib import Path
from xml.etree import ElementTree
from xml.parsers import expat

from core.exceptions import MissingRootError, XmlParseError, XmlReadError
from utils.logger import logger

_NO_ELEMENTS = expat.errors.codes[expat.errors.XML_ERROR_NO_ELEMENTS]


class _TrackingTreeBuilder(ElementTree.TreeBuilder):
    """記錄是否出現過任何開始 tag"""

    def __init__(self):
        super().__init__()
        self.started = False

    def start(self, tag, attrs):
        self.started = True
        return super().start(tag, attrs)


def parse_document(content: str | bytes, path: str = "") -> ElementTree.Element:
    """
    解析 XML 字串 / bytes。

    expat 對「沒有元素」與「元素沒關閉」回報同一個錯誤碼，
    所以要看有沒有出現過開始 tag 才能區分。

    Raises:
        MissingRootError: 文件沒有任何元素
        XmlParseError: XML 格式錯誤
    """
    builder = _TrackingTreeBuilder()
    parser = ElementTree.XMLParser(target=builder)
    try:
        parser.feed(content)
        root = parser.close()
    except ElementTree.ParseError as e:
        if e.code == _NO_ELEMENTS and not builder.started:
            raise MissingRootError(path) from e
        raise XmlParseError(str(e), path) from e
    if root is None:
        raise MissingRootError(path)
    return root


def load_document(path: str | Path) -> ElementTree.Element:
    """
    從檔案載入 XML 根節點。

    以 bytes 讀入，讓 parser 依 XML 宣告自行判斷編碼。

    Raises:
        XmlReadError: 檔案無法讀取
        MissingRootError / XmlParseError: 同 parse_document
    """
    xml_path = Path(path)
    try:
        content = xml_path.read_bytes()
    except OSError as e:
        raise XmlReadError(str(xml_path), e) from e

    logger.debug(f"讀取 {xml_path} ({len(content)} bytes)")
    return parse_document(content, str(xml_path))
