"""
pytest 全域 fixtures

提供：
- 範例 UIAutomator page source
- 寫出 XML 檔的工廠 fixture
- 直接從 XML 字串跑完整分析的 fixture
"""

import textwrap

import pytest

from core.xml_source import parse_document
from inspector.analyzer import LocatorAnalyzer


SAMPLE_PAGE_SOURCE = textwrap.dedent("""\
    <?xml version="1.0" encoding="UTF-8"?>
    <hierarchy rotation="0">
      <node class="android.widget.FrameLayout" package="com.example.app" bounds="[0,0][1080,2340]">
        <node class="android.widget.EditText" resource-id="com.example.app:id/username" text="" bounds="[60,400][1020,520]"/>
        <node class="android.widget.EditText" resource-id="com.example.app:id/password" text="" bounds="[60,560][1020,680]"/>
        <node class="android.widget.Button" resource-id="com.example.app:id/login" text="Login" bounds="[60,720][1020,840]"/>
        <node class="android.widget.ImageButton" content-desc="Help" bounds="[960,60][1040,140]"/>
        <node class="android.widget.TextView" text="Forgot password?" bounds="[60,880][500,940]"/>
        <node class="android.widget.TextView" text="v1.0" bounds="[60,2200][200,2260]"/>
        <node class="android.widget.TextView" text="v1.0" bounds="[900,2200][1020,2260]"/>
      </node>
    </hierarchy>
""")


@pytest.fixture
def sample_page_source() -> str:
    """典型的登入頁 page source"""
    return SAMPLE_PAGE_SOURCE


@pytest.fixture
def write_xml(tmp_path):
    """把 XML 字串寫成檔案，回傳路徑"""

    def _write(content: str, name: str = "page.xml"):
        path = tmp_path / name
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def analyze_xml():
    """直接從 XML 字串跑完整分析，回傳 AnalysisResult"""

    def _analyze(content: str, source: str = "inline.xml"):
        return LocatorAnalyzer().analyze_root(parse_document(content), source)

    return _analyze
