"""
Snippet 產生器

把定位建議轉成 Java / Python / TypeScript 的 Appium 呼叫程式碼，
並可依語言寫到各自的子目錄。

用法:
    from generator.snippets import build_code_snippets
    snippets = build_code_snippets(element.locator, ["python"])

    from generator.snippet_writer import SnippetWriter
    SnippetWriter("./snippets").write(result.elements)
"""
