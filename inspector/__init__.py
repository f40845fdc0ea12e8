"""
inspector — 離線 page source 定位分析

流程：
    讀取 XML → 前序走訪編號 → 全域唯一性統計 →
    逐一決定 locator → 輸出報告 + 各語言 snippets

不連線裝置，也不驗證 locator 在執行期是否真的能找到元素。
"""
