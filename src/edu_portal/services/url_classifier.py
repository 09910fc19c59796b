"""
链接校验与分类
"""
from urllib.parse import urlparse

GOOGLE_SLIDES = "Google Slides"
GOOGLE_DOCS = "Google Docs"
GOOGLE_SHEETS = "Google Sheets"
YOUTUBE_VIDEO = "YouTube Video"
WEB_URL = "Web URL"

# 按优先级排列，首个命中的生效
_RULES = [
    (GOOGLE_SLIDES, ("docs.google.com/presentation", "slides.google.com")),
    (GOOGLE_DOCS, ("docs.google.com/document",)),
    (GOOGLE_SHEETS, ("docs.google.com/spreadsheets",)),
    (YOUTUBE_VIDEO, ("youtube.com", "youtu.be")),
]


def is_valid_url(url: str) -> bool:
    """检查是否是有效的绝对 http(s) URL"""
    try:
        result = urlparse(url)
        return all([result.scheme, result.netloc]) and result.scheme in ["http", "https"]
    except ValueError:
        return False


def classify_url(url: str) -> str:
    """根据链接内容判断资料类型标签"""
    for label, markers in _RULES:
        if any(marker in url for marker in markers):
            return label
    return WEB_URL
