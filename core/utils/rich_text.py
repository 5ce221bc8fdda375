"""
Markdown-subset helpers for the CMS editor.

Toolbar actions insert token pairs around the current selection; the preview
renderer turns those tokens back into HTML with a fixed sequence of regexes.
"""

import html
import re
from typing import Dict, Tuple

# action -> (before, after)
FORMATS: Dict[str, Tuple[str, str]] = {
    "bold": ("**", "**"),
    "italic": ("*", "*"),
    "underline": ("<u>", "</u>"),
    "list": ("\n- ", ""),
    "ordered-list": ("\n1. ", ""),
    "link": ("[Link Text](", ")"),
    "image": ("![Alt Text](", ")"),
    "quote": ("\n> ", ""),
    "code": ("`", "`"),
}

_SAFE_URL = re.compile(r"^(https?://|mailto:|/|#)", re.IGNORECASE)

_BOLD = re.compile(r"\*\*(.*?)\*\*")
_ITALIC = re.compile(r"\*(.*?)\*")
_CODE = re.compile(r"`(.*?)`")
_UNDERLINE = re.compile(r"&lt;u&gt;(.*?)&lt;/u&gt;")
_IMAGE = re.compile(r"!\[(.*?)\]\((.*?)\)")
_LINK = re.compile(r"\[(.*?)\]\((.*?)\)")
_QUOTE = re.compile(r"^&gt; (.*)$", re.MULTILINE)
_BULLET = re.compile(r"^- (.*)$", re.MULTILINE)
_ORDERED = re.compile(r"^\d+\. (.*)$", re.MULTILINE)


def apply_format(text: str, start: int, end: int, fmt: str) -> Tuple[str, int, int]:
    """Wrap text[start:end] with the tokens for fmt.

    Returns the new text and the new selection, which covers the originally
    selected text inside the inserted tokens.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format: {fmt}")
    text = text or ""
    start = max(0, min(start, len(text)))
    end = max(start, min(end, len(text)))
    before, after = FORMATS[fmt]
    selected = text[start:end]
    new_text = text[:start] + before + selected + after + text[end:]
    sel_start = start + len(before)
    return new_text, sel_start, sel_start + len(selected)


def _safe_url(url: str) -> str:
    # url is already HTML-escaped; reject javascript: and friends
    url = url.strip()
    return url if _SAFE_URL.match(html.unescape(url)) else "#"


def render_preview(text: str) -> str:
    """Render the editor's markdown subset to HTML. Input HTML is escaped first."""
    if not text:
        return ""
    out = html.escape(text, quote=True)
    out = _BOLD.sub(r"<strong>\1</strong>", out)
    out = _ITALIC.sub(r"<em>\1</em>", out)
    out = _CODE.sub(r"<code>\1</code>", out)
    out = _UNDERLINE.sub(r"<u>\1</u>", out)
    out = _IMAGE.sub(lambda m: f'<img src="{_safe_url(m.group(2))}" alt="{m.group(1)}">', out)
    out = _LINK.sub(lambda m: f'<a href="{_safe_url(m.group(2))}">{m.group(1)}</a>', out)
    out = _QUOTE.sub(r"<blockquote>\1</blockquote>", out)
    out = _BULLET.sub(r"<li>\1</li>", out)
    out = _ORDERED.sub(r"<li>\1</li>", out)
    return out.replace("\n", "<br>")
