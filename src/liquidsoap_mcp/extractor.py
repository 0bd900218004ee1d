"""Regex-based HTML to plain text conversion.

Deliberately not a DOM parser: the output is a lossy, best-effort rendering
good enough for an agent to read. Only six named entities are decoded and
numeric references are left untouched.
"""

from __future__ import annotations

import re

_SCRIPT_RE = re.compile(r"<script\b[^<]*(?:(?!</script>)<[^<]*)*</script>", re.IGNORECASE)
_STYLE_RE = re.compile(r"<style\b[^<]*(?:(?!</style>)<[^<]*)*</style>", re.IGNORECASE)

_BREAK_RULES: tuple[tuple[re.Pattern[str], str], ...] = (
    (re.compile(r"<br\s*/?>", re.IGNORECASE), "\n"),
    (re.compile(r"</p>", re.IGNORECASE), "\n\n"),
    (re.compile(r"</div>", re.IGNORECASE), "\n"),
    (re.compile(r"</li>", re.IGNORECASE), "\n"),
)

_TAG_RE = re.compile(r"<[^>]+>")

# &amp; must stay last so "&amp;lt;" decodes to "&lt;", not "<"
_ENTITIES: tuple[tuple[str, str], ...] = (
    ("&nbsp;", " "),
    ("&quot;", '"'),
    ("&apos;", "'"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)

_BLANK_RUN_RE = re.compile(r"\n\s*\n\s*\n")


def extract_text(html: str) -> str:
    """Convert an HTML fragment to plain text.

    Steps (order matters):
      1. Drop <script> and <style> blocks
      2. Turn <br>, </p>, </div>, </li> into line breaks
      3. Strip every remaining tag
      4. Decode the six supported entities, &amp; last
      5. Collapse runs of blank lines to a single blank line
      6. Trim
    """
    text = _SCRIPT_RE.sub("", html)
    text = _STYLE_RE.sub("", text)

    for pattern, replacement in _BREAK_RULES:
        text = pattern.sub(replacement, text)
    text = _TAG_RE.sub("", text)

    for entity, char in _ENTITIES:
        text = text.replace(entity, char)

    text = _BLANK_RUN_RE.sub("\n\n", text)
    return text.strip()
