"""Line-oriented function search over the API reference page.

Matching is a case-insensitive substring test against each raw HTML line,
not a tokenised or fuzzy search.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from liquidsoap_mcp.extractor import extract_text

if TYPE_CHECKING:
    from liquidsoap_mcp.protocols import FetcherProtocol

MATCH_SEPARATOR = "\n---\n"


def find_matches(html: str, query: str, context_lines: int = 2) -> list[str]:
    """Return the extracted text of a context window around every matching line."""
    lines = html.split("\n")
    needle = query.lower()
    matches: list[str] = []

    for i, line in enumerate(lines):
        if needle not in line.lower():
            continue
        start = max(0, i - context_lines)
        end = min(len(lines), i + context_lines + 1)
        matches.append(extract_text("\n".join(lines[start:end])))

    return matches


def format_report(query: str, matches: list[str], max_results: int = 10) -> str:
    if not matches:
        return f'No functions found matching "{query}". Try a different search term.'
    shown = MATCH_SEPARATOR.join(matches[:max_results])
    return f'Found {len(matches)} matches for "{query}":\n\n{shown}'


async def search_functions(
    query: str,
    fetcher: FetcherProtocol,
    *,
    url: str,
    max_results: int = 10,
    context_lines: int = 2,
) -> str:
    """Fetch the reference page at ``url`` and report lines mentioning ``query``.

    The header always carries the total match count, even when only the
    first ``max_results`` windows are included.
    """
    html = await fetcher.fetch(url)
    matches = find_matches(html, query, context_lines=context_lines)
    return format_report(query, matches, max_results=max_results)
