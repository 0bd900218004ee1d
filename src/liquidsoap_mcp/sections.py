"""Fixed catalog of Liquidsoap documentation sections.

The version and host are constants: the changelog, examples and validator
rules all describe this one release.
"""

from __future__ import annotations

from types import MappingProxyType

from liquidsoap_mcp.errors import UnknownSectionError
from liquidsoap_mcp.models.sections import DocSection

LIQUIDSOAP_VERSION = "2.4.0"
DOC_HOST = "https://www.liquidsoap.info"
DOC_BASE_URL = f"{DOC_HOST}/doc-{LIQUIDSOAP_VERSION}"

# (key, page name on the docs site, description)
_SECTION_TABLE: tuple[tuple[str, str, str], ...] = (
    (
        "language",
        "language",
        "Complete language reference including syntax, types, functions, and modules",
    ),
    (
        "reference",
        "reference",
        "Core API reference with all built-in functions and operators",
    ),
    ("protocols", "protocols", "Supported protocols (HTTP, Icecast, HLS, etc.)"),
    ("settings", "settings", "Runtime configuration settings"),
    ("ffmpeg", "ffmpeg", "FFmpeg integration and filters"),
    ("quickstart", "quick_start", "Getting started tutorial"),
    ("cookbook", "cookbook", "Common recipes and patterns"),
    ("encoding_formats", "encoding_formats", "Audio and video encoding formats"),
)


def section_url(page: str) -> str:
    return f"{DOC_BASE_URL}/{page}.html"


DOC_SECTIONS: MappingProxyType[str, DocSection] = MappingProxyType(
    {
        key: DocSection(key=key, url=section_url(page), description=description)
        for key, page, description in _SECTION_TABLE
    }
)

REFERENCE_URL = DOC_SECTIONS["reference"].url


def get_section(key: str) -> DocSection:
    """Look up a section by key, raising UnknownSectionError with the valid keys."""
    section = DOC_SECTIONS.get(key)
    if section is None:
        available = ", ".join(DOC_SECTIONS)
        raise UnknownSectionError(
            message=f"Unknown section: {key}. Available: {available}",
            suggestion="Call list_sections to see every documentation section.",
        )
    return section
