"""liquidsoap-mcp: Liquidsoap 2.4.0 documentation tools served over MCP.

``__version__`` is the installed distribution's version. It is reported by
the ``get_version`` tool and in the MCP initialize handshake.
"""

from __future__ import annotations

import warnings
from importlib.metadata import PackageNotFoundError, version

DIST_NAME = "liquidsoap-mcp"
FALLBACK_VERSION = "0.0.0+unknown"

try:
    __version__ = version(DIST_NAME)
except PackageNotFoundError:
    # Imported from a checkout that was never pip-installed
    warnings.warn(
        f"No installed metadata for {DIST_NAME!r}; reporting version {FALLBACK_VERSION!r}.",
        RuntimeWarning,
        stacklevel=2,
    )
    __version__ = FALLBACK_VERSION
