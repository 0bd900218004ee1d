"""Static summary of the Liquidsoap 2.4.0 release notes."""

from __future__ import annotations

from liquidsoap_mcp.sections import DOC_BASE_URL, LIQUIDSOAP_VERSION

MIGRATION_GUIDE_URL = f"{DOC_BASE_URL}/migrating.html"

CHANGELOG = f"""# LiquidSoap {LIQUIDSOAP_VERSION} Changelog

## Language Improvements

- **Function argument destructuring**: Function arguments can now be destructured using the same patterns as variable assignment
- **Enhanced labelled arguments**: Improved syntax for labelled function arguments
- **Top-level variable warnings**: Warnings issued when erasing top-level variables
- **First-class null**: The `null` value is now a first-class constant; calls to `null()` are deprecated
- **Script path variable**: New variable `liquidsoap.script.path` exposes the current script's file path

## Core Changes

- **Asynchronous callbacks**: Callback functions have moved to source methods and execute asynchronously by default
- **New decoder API**: New file-to-file `decoder.add` API makes external decoders easier to implement
- **Insert metadata method**: Default `insert_metadata` method added to every source; older `insert_metadata` operator is deprecated
- **TLS client certificates**: Client-certificate support now available for TLS transports

## New Utilities

- **Cron support**: Added `cron.parse`, `cron.add`, and `cron.remove` for scheduling cron-like asynchronous tasks
- **LUFS loudness correction**: New LUFS-based per-track loudness correction function
- **Unified normalization**: `replaygain` replaced by unified `normalize_track_gain`

## Breaking Changes

- Callbacks moved to source methods and are asynchronous by default
- `insert_metadata` operator deprecated (use source method instead)
- `null()` function calls deprecated (use `null` constant)
- Many functions renamed or deprecated (see migration guide)

## Migration Guide

When migrating from earlier versions:

1. Update callback functions to use source methods
2. Replace `insert_metadata` operator calls with source methods
3. Replace `null()` with `null` constant
4. Check for deprecated function warnings and update to new names
5. Review asynchronous callback behavior

For complete details, see: {MIGRATION_GUIDE_URL}"""
