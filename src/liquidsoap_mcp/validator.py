"""Heuristic Liquidsoap script checks.

This is pattern matching, not a parser. Every rule is independent and may
misfire: the parenthesis rule looks at one line at a time, so a call split
across several lines is reported as unmatched. ``liquidsoap --check`` is the
authoritative validator and every report says so.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

CHECK_COMMAND = "liquidsoap --check script.liq"

NULL_CALL_WARNING = "⚠️  Use of deprecated null() function. Use 'null' constant instead."
INSERT_METADATA_WARNING = (
    "⚠️  Deprecated insert_metadata operator. Use source.insert_metadata() method instead."
)
REPLAYGAIN_WARNING = "⚠️  'replaygain' is deprecated. Use 'normalize_track_gain' instead."
OUTPUT_WARNING = "⚠️  Output statement may be incomplete or missing required parameters"

# Searched over the whole script, so the argument list may span lines
_OUTPUT_CALL_RE = re.compile(r"output\.\w+\([^)]*\)")


@dataclass
class ValidationReport:
    issues: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    @property
    def clean(self) -> bool:
        return not self.issues and not self.warnings

    def render(self) -> str:
        result = "# Script Validation Results\n\n"

        if self.clean:
            result += "✅ No obvious syntax issues or deprecated usage detected.\n\n"
            result += f"Note: This is a basic check. Run '{CHECK_COMMAND}' for comprehensive validation."
            return result

        if self.issues:
            result += "## Issues\n" + "\n".join(self.issues) + "\n\n"
        if self.warnings:
            result += "## Warnings\n" + "\n".join(self.warnings) + "\n\n"
        result += f"Run '{CHECK_COMMAND}' for comprehensive validation."
        return result


def _deprecation_warnings(script: str) -> list[str]:
    warnings: list[str] = []
    if "null()" in script:
        warnings.append(NULL_CALL_WARNING)
    if "insert_metadata(" in script and ".insert_metadata(" not in script:
        warnings.append(INSERT_METADATA_WARNING)
    if "replaygain" in script:
        warnings.append(REPLAYGAIN_WARNING)
    return warnings


def _unbalanced_lines(script: str) -> list[str]:
    issues: list[str] = []
    for lineno, raw in enumerate(script.split("\n"), start=1):
        line = raw.strip()
        if line.startswith("#"):
            continue
        if line.count("(") != line.count(")"):
            issues.append(f"Line {lineno}: Unmatched parentheses")
    return issues


def validate_script(script: str) -> ValidationReport:
    """Run every heuristic check over ``script``."""
    report = ValidationReport()
    report.warnings.extend(_deprecation_warnings(script))
    report.issues.extend(_unbalanced_lines(script))

    if "output." in script and not _OUTPUT_CALL_RE.search(script):
        report.warnings.append(OUTPUT_WARNING)

    return report
