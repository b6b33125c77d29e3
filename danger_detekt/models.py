"""Data models for detekt XML reports.

Contains frozen dataclasses mirroring the checkstyle-style schema:
    - Report       (root ``<checkstyle>`` element)
    - FileReport   (``<file name="...">``)
    - IssueReport  (``<error line=".." column=".." severity=".." message=".." source=".."/>``)

Every attribute defaults to an empty value so a sparse report still yields
a complete model.
"""

import re
from dataclasses import dataclass

_INT_RE = re.compile(r"[+-]?\d+")
_INT_MIN = -(2 ** 31)
_INT_MAX = 2 ** 31 - 1


def parse_line(raw: str) -> int:
    """Return *raw* as an integer line number, or 0 when it is not one.

    Only an optional sign followed by decimal digits (any Unicode script) is
    accepted. Whitespace, underscores, decimals and values outside the
    signed 32-bit range all fall back to 0.
    """
    if not raw or not _INT_RE.fullmatch(raw):
        return 0
    value = int(raw)
    if value < _INT_MIN or value > _INT_MAX:
        return 0
    return value


@dataclass(frozen=True)
class IssueReport:
    line: str = ""
    column: str = ""
    severity: str = ""
    message: str = ""
    source: str = ""

    @property
    def line_number(self) -> int:
        return parse_line(self.line)


@dataclass(frozen=True)
class FileReport:
    name: str = ""
    errors: tuple[IssueReport, ...] = ()


@dataclass(frozen=True)
class Report:
    files: tuple[FileReport, ...] = ()

    @property
    def issue_count(self) -> int:
        """Total number of issues across all files."""
        return sum(len(f.errors) for f in self.files)
