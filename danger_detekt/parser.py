"""detekt XML report parser.

Usage:
    with open("build/reports/detekt/detekt.xml", "rb") as f:
        report = parse(f)                  # raises MalformedReportError on bad XML
    report = parse_file("detekt.xml")      # same, opens and closes the file itself

Only direct ``file`` children of the root and direct ``error`` children of
each ``file`` are read. Anything else in the document is ignored so newer
report schemas keep parsing.
"""

import os
import warnings
from typing import BinaryIO

from lxml import etree

from danger_detekt.models import FileReport, IssueReport, Report

_ISSUE_FIELDS = ("line", "column", "severity", "message", "source")


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class DetektError(Exception):
    """Base exception for all plugin errors."""


class MalformedReportError(DetektError):
    """Raised when a report is not well-formed XML or has no root element."""


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def parse(stream: BinaryIO) -> Report:
    """Deserialize the XML document in *stream* into a Report.

    The caller owns *stream*; it is read to the end but never closed here.

    Raises:
        MalformedReportError: empty stream, non-XML content or missing root.
    """
    try:
        tree = etree.parse(stream, _make_parser())
    except etree.XMLSyntaxError as exc:
        raise MalformedReportError(f"Report is not well-formed XML: {exc}") from exc

    root = tree.getroot()
    if root is None:
        raise MalformedReportError("Report has no root element.")

    return Report(files=tuple(_read_file(el) for el in root.iterchildren("file")))


def parse_file(path: str | os.PathLike) -> Report:
    """Open *path*, parse it and close it again, even when parsing fails."""
    with open(path, "rb") as f:
        return parse(f)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _make_parser() -> etree.XMLParser:
    # No entity expansion, no network access.
    return etree.XMLParser(resolve_entities=False, no_network=True, remove_comments=True)


def _read_file(element) -> FileReport:
    name = element.get("name")
    if name is None:
        warnings.warn(
            f"<file> element on line {element.sourceline} has no 'name' attribute; "
            "its issues will be reported against the base directory.",
            UserWarning,
            stacklevel=3,
        )
        name = ""
    errors = tuple(_read_issue(el) for el in element.iterchildren("error"))
    return FileReport(name=name, errors=errors)


def _read_issue(element) -> IssueReport:
    return IssueReport(**{field: element.get(field, "") for field in _ISSUE_FIELDS})
