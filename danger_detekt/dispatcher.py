"""Turn a parsed Report into reporter callbacks.

Functions:
    dispatch(report, reporter, base_dir=None)  -> int
    format_message(issue)                      -> str
    relative_path(name, base_dir)              -> str
    parse_line(raw)                            -> int

A reporter is any callable taking ``(message, file_path, line)``. It is
called once per issue, in document order.
"""

import os
import re
from typing import Callable

from danger_detekt.models import IssueReport, Report, parse_line

Reporter = Callable[[str, str, int], None]

__all__ = ["Reporter", "dispatch", "format_message", "parse_line", "relative_path"]

_SEP_RUN_RE = re.compile(re.escape(os.sep) + "+")


def format_message(issue: IssueReport) -> str:
    return f"Detekt: {issue.message}, rule: {issue.source}"


def _collapse_separators(path: str) -> str:
    """Squeeze repeated separators and drop a trailing one; ``.``/``..`` stay."""
    path = _SEP_RUN_RE.sub(os.sep, path)
    if len(path) > 1:
        path = path.rstrip(os.sep)
    return path


def relative_path(name: str, base_dir: str) -> str:
    """Resolve *name* against *base_dir* and strip the ``base_dir/`` prefix.

    Paths outside *base_dir* come back absolute. Repeated and trailing
    separators are collapsed, but ``..`` segments and symlinks are left as
    detekt recorded them. A *base_dir* of the filesystem root never matches,
    so absolute names under it stay absolute.
    """
    base = os.path.abspath(base_dir)
    name = _collapse_separators(name)
    if not name:
        absolute = base
    elif os.path.isabs(name):
        absolute = name
    else:
        absolute = os.path.join(base, name)

    prefix = base + os.sep
    if absolute.startswith(prefix):
        return absolute[len(prefix):]
    return absolute


def dispatch(report: Report, reporter: Reporter, base_dir: str | None = None) -> int:
    """Invoke *reporter* for every issue in *report* and return the call count.

    *base_dir* defaults to the current working directory at call time.
    """
    if base_dir is None:
        base_dir = os.getcwd()

    count = 0
    for file_report in report.files:
        file_path = relative_path(file_report.name, base_dir)
        for issue in file_report.errors:
            reporter(format_message(issue), file_path, issue.line_number)
            count += 1
    return count
