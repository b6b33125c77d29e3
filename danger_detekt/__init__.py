"""danger-detekt: post detekt findings as inline pull request comments."""

__version__ = "0.1.0"

from danger_detekt.models import FileReport, IssueReport, Report  # noqa: E402
from danger_detekt.parser import DetektError, MalformedReportError, parse, parse_file  # noqa: E402
from danger_detekt.plugin import DetektPlugin, HostContextError, default_plugin  # noqa: E402

parse_and_report = default_plugin.parse_and_report
parse_and_custom_report = default_plugin.parse_and_custom_report

__all__ = [
    "DetektError",
    "DetektPlugin",
    "FileReport",
    "HostContextError",
    "IssueReport",
    "MalformedReportError",
    "Report",
    "default_plugin",
    "parse",
    "parse_and_custom_report",
    "parse_and_report",
    "parse_file",
]
