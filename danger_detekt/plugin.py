"""Host-facing plugin object.

Usage:
    plugin = DetektPlugin(context=host)                 # host exposes warn(message, file, line)
    plugin.parse_and_report("build/reports/detekt.xml")
    plugin.parse_and_custom_report(my_reporter, "a.xml", "b.xml")

Report files are processed one at a time: open, parse, dispatch, close. An
exception on one file stops the remaining ones; issues already dispatched
from earlier files stay dispatched.
"""

import os

from danger_detekt.dispatcher import Reporter, dispatch
from danger_detekt.parser import DetektError, parse_file
from danger_detekt.reporters import HostContext


# ---------------------------------------------------------------------------
# Exceptions
# ---------------------------------------------------------------------------

class HostContextError(DetektError):
    """Raised when the default reporter is used before a host context is registered."""


# ---------------------------------------------------------------------------
# Plugin
# ---------------------------------------------------------------------------

class DetektPlugin:
    """Posts detekt issues as inline review warnings through the host context."""

    id = "danger-kotlin-detekt"

    def __init__(self, context: HostContext | None = None, base_dir: str | None = None) -> None:
        self.context = context
        # None means "the working directory at dispatch time"
        self.base_dir = base_dir

    def register(self, context: HostContext) -> None:
        """Attach the host context the default reporter forwards to."""
        self.context = context

    # ------------------------------------------------------------------
    # Public interface
    # ------------------------------------------------------------------

    def parse_and_report(self, *report_files: str | os.PathLike) -> int:
        """Parse detekt XML reports and post every issue as an inline warning.

        Returns the number of issues posted.

        Raises:
            HostContextError:     no host context registered
            MalformedReportError: a report is not well-formed XML
            OSError:              a report file cannot be opened
        """
        if self.context is None:
            raise HostContextError(
                f"Plugin '{self.id}' has no host context; call register() first."
            )
        return self._run(self._warn, report_files)

    def parse_and_custom_report(self, reporter: Reporter, *report_files: str | os.PathLike) -> int:
        """Same as parse_and_report() but every issue goes to *reporter*."""
        return self._run(reporter, report_files)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _warn(self, message: str, file_path: str, line: int) -> None:
        self.context.warn(message=message, file=file_path, line=line)

    def _run(self, reporter: Reporter, report_files) -> int:
        total = 0
        for path in report_files:
            report = parse_file(path)
            total += dispatch(report, reporter, self.base_dir)
        return total


default_plugin = DetektPlugin()
