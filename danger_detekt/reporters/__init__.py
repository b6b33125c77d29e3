"""Ready-made reporters.

A reporter is any callable ``(message, file_path, line) -> None``. The ones
here back the command-line host; the plugin itself only needs a HostContext.
"""

from danger_detekt.reporters.annotations import Annotation, AnnotationCollector, HostContext
from danger_detekt.reporters.github import GitHubReporter

__all__ = ["Annotation", "AnnotationCollector", "GitHubReporter", "HostContext"]
